"""Move executor: applies an already validated move to a board."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import PieceType
from chessrules.core.errors import EmptySquareError
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_WIDTH, Square


def execute(board: Board, from_sq: Square, to_sq: Square) -> Piece:
    """Move the piece on *from_sq* to *to_sq* and return it as placed.

    *to_sq* must come from the legal (or at least pseudo-legal) move set of
    *from_sq*; nothing is re-validated here. Special-move side effects are
    resolved in place: the double-step en-passant flag, removal of a pawn
    captured en passant, and the rook jump of a castling king.
    """
    piece = board[from_sq]
    if piece is None:
        raise EmptySquareError(f"{from_sq} should contain a piece")

    piece = piece.moved()
    capture_sq = to_sq

    if piece.piece_type == PieceType.PAWN:
        if from_sq.file != to_sq.file:
            beside = Square(to_sq.file, from_sq.rank)
            if board.is_empty(to_sq) and _is_en_passant_victim(board, beside, piece):
                capture_sq = beside
        elif abs(to_sq.rank - from_sq.rank) == 2:
            piece = piece.with_en_passant(True)
    elif piece.piece_type == PieceType.KING and abs(to_sq.file - from_sq.file) == 2:
        _move_castling_rook(board, from_sq, to_sq)

    board[from_sq] = None
    board[capture_sq] = None
    board[to_sq] = piece
    return piece


def _is_en_passant_victim(board: Board, sq: Square, attacker: Piece) -> bool:
    victim = board[sq]
    return (
        victim is not None
        and victim.color != attacker.color
        and victim.is_pawn
        and victim.en_passant_eligible
    )


def _move_castling_rook(board: Board, king_from: Square, king_to: Square) -> None:
    step = 1 if king_to.file > king_from.file else -1
    rook_from = Square(BOARD_WIDTH - 1 if step > 0 else 0, king_from.rank)
    rook_to = Square(king_to.file - step, king_from.rank)

    rook = board[rook_from]
    if rook is None:
        raise EmptySquareError(f"castling rook missing on {rook_from}")
    board[rook_from] = None
    board[rook_to] = rook.moved()
