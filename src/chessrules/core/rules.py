"""High-level chess rules: legality filter, check, checkmate, stalemate."""

from __future__ import annotations

from typing import TypeAlias

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType, TurnState
from chessrules.core.executor import execute
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.types import Square

LegalMoveTable: TypeAlias = dict[Square, frozenset[Square]]


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    Legality is decided by simulation: every pseudo-legal candidate is
    executed on the real board, the mover's king is tested, and the board
    is restored from a snapshot before the next candidate is tried.
    """

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        king_sq = board.king_square(color)
        return king_sq in MoveGenerator(board).attacked_squares(color.opposite)

    @staticmethod
    def legal_moves(board: Board, sq: Square) -> frozenset[Square]:
        """Destinations of the piece on *sq* that keep its own king safe."""
        piece = board[sq]
        if piece is None:
            return frozenset()

        color = piece.color
        legal: set[Square] = set()
        for to_sq in MoveGenerator(board).pseudo_legal_moves(sq):
            if not Rules._leaves_king_attacked(board, sq, to_sq, color):
                legal.add(to_sq)

        if piece.piece_type == PieceType.KING and not piece.has_moved:
            for dest in MoveGenerator.castling_destinations(sq):
                if dest in legal and Rules._castles_through_check(board, sq, dest, color):
                    legal.discard(dest)
        return frozenset(legal)

    @staticmethod
    def legal_move_table(board: Board, color: Color) -> LegalMoveTable:
        """Legal destinations for every *color* piece that can move."""
        table: LegalMoveTable = {}
        for sq, _piece in board.pieces(color):
            moves = Rules.legal_moves(board, sq)
            if moves:
                table[sq] = moves
        return table

    @staticmethod
    def has_legal_move(board: Board, color: Color) -> bool:
        return any(Rules.legal_moves(board, sq) for sq, _piece in board.pieces(color))

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        if not Rules.is_in_check(board, color):
            return False
        return not Rules.has_legal_move(board, color)

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        if Rules.is_in_check(board, color):
            return False
        return not Rules.has_legal_move(board, color)

    @staticmethod
    def turn_state(
        board: Board,
        color: Color,
        table: LegalMoveTable | None = None,
    ) -> TurnState:
        """Classify *color*'s position; reuses *table* when already computed."""
        in_check = Rules.is_in_check(board, color)
        if table is None:
            has_move = Rules.has_legal_move(board, color)
        else:
            has_move = any(table.values())

        if not has_move:
            return TurnState.CHECKMATE if in_check else TurnState.STALEMATE
        return TurnState.CHECK if in_check else TurnState.NORMAL

    # -- Simulation helpers (private) ---------------------------------------

    @staticmethod
    def _leaves_king_attacked(
        board: Board, from_sq: Square, to_sq: Square, color: Color
    ) -> bool:
        saved = board.snapshot()
        try:
            execute(board, from_sq, to_sq)
            return Rules.is_in_check(board, color)
        finally:
            board.restore(saved)

    @staticmethod
    def _castles_through_check(
        board: Board, king_sq: Square, dest: Square, color: Color
    ) -> bool:
        """Whether the king is attacked on its start square or on the way.

        The destination itself is covered by the ordinary filter.
        """
        if Rules.is_in_check(board, color):
            return True
        step = 1 if dest.file > king_sq.file else -1
        waypoint = king_sq.offset(step, 0)
        while waypoint != dest:
            if Rules._leaves_king_attacked(board, king_sq, waypoint, color):
                return True
            waypoint = waypoint.offset(step, 0)
        return False
