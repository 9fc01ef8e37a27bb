"""Pseudo-legal move generation + attack sets."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_WIDTH, Square, is_valid_square

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_SLIDER_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}

# (king file step, rook file) for kingside and queenside castling.
CASTLING_SIDES: tuple[tuple[int, int], ...] = ((1, BOARD_WIDTH - 1), (-1, 0))


class MoveGenerator:
    """Generates pseudo-legal destinations on a :class:`Board`.

    Pseudo-legal means the piece's movement pattern and occupancy rules are
    respected, but the mover's own king may be left in check. See
    :class:`chessrules.core.rules.Rules` for the legality filter.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def pseudo_legal_moves(self, sq: Square) -> frozenset[Square]:
        """Destinations of the piece on *sq* (empty when *sq* is empty)."""
        piece = self._board[sq]
        if piece is None:
            return frozenset()

        moves: set[Square] = set()
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            self._gen_pawn(sq, piece, moves)
        elif ptype == PieceType.KNIGHT:
            self._gen_steps(sq, piece.color, KNIGHT_OFFSETS, moves)
        elif ptype == PieceType.KING:
            self._gen_king(sq, piece, moves)
        else:
            self._gen_sliding(sq, piece.color, _SLIDER_DIRS[ptype], moves)
        return frozenset(moves)

    def attacked_squares(self, color: Color) -> frozenset[Square]:
        """Union of pseudo-legal destinations of every *color* piece."""
        attacked: set[Square] = set()
        for sq, _piece in self._board.pieces(color):
            attacked |= self.pseudo_legal_moves(sq)
        return frozenset(attacked)

    @staticmethod
    def castling_destinations(king_sq: Square) -> tuple[Square, ...]:
        """On-board squares a king on *king_sq* would land on when castling."""
        dests = (king_sq.offset(2 * step, 0) for step, _rook_file in CASTLING_SIDES)
        return tuple(sq for sq in dests if is_valid_square(sq))

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, piece: Piece, moves: set[Square]) -> None:
        board = self._board
        color = piece.color
        direction = color.pawn_direction
        reach = 1 if piece.has_moved else 2

        for step in range(1, reach + 1):
            to_sq = sq.offset(0, step * direction)
            if not is_valid_square(to_sq) or not board.is_empty(to_sq):
                break
            moves.add(to_sq)

        enemy = color.opposite
        for df in (-1, 1):
            cap_sq = sq.offset(df, direction)
            if not is_valid_square(cap_sq):
                continue
            if board.is_color(cap_sq, enemy):
                moves.add(cap_sq)
                continue
            # En passant: the victim sits beside the pawn, not on cap_sq.
            beside = sq.offset(df, 0)
            victim = board[beside]
            if (
                board.is_empty(cap_sq)
                and victim is not None
                and victim.color == enemy
                and victim.is_pawn
                and victim.en_passant_eligible
            ):
                moves.add(cap_sq)

    def _gen_steps(
        self,
        sq: Square,
        color: Color,
        offsets: tuple[tuple[int, int], ...],
        moves: set[Square],
    ) -> None:
        board = self._board
        for df, dr in offsets:
            to_sq = sq.offset(df, dr)
            if not is_valid_square(to_sq):
                continue
            target = board[to_sq]
            if target is None or target.color != color:
                moves.add(to_sq)

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        directions: tuple[tuple[int, int], ...],
        moves: set[Square],
    ) -> None:
        board = self._board
        for df, dr in directions:
            to_sq = sq.offset(df, dr)
            while is_valid_square(to_sq):
                target = board[to_sq]
                if target is None:
                    moves.add(to_sq)
                    to_sq = to_sq.offset(df, dr)
                    continue
                if target.color != color:
                    moves.add(to_sq)
                break

    def _gen_king(self, sq: Square, piece: Piece, moves: set[Square]) -> None:
        self._gen_steps(sq, piece.color, KING_OFFSETS, moves)
        if not piece.has_moved:
            self._gen_castling(sq, piece.color, moves)

    def _gen_castling(self, king_sq: Square, color: Color, moves: set[Square]) -> None:
        board = self._board
        for step, rook_file in CASTLING_SIDES:
            dest = king_sq.offset(2 * step, 0)
            if not is_valid_square(dest):
                continue
            rook = board[Square(rook_file, king_sq.rank)]
            if (
                rook is None
                or rook.piece_type != PieceType.ROOK
                or rook.color != color
                or rook.has_moved
            ):
                continue
            between = range(min(king_sq.file, rook_file) + 1, max(king_sq.file, rook_file))
            if all(board.is_empty(Square(f, king_sq.rank)) for f in between):
                moves.add(dest)
