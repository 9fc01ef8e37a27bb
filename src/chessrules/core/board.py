"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeAlias

from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import InvalidSetupError, MissingKingError
from chessrules.core.piece import Piece
from chessrules.core.types import (
    ALL_SQUARES,
    BOARD_HEIGHT,
    BOARD_SIZE,
    BOARD_WIDTH,
    Square,
    is_valid_square,
)

BoardSnapshot: TypeAlias = tuple[Piece | None, ...]

# Rank 8 first, as seen from White's side.
STANDARD_SETUP = (
    "rnbqkbnr"
    "pppppppp"
    "--------"
    "--------"
    "--------"
    "--------"
    "PPPPPPPP"
    "RNBQKBNR"
)

_EMPTY_CHAR = "-"


class Board:
    """Mutable 64-square board addressed by ``rank * 8 + file``.

    Pieces are immutable values, so :meth:`snapshot` is a plain tuple copy
    and restoring it can never alias a piece that was changed meanwhile.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * BOARD_SIZE

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq.rank * BOARD_WIDTH + sq.file]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq.rank * BOARD_WIDTH + sq.file] = piece

    def get(self, sq: Square) -> Piece | None:
        return self[sq]

    # -- Query helpers ------------------------------------------------------

    @staticmethod
    def is_in_bounds(sq: tuple[int, int]) -> bool:
        return is_valid_square(sq)

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    def is_color(self, sq: Square, color: Color) -> bool:
        """Whether *sq* holds a piece of *color* (False when empty)."""
        piece = self[sq]
        return piece is not None and piece.color == color

    def pieces(self, color: Color | None = None) -> Iterator[tuple[Square, Piece]]:
        """``(square, piece)`` pairs in index order, optionally for one color."""
        for sq, piece in zip(ALL_SQUARES, tuple(self._squares)):
            if piece is None:
                continue
            if color is None or piece.color == color:
                yield sq, piece

    def king_square(self, color: Color) -> Square:
        """Return the single king square for *color*."""
        for sq, piece in self.pieces(color):
            if piece.piece_type == PieceType.KING:
                return sq
        raise MissingKingError(f"No {color.name} king on board")

    # -- Snapshot / copying -------------------------------------------------

    def snapshot(self) -> BoardSnapshot:
        """Value copy of every slot."""
        return tuple(self._squares)

    def restore(self, snapshot: BoardSnapshot) -> None:
        self._squares[:] = snapshot

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        return cls.from_setup(STANDARD_SETUP)

    @classmethod
    def from_setup(cls, setup: str) -> Board:
        """Build a board from 64 piece letters, rank 8 first.

        ``-`` marks an empty square and whitespace is ignored. Pieces found
        away from their home squares are flagged as moved, so a custom
        position cannot double-step an advanced pawn or castle with a
        displaced rook. A second king of either color is rejected; a missing
        king only surfaces once the rules look for it.
        """
        cells = "".join(setup.split())
        if len(cells) != BOARD_SIZE:
            raise InvalidSetupError(
                f"Setup must describe {BOARD_SIZE} squares, got {len(cells)}"
            )

        b = cls()
        for pos, char in enumerate(cells):
            if char == _EMPTY_CHAR:
                continue
            try:
                piece = Piece.from_char(char)
            except ValueError:
                raise InvalidSetupError(f"invalid board configuration: {char!r}") from None
            sq = Square(pos % BOARD_WIDTH, BOARD_HEIGHT - 1 - pos // BOARD_WIDTH)
            if not _on_home_square(piece, sq):
                piece = piece.moved()
            b[sq] = piece

        for color in Color:
            kings = sum(1 for _sq, p in b.pieces(color) if p.piece_type == PieceType.KING)
            if kings > 1:
                raise InvalidSetupError(f"invalid board configuration: {kings} {color.name} kings")
        return b

    # -- Debug output -------------------------------------------------------

    def dump(self) -> str:
        """Rank-major text, rank 8 first, ``-`` for empty squares."""
        rows: list[str] = []
        for rank in range(BOARD_HEIGHT - 1, -1, -1):
            row = []
            for file in range(BOARD_WIDTH):
                p = self[Square(file, rank)]
                row.append(str(p) if p else _EMPTY_CHAR)
            rows.append("".join(row))
        return "/".join(rows)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return [_state(p) for p in self._squares] == [_state(p) for p in other._squares]

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_HEIGHT - 1, -1, -1):
            row = []
            for file in range(BOARD_WIDTH):
                p = self[Square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)


def _state(piece: Piece | None) -> tuple[object, ...] | None:
    return None if piece is None else piece.state


def _on_home_square(piece: Piece, sq: Square) -> bool:
    home = piece.color.home_rank
    if piece.piece_type == PieceType.PAWN:
        return sq.rank == home + piece.color.pawn_direction
    if piece.piece_type == PieceType.KING:
        return sq == Square(4, home)
    if piece.piece_type == PieceType.ROOK:
        return sq in (Square(0, home), Square(7, home))
    return True
