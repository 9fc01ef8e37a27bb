"""Core enumerations for the chess rules domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def letter(self) -> str:
        """Single-letter code used in sprite keys ('w' / 'b')."""
        return "w" if self == Color.WHITE else "b"

    @property
    def home_rank(self) -> int:
        """Back rank of this side."""
        return 0 if self == Color.WHITE else 7

    @property
    def pawn_direction(self) -> int:
        """Rank delta of a forward pawn step."""
        return 1 if self == Color.WHITE else -1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def letter(self) -> str:
        """Lowercase setup letter, e.g. 'n' for knight."""
        return _PIECE_LETTERS[self]


_PIECE_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}

PROMOTION_CHOICES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


class MoveOutcome(Enum):
    """Result of :meth:`GameState.attempt_move`."""

    MOVED = "moved"
    REQUIRES_PROMOTION_CHOICE = "requires_promotion_choice"
    REJECTED = "rejected"


class TurnState(Enum):
    """Status of the side to move once its legal moves are known."""

    NORMAL = "Normal"
    CHECK = "Check"
    CHECKMATE = "Checkmate"
    STALEMATE = "Stalemate"

    @property
    def is_terminal(self) -> bool:
        return self in (TurnState.CHECKMATE, TurnState.STALEMATE)
