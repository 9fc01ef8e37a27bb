"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessrules.core.enums import PROMOTION_CHOICES, Color, PieceType
from chessrules.core.errors import NotAPawnError, PromotionError

# Setup character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_SETUP_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece.

    Equality and hashing use only color and type, so a moved rook still
    equals a fresh one (sprite lookups rely on this). Use :attr:`state`
    when the movement flags matter too.

    The en-passant flag exists only for pawns: it is ``None`` on every
    other piece and reading :attr:`en_passant_eligible` there raises.
    """

    color: Color
    piece_type: PieceType
    has_moved: bool = field(default=False, compare=False)
    _en_passant: bool | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.piece_type == PieceType.PAWN:
            if self._en_passant is None:
                object.__setattr__(self, "_en_passant", False)
        elif self._en_passant is not None:
            raise NotAPawnError(f"{self.piece_type.name} cannot carry an en-passant flag")

    # ── Flags ────────────────────────────────────────────────────────────

    @property
    def is_pawn(self) -> bool:
        return self.piece_type == PieceType.PAWN

    @property
    def en_passant_eligible(self) -> bool:
        """Whether this pawn double-stepped on the previous ply."""
        if self._en_passant is None:
            raise NotAPawnError(f"{self.piece_type.name} has no en-passant flag")
        return self._en_passant

    @property
    def state(self) -> tuple[Color, PieceType, bool, bool | None]:
        """Full value including movement flags."""
        return (self.color, self.piece_type, self.has_moved, self._en_passant)

    # ── Derived values ───────────────────────────────────────────────────

    def moved(self) -> Piece:
        """Copy with ``has_moved`` set."""
        return Piece(self.color, self.piece_type, True, self._en_passant)

    def with_en_passant(self, eligible: bool) -> Piece:
        """Copy with the en-passant flag replaced (pawns only)."""
        if not self.is_pawn:
            raise NotAPawnError(f"{self.piece_type.name} has no en-passant flag")
        return Piece(self.color, self.piece_type, self.has_moved, eligible)

    def promoted(self, promote_to: PieceType) -> Piece:
        """The piece this pawn becomes after promotion to *promote_to*."""
        if not self.is_pawn:
            raise NotAPawnError(f"{self} cannot promote")
        if promote_to not in PROMOTION_CHOICES:
            raise PromotionError(f"cannot promote to {promote_to.name}")
        return Piece(self.color, promote_to, True)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Setup character (uppercase = white, lowercase = black)."""
        return _SETUP_CHARS[(self.color, self.piece_type)]

    @property
    def sprite_key(self) -> str:
        """Color letter followed by type letter, e.g. 'wn'."""
        return self.color.letter + self.piece_type.letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from setup character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)
