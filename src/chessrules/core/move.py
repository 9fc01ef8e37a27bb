"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import PieceType
from chessrules.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable record of a played move."""

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += self.promotion.letter
        return base

    def with_promotion(self, promotion: PieceType) -> Move:
        return Move(self.from_sq, self.to_sq, promotion)
