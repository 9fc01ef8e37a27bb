"""Value types shared by the game layer and its callers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from chessrules.core.enums import Color, TurnState
from chessrules.core.types import Square

# ── Turn state machine states ────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class PendingPromotion:
    """A pawn of *color* reached the last rank on *square* and awaits a choice."""

    square: Square
    color: Color

    @property
    def is_terminal(self) -> bool:
        return False

    @property
    def value(self) -> str:
        return "Promotion"


Phase: TypeAlias = TurnState | PendingPromotion


@dataclass(frozen=True, slots=True)
class GameStatus:
    """What a status line needs: whose turn it is and in which state."""

    turn_color: Color
    turn_state: Phase

    @property
    def is_pending_promotion(self) -> bool:
        return isinstance(self.turn_state, PendingPromotion)

    @property
    def is_game_over(self) -> bool:
        return self.turn_state.is_terminal

    @property
    def winner(self) -> Color | None:
        """The side that delivered checkmate, if any."""
        if self.turn_state == TurnState.CHECKMATE:
            return self.turn_color.opposite
        return None

    def text(self) -> str:
        """E.g. "White's turn" or "Black's turn - Check"."""
        turn = f"{self.turn_color.name.capitalize()}'s turn"
        if self.turn_state == TurnState.NORMAL:
            return turn
        return f"{turn} - {self.turn_state.value}"
