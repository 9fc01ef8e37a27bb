"""GameController: click-driven front door to a :class:`GameState`.

Turns cell clicks into selections and moves, and emits events via simple
callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessrules.config import GameSettings
from chessrules.core.enums import MoveOutcome, PieceType
from chessrules.core.move import Move
from chessrules.game.interfaces import GameStatus, PendingPromotion
from chessrules.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, GameStatus], None]
StatusCallback = Callable[[GameStatus], None]
PromotionCallback = Callable[[PendingPromotion], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_status_changed: list[StatusCallback] = field(default_factory=list)
    on_promotion_required: list[PromotionCallback] = field(default_factory=list)
    on_game_over: list[StatusCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Orchestrates one game from the presentation loop.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread), once per input event.
    """

    __slots__ = ("_state", "events")

    def __init__(self, settings: GameSettings | None = None) -> None:
        self._state = GameState(settings)
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def status(self) -> GameStatus:
        return self._state.current_status()

    # ── Commands ─────────────────────────────────────────────────────────

    def new_game(self, settings: GameSettings | None = None) -> None:
        self._state.setup(settings)
        self._emit_status()

    def click(self, cell: tuple[int, int] | None) -> MoveOutcome | None:
        """Handle a click on *cell* (``None`` or off-board clears selection).

        Moves the selected piece when *cell* is one of its legal
        destinations and returns the outcome; otherwise (re)selects and
        returns None.
        """
        state = self._state
        if state.pending_promotion is not None or state.is_game_over:
            return MoveOutcome.REJECTED

        selected = state.selected
        if selected is not None and cell is not None and cell in state.legal_destinations(selected):
            return self.submit_move(selected, cell)

        state.select(cell)
        return None

    def submit_move(self, from_sq: tuple[int, int], to_sq: tuple[int, int]) -> MoveOutcome:
        outcome = self._state.attempt_move(from_sq, to_sq)
        if outcome == MoveOutcome.REJECTED:
            return outcome

        move = self._state.last_move
        assert move is not None
        self._emit_move(move)

        if outcome == MoveOutcome.REQUIRES_PROMOTION_CHOICE:
            pending = self._state.pending_promotion
            assert pending is not None
            for cb in self.events.on_promotion_required:
                cb(pending)
            return outcome

        self._after_turn_change()
        return outcome

    def choose_promotion(self, choice: PieceType) -> bool:
        if not self._state.resolve_promotion(choice):
            return False
        self._after_turn_change()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _after_turn_change(self) -> None:
        status = self._emit_status()
        if status.is_game_over:
            _LOGGER.info("Game over: %s", status.text())
            for cb in self.events.on_game_over:
                cb(status)

    def _emit_move(self, move: Move) -> None:
        status = self.status
        for cb in self.events.on_move:
            cb(move, status)

    def _emit_status(self) -> GameStatus:
        status = self.status
        for cb in self.events.on_status_changed:
            cb(status)
        return status
