"""Qt bridge exposing a game controller through signals and slots."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chessrules.config import GameSettings
from chessrules.core.enums import PieceType
from chessrules.core.move import Move
from chessrules.game.controller import GameController
from chessrules.game.interfaces import GameStatus, PendingPromotion


class GameBridge(QObject):
    """Thread-affine adapter between a board widget and the rules engine."""

    moved = pyqtSignal(object, object)  # Move, GameStatus
    status_changed = pyqtSignal(object)  # GameStatus
    promotion_required = pyqtSignal(object)  # PendingPromotion
    game_over = pyqtSignal(object)  # GameStatus

    def __init__(
        self,
        settings: GameSettings | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = GameController(settings)
        events = self._controller.events
        events.on_move.append(self._on_move)
        events.on_status_changed.append(self.status_changed.emit)
        events.on_promotion_required.append(self._on_promotion_required)
        events.on_game_over.append(self.game_over.emit)

    @property
    def controller(self) -> GameController:
        return self._controller

    @pyqtSlot(int, int)
    def click(self, file: int, rank: int) -> None:
        """Forward a cell click; off-board coordinates clear the selection."""
        self._controller.click((file, rank))

    @pyqtSlot(int)
    def choose_promotion(self, piece_type: int) -> None:
        try:
            choice = PieceType(piece_type)
        except ValueError:
            return
        self._controller.choose_promotion(choice)

    @pyqtSlot()
    def new_game(self) -> None:
        self._controller.new_game()

    def _on_move(self, move: Move, status: GameStatus) -> None:
        self.moved.emit(move, status)

    def _on_promotion_required(self, pending: PendingPromotion) -> None:
        self.promotion_required.emit(pending)
