"""chessrules: two-player chess rules engine.

The Qt bridge lives in :mod:`chessrules.qt_bridge` and is not imported here,
so the rules can be used without a Qt event loop.
"""

from chessrules.config import GameSettings
from chessrules.core import Board, Color, MoveOutcome, PieceType, Rules, Square, TurnState
from chessrules.game import GameController, GameState, GameStatus, PendingPromotion, new_game

__all__ = [
    "Board",
    "Color",
    "GameController",
    "GameSettings",
    "GameState",
    "GameStatus",
    "MoveOutcome",
    "PendingPromotion",
    "PieceType",
    "Rules",
    "Square",
    "TurnState",
    "new_game",
]
