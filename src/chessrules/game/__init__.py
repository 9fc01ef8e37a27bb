"""Game management layer: turn state machine and click controller.

Quick start::

    from chessrules.game import new_game
    from chessrules.core import parse_square

    game = new_game()
    game.attempt_move(parse_square("e2"), parse_square("e4"))
    print(game.status_text())
"""

from chessrules.game.controller import GameController, GameEvents
from chessrules.game.interfaces import GameStatus, PendingPromotion, Phase
from chessrules.game.state import GameState, new_game

__all__ = [
    # Values
    "GameStatus",
    "PendingPromotion",
    "Phase",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "new_game",
]
