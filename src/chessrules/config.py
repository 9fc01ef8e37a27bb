"""Game settings."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.board import STANDARD_SETUP
from chessrules.core.enums import Color


@dataclass
class GameSettings:
    """Everything a caller may configure when starting a game."""

    # Board
    setup: str = STANDARD_SETUP
    first_to_move: Color = Color.WHITE

    # Diagnostics
    log_board_dump: bool = True
