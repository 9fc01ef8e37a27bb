"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, Rules, parse_square

    board = Board.initial()
    for sq in Rules.legal_moves(board, parse_square("g1")):
        print(sq)
"""

from chessrules.core.board import STANDARD_SETUP, Board, BoardSnapshot
from chessrules.core.enums import (
    PROMOTION_CHOICES,
    Color,
    MoveOutcome,
    PieceType,
    TurnState,
)
from chessrules.core.errors import (
    ChessRulesError,
    EmptySquareError,
    InvalidSetupError,
    MissingKingError,
    NotAPawnError,
    PromotionError,
)
from chessrules.core.executor import execute
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.rules import LegalMoveTable, Rules
from chessrules.core.types import Square, is_valid_square, parse_square, square_name

__all__ = [
    # Enums
    "Color",
    "MoveOutcome",
    "PROMOTION_CHOICES",
    "PieceType",
    "TurnState",
    # Errors
    "ChessRulesError",
    "EmptySquareError",
    "InvalidSetupError",
    "MissingKingError",
    "NotAPawnError",
    "PromotionError",
    # Types / helpers
    "Square",
    "is_valid_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "BoardSnapshot",
    "LegalMoveTable",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    "STANDARD_SETUP",
    "execute",
]
