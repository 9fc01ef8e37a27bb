"""Exception hierarchy for rule-engine contract violations.

User-input mistakes (off-board clicks, illegal destinations, a wrong
promotion choice) are never raised; they surface as rejected outcomes.
The errors below mean a caller bypassed the legal-move contract or the
board got corrupted, so they are not meant to be caught by the engine.
"""

from __future__ import annotations


class ChessRulesError(Exception):
    """Base class for all rule-engine errors."""


class MissingKingError(ChessRulesError, RuntimeError):
    """A color has no king on the board."""


class EmptySquareError(ChessRulesError, RuntimeError):
    """A move was executed from a square holding no piece."""


class NotAPawnError(ChessRulesError, TypeError):
    """A pawn-only attribute or operation was used on another piece."""


class PromotionError(ChessRulesError, ValueError):
    """A promotion targeted an invalid piece type."""


class InvalidSetupError(ChessRulesError, ValueError):
    """A board setup string could not be parsed."""
