"""Game state machine: turn order, legal-move table, promotion sub-state."""

from __future__ import annotations

import logging

from chessrules.config import GameSettings
from chessrules.core.board import Board
from chessrules.core.enums import PROMOTION_CHOICES, Color, MoveOutcome, PieceType, TurnState
from chessrules.core.errors import EmptySquareError
from chessrules.core.executor import execute
from chessrules.core.move import Move
from chessrules.core.rules import LegalMoveTable, Rules
from chessrules.core.types import Square, is_valid_square
from chessrules.game.interfaces import GameStatus, PendingPromotion, Phase

_LOGGER = logging.getLogger(__name__)

_NO_MOVES: frozenset[Square] = frozenset()


def _as_square(sq: tuple[int, int] | None) -> Square | None:
    """Normalise caller coordinates; anything off the board becomes None.

    Only integer pairs name a square, so floats and other values are
    treated as off the board.
    """
    if sq is None or len(sq) != 2 or not all(type(c) is int for c in sq):
        return None
    if not is_valid_square(sq):
        return None
    return Square(*sq)


class GameState:
    """One game: board, side to move and the turn state machine.

    This is a pure data/logic class with no threading or UI. Each instance is
    independent, so several games (or tests) can run side by side.

    The legal-move table is built lazily on the first query of a turn and
    dropped as soon as a move is executed or the turn changes.
    """

    __slots__ = (
        "settings",
        "board",
        "_turn_color",
        "_turn_state",
        "_legal_table",
        "_selected",
        "_last_move",
        "_ply_count",
    )

    def __init__(self, settings: GameSettings | None = None) -> None:
        self.settings = settings or GameSettings()
        self.setup()

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, settings: GameSettings | None = None) -> None:
        """Initialise (or reset) the game."""
        if settings is not None:
            self.settings = settings
        self.board = Board.from_setup(self.settings.setup)
        self._turn_color = self.settings.first_to_move
        self._turn_state: Phase = TurnState.NORMAL
        self._legal_table: LegalMoveTable | None = None
        self._selected: Square | None = None
        self._last_move: Move | None = None
        self._ply_count = 0
        if self.settings.log_board_dump:
            _LOGGER.debug("New game, %s to move: %s", self._turn_color, self.board.dump())

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def turn_color(self) -> Color:
        return self._turn_color

    @property
    def turn_state(self) -> Phase:
        self._ensure_moves()
        return self._turn_state

    @property
    def is_game_over(self) -> bool:
        return self.turn_state.is_terminal

    @property
    def pending_promotion(self) -> PendingPromotion | None:
        if isinstance(self._turn_state, PendingPromotion):
            return self._turn_state
        return None

    @property
    def last_move(self) -> Move | None:
        return self._last_move

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return self._ply_count

    def current_status(self) -> GameStatus:
        return GameStatus(self._turn_color, self.turn_state)

    def status_text(self) -> str:
        return self.current_status().text()

    def board_dump(self) -> str:
        return self.board.dump()

    def legal_destinations(self, sq: tuple[int, int]) -> frozenset[Square]:
        """Where the piece on *sq* may go this turn.

        Empty for off-board or empty squares, opponent pieces, and while a
        promotion choice is pending.
        """
        square = _as_square(sq)
        if square is None or self.pending_promotion is not None:
            return _NO_MOVES
        self._ensure_moves()
        assert self._legal_table is not None
        return self._legal_table.get(square, _NO_MOVES)

    def movable_squares(self) -> frozenset[Square]:
        """Squares of pieces that have at least one legal move."""
        if self.pending_promotion is not None:
            return _NO_MOVES
        self._ensure_moves()
        assert self._legal_table is not None
        return frozenset(self._legal_table)

    # ── Selection ────────────────────────────────────────────────────────

    @property
    def selected(self) -> Square | None:
        return self._selected

    def select(self, sq: tuple[int, int] | None) -> bool:
        """Select the piece on *sq*; off-board or foreign squares clear it.

        Nothing can be selected while a promotion is pending or once the
        game is over.
        """
        if self.pending_promotion is not None or self.is_game_over:
            self._selected = None
            return False
        square = _as_square(sq)
        if square is None or not self.board.is_color(square, self._turn_color):
            self._selected = None
            return False
        self._selected = square
        return True

    def clear_selection(self) -> None:
        self._selected = None

    # ── Move application ─────────────────────────────────────────────────

    def attempt_move(self, from_sq: tuple[int, int], to_sq: tuple[int, int]) -> MoveOutcome:
        """Play *from_sq* → *to_sq* if it is in this turn's legal-move table."""
        if self.pending_promotion is not None:
            _LOGGER.debug("Move rejected: promotion choice pending")
            return MoveOutcome.REJECTED
        if self.is_game_over:
            _LOGGER.debug("Move rejected: game is over (%s)", self._turn_state)
            return MoveOutcome.REJECTED

        src = _as_square(from_sq)
        dst = _as_square(to_sq)
        if src is None or dst is None or dst not in self.legal_destinations(src):
            _LOGGER.debug("Move rejected: %s -> %s is not legal", from_sq, to_sq)
            return MoveOutcome.REJECTED

        placed = execute(self.board, src, dst)
        self._last_move = Move(src, dst)
        self._ply_count += 1
        self._legal_table = None
        self._selected = None
        _LOGGER.debug("%s played %s", self._turn_color, self._last_move)

        if placed.is_pawn and dst.rank == self._turn_color.opposite.home_rank:
            self._turn_state = PendingPromotion(dst, self._turn_color)
            _LOGGER.debug("Awaiting promotion choice on %s", dst)
            return MoveOutcome.REQUIRES_PROMOTION_CHOICE

        self._change_turn()
        return MoveOutcome.MOVED

    def resolve_promotion(self, choice: PieceType) -> bool:
        """Promote the pending pawn to *choice* and hand the turn over.

        Returns False (state unchanged) when nothing is pending or *choice*
        is not one of queen, rook, bishop or knight.
        """
        pending = self.pending_promotion
        if pending is None:
            _LOGGER.debug("Promotion rejected: nothing pending")
            return False
        if choice not in PROMOTION_CHOICES:
            _LOGGER.debug("Promotion rejected: %s is not a valid choice", choice)
            return False

        pawn = self.board[pending.square]
        if pawn is None:
            raise EmptySquareError(f"{pending.square} should contain a pawn")
        self.board[pending.square] = pawn.promoted(choice)
        if self._last_move is not None:
            self._last_move = self._last_move.with_promotion(choice)
        _LOGGER.debug("%s promoted on %s to %s", pending.color, pending.square, choice.name)

        self._change_turn()
        return True

    # ── Internal ─────────────────────────────────────────────────────────

    def _change_turn(self) -> None:
        opponent = self._turn_color.opposite
        # The opponent's double-step window (from its previous ply) closes now.
        for sq, piece in self.board.pieces(opponent):
            if piece.is_pawn and piece.en_passant_eligible:
                self.board[sq] = piece.with_en_passant(False)

        self._turn_color = opponent
        self._turn_state = TurnState.NORMAL
        self._selected = None
        self._legal_table = None

    def _ensure_moves(self) -> None:
        if self._legal_table is not None or self.pending_promotion is not None:
            return
        table = Rules.legal_move_table(self.board, self._turn_color)
        state = Rules.turn_state(self.board, self._turn_color, table)
        self._legal_table = table
        self._turn_state = state
        if state.is_terminal:
            _LOGGER.info("%s for %s", state.value, self._turn_color)
        elif state == TurnState.CHECK:
            _LOGGER.debug("%s is in check", self._turn_color)


def new_game(settings: GameSettings | None = None) -> GameState:
    """Standard initial position (or *settings*' setup), White to move."""
    return GameState(settings)
