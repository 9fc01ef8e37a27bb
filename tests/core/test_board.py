"""Tests for Board."""

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import InvalidSetupError, MissingKingError
from chessrules.core.piece import Piece
from chessrules.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    E2, E4, E5,
    A8, B8, C8, D8, E8, F8, G8, H8,
    Square,
)

ADVANCED_PAWNS = """
----k---
--------
--------
----p---
----P---
--------
----P---
R---K--r
"""

TWO_WHITE_KINGS = """
----k---
--------
--------
--------
--------
--------
--------
K---K--r
"""


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_white_pawns(self) -> None:
        board = Board.initial()
        pawns = [sq for sq, p in board.pieces(Color.WHITE) if p.is_pawn]
        assert len(pawns) == 8
        assert all(sq.rank == 1 for sq in pawns)

    def test_black_pawns(self) -> None:
        board = Board.initial()
        pawns = [sq for sq, p in board.pieces(Color.BLACK) if p.is_pawn]
        assert len(pawns) == 8
        assert all(sq.rank == 6 for sq in pawns)

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for index in range(16, 48):
            assert board[Square.from_index(index)] is None

    def test_nothing_has_moved(self) -> None:
        board = Board.initial()
        assert not any(p.has_moved for _sq, p in board.pieces())


class TestBoardQueries:
    @pytest.mark.parametrize("sq", [(-1, 0), (0, -1), (8, 0), (0, 8), (-3, 12)])
    def test_out_of_bounds(self, sq: tuple[int, int]) -> None:
        assert not Board.is_in_bounds(sq)

    @pytest.mark.parametrize("sq", [(0, 0), (7, 7), (3, 4)])
    def test_in_bounds(self, sq: tuple[int, int]) -> None:
        assert Board.is_in_bounds(sq)

    def test_is_color(self) -> None:
        board = Board.initial()
        assert board.is_color(E2, Color.WHITE)
        assert not board.is_color(E2, Color.BLACK)
        assert not board.is_color(E4, Color.WHITE)
        assert not board.is_color(E4, Color.BLACK)

    def test_get_matches_getitem(self) -> None:
        board = Board.initial()
        assert board.get(D8) == board[D8]
        assert board.get(E4) is None

    def test_index_round_trip(self) -> None:
        assert E4.to_index() == 28
        assert Square.from_index(28) == E4


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board[E4] = piece
        assert board[E4] == piece
        assert board.is_empty(E2)

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[E1] = None
        assert board != copy
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_snapshot_restore(self) -> None:
        board = Board.initial()
        saved = board.snapshot()
        board[E4] = board[E2]
        board[E2] = None
        board[E1] = board[E1].moved()
        board.restore(saved)
        assert board == Board.initial()

    def test_equality_sees_flags(self) -> None:
        board = Board.initial()
        other = Board.initial()
        other[E1] = other[E1].moved()
        assert board != other

    def test_king_square(self) -> None:
        board = Board.initial()
        assert board.king_square(Color.WHITE) == E1
        assert board.king_square(Color.BLACK) == E8

    def test_king_square_missing_raises(self) -> None:
        board = Board()
        with pytest.raises(MissingKingError, match="No WHITE king"):
            board.king_square(Color.WHITE)

    def test_all_pieces_count(self) -> None:
        board = Board.initial()
        assert len(list(board.pieces(Color.WHITE))) == 16
        assert len(list(board.pieces(Color.BLACK))) == 16
        assert len(list(board.pieces())) == 32

    def test_empty_board_has_no_pieces(self) -> None:
        assert list(Board().pieces()) == []


class TestBoardSetup:
    def test_displaced_pieces_are_marked_moved(self) -> None:
        board = Board.from_setup(ADVANCED_PAWNS)
        assert board[E4].has_moved
        assert board[E5].has_moved
        assert not board[E2].has_moved
        assert not board[E1].has_moved
        assert not board[A1].has_moved
        assert not board[E8].has_moved

    def test_foreign_rook_in_corner_is_moved(self) -> None:
        # A black rook on h1 is not on one of its own home squares.
        board = Board.from_setup(ADVANCED_PAWNS)
        assert board[H1] == Piece(Color.BLACK, PieceType.ROOK)
        assert board[H1].has_moved

    def test_wrong_length_raises(self) -> None:
        with pytest.raises(InvalidSetupError, match="64 squares"):
            Board.from_setup("rnbqkbnr")

    def test_invalid_letter_raises(self) -> None:
        with pytest.raises(InvalidSetupError, match="invalid board configuration"):
            Board.from_setup("x" + "-" * 63)

    def test_second_king_raises(self) -> None:
        with pytest.raises(InvalidSetupError, match="2 WHITE kings"):
            Board.from_setup(TWO_WHITE_KINGS)

    def test_missing_king_is_left_to_the_rules(self) -> None:
        board = Board.from_setup("-" * 60 + "K---")
        with pytest.raises(MissingKingError):
            board.king_square(Color.BLACK)


class TestBoardDebugOutput:
    def test_dump_initial(self) -> None:
        assert Board.initial().dump() == (
            "rnbqkbnr/pppppppp/--------/--------/--------/--------/PPPPPPPP/RNBQKBNR"
        )

    def test_dump_round_trips_through_setup(self) -> None:
        board = Board.from_setup(ADVANCED_PAWNS)
        assert Board.from_setup(board.dump().replace("/", "")) == board

    def test_repr_not_empty(self) -> None:
        board = Board.initial()
        text = repr(board)
        assert "K" in text
        assert "a b c d e f g h" in text
