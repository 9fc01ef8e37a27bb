"""Tests for Piece."""

import pytest

from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import NotAPawnError, PromotionError
from chessrules.core.piece import Piece


class TestPieceValue:
    def test_equality_ignores_flags(self) -> None:
        fresh = Piece(Color.WHITE, PieceType.ROOK)
        assert fresh.moved() == fresh
        assert fresh.moved().state != fresh.state

    def test_hash_matches_equality(self) -> None:
        sprites = {Piece(Color.BLACK, PieceType.PAWN): "bp"}
        assert sprites[Piece(Color.BLACK, PieceType.PAWN).moved()] == "bp"

    def test_sprite_key(self) -> None:
        assert Piece(Color.WHITE, PieceType.KNIGHT).sprite_key == "wn"
        assert Piece(Color.BLACK, PieceType.KING).sprite_key == "bk"

    def test_str_is_setup_letter(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.QUEEN)) == "Q"
        assert str(Piece(Color.BLACK, PieceType.BISHOP)) == "b"

    def test_from_char(self) -> None:
        assert Piece.from_char("n") == Piece(Color.BLACK, PieceType.KNIGHT)

    def test_from_char_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x")

    def test_moved_returns_a_copy(self) -> None:
        king = Piece(Color.WHITE, PieceType.KING)
        king.moved()
        assert not king.has_moved


class TestEnPassantFlag:
    def test_pawn_starts_not_eligible(self) -> None:
        assert Piece(Color.WHITE, PieceType.PAWN).en_passant_eligible is False

    def test_with_en_passant(self) -> None:
        pawn = Piece(Color.WHITE, PieceType.PAWN).with_en_passant(True)
        assert pawn.en_passant_eligible

    def test_non_pawn_query_raises(self) -> None:
        with pytest.raises(NotAPawnError):
            _ = Piece(Color.WHITE, PieceType.KNIGHT).en_passant_eligible

    def test_non_pawn_set_raises(self) -> None:
        with pytest.raises(NotAPawnError):
            Piece(Color.BLACK, PieceType.ROOK).with_en_passant(True)


class TestPromotion:
    @pytest.mark.parametrize(
        "target",
        [PieceType.QUEEN, PieceType.ROOK, PieceType.BISHOP, PieceType.KNIGHT],
    )
    def test_valid_targets(self, target: PieceType) -> None:
        promoted = Piece(Color.BLACK, PieceType.PAWN).promoted(target)
        assert promoted == Piece(Color.BLACK, target)
        assert promoted.has_moved

    def test_promoted_piece_has_no_en_passant_flag(self) -> None:
        queen = Piece(Color.WHITE, PieceType.PAWN).promoted(PieceType.QUEEN)
        with pytest.raises(NotAPawnError):
            _ = queen.en_passant_eligible

    @pytest.mark.parametrize("target", [PieceType.KING, PieceType.PAWN])
    def test_invalid_targets(self, target: PieceType) -> None:
        with pytest.raises(PromotionError):
            Piece(Color.WHITE, PieceType.PAWN).promoted(target)

    def test_non_pawn_cannot_promote(self) -> None:
        with pytest.raises(NotAPawnError, match="cannot promote"):
            Piece(Color.WHITE, PieceType.ROOK).promoted(PieceType.QUEEN)
