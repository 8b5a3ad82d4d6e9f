"""Tests for Side, PieceKind and HandPieceKind."""

import pytest

from sfenkit.core.enums import (
    HAND_ORDER,
    HandPieceKind,
    NotHandPieceKindError,
    PieceKind,
    Side,
)


class TestSide:
    def test_opposite(self) -> None:
        assert Side.SENTE.opposite == Side.GOTE
        assert Side.GOTE.opposite == Side.SENTE

    def test_sente_moves_first(self) -> None:
        assert list(Side) == [Side.SENTE, Side.GOTE]

    def test_str(self) -> None:
        assert str(Side.SENTE) == "sente"
        assert str(Side.GOTE) == "gote"


class TestPieceKind:
    def test_fourteen_kinds(self) -> None:
        assert len(PieceKind) == 14

    def test_is_promoted(self) -> None:
        promoted = [k for k in PieceKind if k.is_promoted]
        assert promoted == [
            PieceKind.PRO_PAWN,
            PieceKind.PRO_LANCE,
            PieceKind.PRO_KNIGHT,
            PieceKind.PRO_SILVER,
            PieceKind.HORSE,
            PieceKind.DRAGON,
        ]

    def test_promoted(self) -> None:
        assert PieceKind.BISHOP.promoted() == PieceKind.HORSE
        assert PieceKind.ROOK.promoted() == PieceKind.DRAGON
        assert PieceKind.PAWN.promoted() == PieceKind.PRO_PAWN

    @pytest.mark.parametrize("kind", [PieceKind.GOLD, PieceKind.KING, PieceKind.HORSE])
    def test_no_promoted_form(self, kind: PieceKind) -> None:
        assert not kind.can_promote
        with pytest.raises(ValueError, match="no promoted form"):
            kind.promoted()

    def test_unpromoted(self) -> None:
        assert PieceKind.DRAGON.unpromoted() == PieceKind.ROOK
        assert PieceKind.PRO_SILVER.unpromoted() == PieceKind.SILVER
        assert PieceKind.GOLD.unpromoted() == PieceKind.GOLD

    def test_promotion_round_trip(self) -> None:
        for kind in PieceKind:
            if kind.can_promote:
                assert kind.promoted().unpromoted() == kind


class TestHandPieceKind:
    def test_to_piece_kind(self) -> None:
        assert HandPieceKind.GOLD.to_piece_kind() == PieceKind.GOLD
        assert HandPieceKind.ROOK.to_piece_kind() == PieceKind.ROOK

    def test_from_piece_kind(self) -> None:
        for hpk in HandPieceKind:
            assert HandPieceKind.from_piece_kind(hpk.to_piece_kind()) == hpk

    @pytest.mark.parametrize("kind", [PieceKind.KING, PieceKind.HORSE, PieceKind.PRO_PAWN])
    def test_from_piece_kind_rejects(self, kind: PieceKind) -> None:
        with pytest.raises(NotHandPieceKindError) as exc_info:
            HandPieceKind.from_piece_kind(kind)
        assert exc_info.value.kind == kind
        assert isinstance(exc_info.value, ValueError)

    def test_hand_order(self) -> None:
        assert [k.name for k in HAND_ORDER] == [
            "ROOK", "BISHOP", "GOLD", "SILVER", "KNIGHT", "LANCE", "PAWN",
        ]
        assert set(HAND_ORDER) == set(HandPieceKind)
