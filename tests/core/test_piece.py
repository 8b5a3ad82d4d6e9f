"""Tests for the Piece value object."""

import pytest

from sfenkit.core.enums import PieceKind, Side
from sfenkit.core.piece import (
    ALL_PIECES,
    G_DRAGON,
    G_KING,
    G_PAWN,
    S_BISHOP,
    S_HORSE,
    S_PAWN,
    Piece,
)


class TestPieceStr:
    def test_sente_uppercase(self) -> None:
        assert str(S_PAWN) == "P"
        assert str(Piece(Side.SENTE, PieceKind.KING)) == "K"

    def test_gote_lowercase(self) -> None:
        assert str(G_PAWN) == "p"
        assert str(G_KING) == "k"

    def test_promoted_prefix(self) -> None:
        assert str(S_HORSE) == "+B"
        assert str(G_DRAGON) == "+r"

    def test_all_spellings_distinct(self) -> None:
        assert len(ALL_PIECES) == 28
        assert len({str(p) for p in ALL_PIECES}) == 28


class TestPieceDerived:
    def test_promoted(self) -> None:
        assert S_BISHOP.promoted() == S_HORSE

    def test_unpromoted(self) -> None:
        assert G_DRAGON.unpromoted() == Piece(Side.GOTE, PieceKind.ROOK)

    def test_flipped(self) -> None:
        assert S_PAWN.flipped() == G_PAWN
        assert G_PAWN.flipped() == S_PAWN

    def test_king_cannot_promote(self) -> None:
        with pytest.raises(ValueError):
            G_KING.promoted()

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            S_PAWN.side = Side.GOTE  # type: ignore[misc]
