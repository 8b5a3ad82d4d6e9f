"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from sfenkit.core.board import Board
from sfenkit.core.enums import HandPieceKind, Side
from sfenkit.core.hand import Hands
from sfenkit.core.piece import G_BISHOP, S_GOLD
from sfenkit.core.position import Position
from sfenkit.core.types import SQ_51, SQ_59


@pytest.fixture()
def startpos() -> Position:
    return Position.startpos()


@pytest.fixture()
def sparse_position() -> Position:
    """GOTE bishop on 5a, SENTE gold on 5i, GOTE to move at ply 42.

    Canonical form: ``sfen 4b4/9/9/9/9/9/9/9/4G4 w 2Pr 42``.
    """
    board = Board()
    board[SQ_51] = G_BISHOP
    board[SQ_59] = S_GOLD
    hands = Hands()
    hands[Side.SENTE].add(HandPieceKind.PAWN, 2)
    hands[Side.GOTE].add(HandPieceKind.ROOK)
    return Position(Side.GOTE, board, hands, 42)


@pytest.fixture()
def promoted_board_sfen() -> str:
    """Promoted pieces of both sides, one per row."""
    return "1+P7/+L8/8+B/7+R1/6+n2/5+s3/4+p4/3+b5/2+r6"
