"""Tests for ``position ... moves ...`` game records."""

import pytest

from sfenkit.core.enums import HandPieceKind
from sfenkit.core.kifu import Kifu
from sfenkit.core.move import drop, walk
from sfenkit.core.notation.errors import ExtraInputError, InvalidInputError
from sfenkit.core.notation.kifu import kifu_from_sfen, kifu_to_sfen
from sfenkit.core.position import Position
from sfenkit.core.types import SQ_15, SQ_22, SQ_33, SQ_34, SQ_51, SQ_65, SQ_76, SQ_77, SQ_82, SQ_88

FIVE_MOVES = "position startpos moves 7g7f 3c3d 8h2b+ 8b2b B*6e"


class TestKifuFromSfen:
    def test_five_moves(self, startpos: Position) -> None:
        kifu = kifu_from_sfen(FIVE_MOVES)
        assert kifu == Kifu(
            startpos,
            [
                walk(SQ_77, SQ_76),
                walk(SQ_33, SQ_34),
                walk(SQ_88, SQ_22, True),
                walk(SQ_82, SQ_22),
                drop(HandPieceKind.BISHOP, SQ_65),
            ],
        )

    def test_five_moves_round_trip(self) -> None:
        assert kifu_to_sfen(kifu_from_sfen(FIVE_MOVES)) == FIVE_MOVES

    def test_position_only(self) -> None:
        assert kifu_from_sfen("position startpos") == Kifu.startpos()
        assert kifu_from_sfen("startpos") == Kifu.startpos()

    def test_moves_keyword_without_moves(self) -> None:
        kifu = kifu_from_sfen("position startpos moves")
        assert kifu.moves == ()
        assert kifu_to_sfen(kifu) == "position startpos"

    def test_sfen_position(self, sparse_position: Position) -> None:
        text = "position sfen 4b4/9/9/9/9/9/9/9/4G4 w 2Pr 42 moves 5a1e"
        kifu = kifu_from_sfen(text)
        assert kifu.position == sparse_position
        assert kifu.moves == (walk(SQ_51, SQ_15),)
        assert kifu_to_sfen(kifu) == text

    def test_extra_spaces(self) -> None:
        kifu = kifu_from_sfen("  position  startpos   moves  7g7f   3c3d  ")
        assert kifu_to_sfen(kifu) == "position startpos moves 7g7f 3c3d"


class TestKifuErrors:
    def test_moves_expected(self) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            kifu_from_sfen("position startpos foo")
        assert exc_info.value.offset == 18
        assert exc_info.value.description == '"moves" expected'

    def test_bad_move(self) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            kifu_from_sfen("position startpos moves 7g7f xx")
        assert exc_info.value.offset == 29
        assert exc_info.value.description == "`Move` expected"

    def test_move_token_leftover(self) -> None:
        with pytest.raises(ExtraInputError) as exc_info:
            kifu_from_sfen("position startpos moves 7g7f+x")
        assert exc_info.value.offset == 29

    def test_position_error_propagates(self) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            kifu_from_sfen("position sfen 9/9/9/9/9/9/9/9/9 b - 0 moves")
        assert exc_info.value.offset == 36
        assert exc_info.value.description == "ply must be a positive 32-bit integer"
