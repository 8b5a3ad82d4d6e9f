"""Tests for square helpers and named square constants."""

import pytest

from sfenkit.core.types import (
    ALL_SQUARES,
    NUM_SQUARES,
    SQ_11,
    SQ_19,
    SQ_77,
    SQ_91,
    SQ_99,
    col_of,
    is_valid_square,
    make_square,
    row_of,
    square_name,
)


class TestSquareHelpers:
    def test_corners(self) -> None:
        assert square_name(0) == "9a"
        assert square_name(8) == "1a"
        assert square_name(72) == "9i"
        assert square_name(80) == "1i"

    def test_named_constants(self) -> None:
        assert (SQ_91, SQ_11, SQ_99, SQ_19) == (0, 8, 72, 80)
        assert square_name(SQ_77) == "7g"

    def test_make_square_decomposes(self) -> None:
        for sq in ALL_SQUARES:
            assert make_square(col_of(sq), row_of(sq)) == sq

    @pytest.mark.parametrize("col,row", [(-1, 0), (9, 0), (0, 9), (0, -1)])
    def test_make_square_out_of_range(self, col: int, row: int) -> None:
        with pytest.raises(ValueError):
            make_square(col, row)

    def test_is_valid_square(self) -> None:
        assert is_valid_square(0)
        assert is_valid_square(NUM_SQUARES - 1)
        assert not is_valid_square(-1)
        assert not is_valid_square(NUM_SQUARES)
