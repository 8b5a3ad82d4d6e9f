"""Tests for the SFEN error types and parse_complete."""

import logging

import pytest

from sfenkit.core.enums import Side
from sfenkit.core.notation.bytes import Bytes
from sfenkit.core.notation.errors import (
    ExtraInputError,
    InvalidInputError,
    SfenParseError,
    expect_empty,
    parse_complete,
)
from sfenkit.core.notation.leaf import parse_side


class TestErrorTypes:
    def test_invalid_input_message(self) -> None:
        err = InvalidInputError(4, "hand piece expected")
        assert str(err) == "invalid input at s[4..]: hand piece expected"
        assert err.offset == 4
        assert err.description == "hand piece expected"

    def test_extra_input_message(self) -> None:
        err = ExtraInputError(7)
        assert str(err) == "extra input at s[7..]"
        assert err.offset == 7

    def test_hierarchy(self) -> None:
        assert issubclass(InvalidInputError, SfenParseError)
        assert issubclass(ExtraInputError, SfenParseError)
        assert issubclass(SfenParseError, ValueError)

    def test_at_uses_absolute_offset(self) -> None:
        data = Bytes(b"abcdef").range_from(3)
        assert InvalidInputError.at(data, "x").offset == 3
        assert ExtraInputError.at(data.range_from(1)).offset == 4


class TestExpectEmpty:
    def test_empty_passes(self) -> None:
        expect_empty(Bytes(b"", 9))

    def test_leftover_raises(self) -> None:
        with pytest.raises(ExtraInputError) as exc_info:
            expect_empty(Bytes(b"zz", 2))
        assert exc_info.value.offset == 2


class TestParseComplete:
    def test_success(self) -> None:
        assert parse_complete(parse_side, "w") == Side.GOTE

    def test_accepts_bytes(self) -> None:
        assert parse_complete(parse_side, b"b") == Side.SENTE

    def test_trailing_input(self) -> None:
        with pytest.raises(ExtraInputError) as exc_info:
            parse_complete(parse_side, "bw")
        assert exc_info.value.offset == 1

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="sfenkit.core.notation.errors"):
            with pytest.raises(InvalidInputError):
                parse_complete(parse_side, "x")
        assert "Rejected SFEN input 'x'" in caplog.text

    @pytest.mark.parametrize("text,offset", [("　", 0), ("bé", 1)])
    def test_non_ascii_is_invalid_input(self, text: str, offset: int) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            parse_complete(parse_side, text)
        assert exc_info.value.offset == offset
        assert exc_info.value.description == "ASCII character expected"
