"""SFEN parse errors and the run-to-completion wrapper."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeAlias, TypeVar

from sfenkit.core.notation.bytes import Bytes

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

# A grammar: consume a prefix of the view, return the rest and the value.
Parser: TypeAlias = Callable[[Bytes], tuple[Bytes, T]]


class SfenParseError(ValueError):
    """Base class for SFEN decoding failures.

    ``offset`` is a byte offset into the string originally handed to the
    parser, however deeply the failing grammar was nested.
    """

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(message)
        self.offset = offset


class InvalidInputError(SfenParseError):
    """``s[offset:]`` does not start with the expected element."""

    def __init__(self, offset: int, description: str) -> None:
        super().__init__(f"invalid input at s[{offset}..]: {description}", offset)
        self.description = description

    @classmethod
    def at(cls, data: Bytes, description: str) -> InvalidInputError:
        return cls(data.base_offset, description)


class ExtraInputError(SfenParseError):
    """Parsing succeeded but ``s[offset:]`` was left over."""

    def __init__(self, offset: int) -> None:
        super().__init__(f"extra input at s[{offset}..]", offset)

    @classmethod
    def at(cls, data: Bytes) -> ExtraInputError:
        return cls(data.base_offset)


def expect_empty(remain: Bytes) -> None:
    """Raise :class:`ExtraInputError` unless *remain* is empty."""
    if remain:
        raise ExtraInputError.at(remain)


def _to_bytes(text: str | bytes) -> Bytes:
    try:
        return Bytes(text)
    except UnicodeEncodeError as exc:
        raise InvalidInputError(exc.start, "ASCII character expected") from None


def parse_complete(parser: Parser[T], text: str | bytes) -> T:
    """Run *parser* over the whole of *text*.

    Leftover input is an :class:`ExtraInputError` at the first unconsumed
    byte. A non-ASCII character in *text* is an :class:`InvalidInputError`
    at its offset.
    """
    try:
        remain, value = parser(_to_bytes(text))
        expect_empty(remain)
    except SfenParseError as exc:
        _LOGGER.debug("Rejected SFEN input %r: %s", text, exc)
        raise
    return value
