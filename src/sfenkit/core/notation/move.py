"""USI move tokens: board moves (``7g7f``, ``8h2b+``) and drops (``G*4i``)."""

from __future__ import annotations

import logging

from sfenkit.core.move import Move, MoveDrop, MoveWalk
from sfenkit.core.notation.bytes import Bytes
from sfenkit.core.notation.errors import InvalidInputError, SfenParseError, parse_complete
from sfenkit.core.notation.leaf import PLUS, parse_hand_piece_kind, parse_square

_LOGGER = logging.getLogger(__name__)

STAR = ord("*")


def parse_move_walk(data: Bytes) -> tuple[Bytes, MoveWalk]:
    """Square Square '+'?"""
    data, src = parse_square(data)
    data, dst = parse_square(data)
    if data.get(0) == PLUS:
        return data.range_from(1), MoveWalk(src, dst, True)
    return data, MoveWalk(src, dst, False)


def parse_move_drop(data: Bytes) -> tuple[Bytes, MoveDrop]:
    """HandPieceKind '*' Square"""
    data, kind = parse_hand_piece_kind(data)
    if data.get(0) != STAR:
        raise InvalidInputError.at(data, "'*' expected")
    remain, dst = parse_square(data.range_from(1))
    return remain, MoveDrop(kind, dst)


def parse_move(data: Bytes) -> tuple[Bytes, Move]:
    """MoveWalk | MoveDrop.

    Both shapes are tried in turn. If neither matches, the failure is
    reported once at the start of the token; the inner errors are dropped.
    """
    try:
        return parse_move_walk(data)
    except SfenParseError as walk_exc:
        _LOGGER.debug("Not a board move, trying drop: %s", walk_exc)
    try:
        return parse_move_drop(data)
    except SfenParseError:
        raise InvalidInputError.at(data, "`Move` expected") from None


def move_to_sfen(move: Move) -> str:
    return str(move)


def move_from_sfen(text: str) -> Move:
    """Parse a single USI move token, e.g. ``'7g7f'`` or ``'B*6e'``."""
    return parse_complete(parse_move, text)


def move_walk_from_sfen(text: str) -> MoveWalk:
    return parse_complete(parse_move_walk, text)


def move_drop_from_sfen(text: str) -> MoveDrop:
    return parse_complete(parse_move_drop, text)
