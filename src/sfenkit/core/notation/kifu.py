"""Game records as a USI ``position`` command: ``position <pos> [moves m...]``."""

from __future__ import annotations

from sfenkit.core.kifu import Kifu
from sfenkit.core.move import Move
from sfenkit.core.notation.bytes import Bytes
from sfenkit.core.notation.errors import InvalidInputError, expect_empty, parse_complete
from sfenkit.core.notation.move import move_to_sfen, parse_move
from sfenkit.core.notation.position import parse_position, position_to_sfen

_KW_MOVES = b"moves"


def parse_kifu(data: Bytes) -> tuple[Bytes, Kifu]:
    """Position ['moves' Move*], reading to the end of *data*."""
    remain, position = parse_position(data)
    tokens = remain.tokens()
    token = tokens.next_token()
    if token is None:
        return data.exhausted(), Kifu(position)
    if token.as_bytes() != _KW_MOVES:
        raise InvalidInputError.at(token, '"moves" expected')

    moves: list[Move] = []
    for token in tokens:
        rest, move = parse_move(token)
        expect_empty(rest)
        moves.append(move)
    return data.exhausted(), Kifu(position, moves)


def kifu_to_sfen(kifu: Kifu) -> str:
    """``position <pos>``, plus `` moves ...`` when any moves were played."""
    parts = ["position", position_to_sfen(kifu.position)]
    if kifu.moves:
        parts.append("moves")
        parts.extend(move_to_sfen(move) for move in kifu.moves)
    return " ".join(parts)


def kifu_from_sfen(text: str) -> Kifu:
    """Parse a full ``position ... moves ...`` line."""
    return parse_complete(parse_kifu, text)
