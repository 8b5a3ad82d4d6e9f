"""Position notation: ``startpos`` or ``sfen <board> <side> <hands> <ply>``.

Both forms may be preceded by the ``position`` keyword, as in a USI
``position`` command. The formatter never writes that keyword; the game
record formatter does.
"""

from __future__ import annotations

from sfenkit.core.notation.board import board_to_sfen, parse_board
from sfenkit.core.notation.bytes import Bytes, Tokens
from sfenkit.core.notation.errors import (
    InvalidInputError,
    expect_empty,
    parse_complete,
)
from sfenkit.core.notation.hands import hands_to_sfen, parse_hands
from sfenkit.core.notation.leaf import parse_side, side_to_sfen
from sfenkit.core.position import PLY_MAX, Position

STARTPOS = "startpos"
STARTPOS_SFEN = "lnsgkgsnl/1r5b1/ppppppppp/9/9/9/PPPPPPPPP/1B5R1/LNSGKGSNL b - 1"

_KW_POSITION = b"position"
_KW_STARTPOS = STARTPOS.encode()
_KW_SFEN = b"sfen"
_PLY_DIGITS_MAX = len(str(PLY_MAX))


def _next_field(tokens: Tokens) -> Bytes:
    token = tokens.next_token()
    if token is None:
        raise InvalidInputError.at(tokens.remain(), "premature end of position")
    return token


def parse_position(data: Bytes) -> tuple[Bytes, Position]:
    """['position'] ('startpos' | ['sfen'] Board Side Hands Ply).

    Returns whatever follows the position, leading spaces stripped.
    """
    tokens = data.tokens()
    token = _next_field(tokens)
    if token.as_bytes() == _KW_POSITION:
        token = _next_field(tokens)
    if token.as_bytes() == _KW_STARTPOS:
        return tokens.remain(), Position.startpos()
    if token.as_bytes() == _KW_SFEN:
        token = _next_field(tokens)

    remain, board = parse_board(token)
    expect_empty(remain)
    remain, side = parse_side(_next_field(tokens))
    expect_empty(remain)
    remain, hands = parse_hands(_next_field(tokens))
    expect_empty(remain)
    ply = _parse_ply(_next_field(tokens))
    return tokens.remain(), Position(side, board, hands, ply)


def _parse_ply(token: Bytes) -> int:
    """Whole token of ASCII digits with a value in 1..PLY_MAX."""
    raw = token.as_bytes()
    # bytes.isdigit() accepts only b'0'..b'9'
    digits = raw.lstrip(b"0")
    if (
        not raw.isdigit()
        or len(digits) > _PLY_DIGITS_MAX
        or not (1 <= int(digits or b"0") <= PLY_MAX)
    ):
        raise InvalidInputError.at(token, "ply must be a positive 32-bit integer")
    return int(digits)


def position_to_sfen(position: Position) -> str:
    """``startpos`` for the even-game start, otherwise the four-field form."""
    if position.is_startpos():
        return STARTPOS
    return " ".join(
        (
            "sfen",
            board_to_sfen(position.board),
            side_to_sfen(position.side_to_move),
            hands_to_sfen(position.hands),
            str(position.ply),
        )
    )


def position_from_sfen(text: str) -> Position:
    """Parse a position, e.g. ``'startpos'`` or ``'sfen ... b - 1'``.

    >>> position_from_sfen(STARTPOS_SFEN).is_startpos()
    True
    """
    return parse_complete(parse_position, text)
