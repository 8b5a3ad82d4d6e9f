"""Board field: nine '/'-separated rows of pieces and blank-run digits."""

from __future__ import annotations

from sfenkit.core.board import Board
from sfenkit.core.notation.bytes import Bytes
from sfenkit.core.notation.errors import InvalidInputError, parse_complete
from sfenkit.core.notation.leaf import parse_piece
from sfenkit.core.piece import Piece
from sfenkit.core.types import ALL_COLS, ALL_ROWS, NUM_COLS, make_square

SLASH = ord("/")

_DIGIT_1 = ord("1")
_DIGIT_9 = ord("9")


def parse_board(data: Bytes) -> tuple[Bytes, Board]:
    """BoardRow ('/' BoardRow){8}, reading to the end of *data*."""
    board = Board()
    fields = data.split(lambda b: b == SLASH)
    last_field = data
    for row in ALL_ROWS:
        field = next(fields, None)
        if field is None:
            raise InvalidInputError.at(data, "board has less than 9 rows")
        _, cells = _parse_board_row(field)
        for col, piece in zip(ALL_COLS, cells):
            board[make_square(col, row)] = piece
        last_field = field
    if next(fields, None) is not None:
        raise InvalidInputError(last_field.end_offset, "board has more than 9 rows")
    return data.exhausted(), board


def _parse_board_row(data: Bytes) -> tuple[Bytes, list[Piece | None]]:
    """(Digit19 | Piece)+ covering exactly nine columns."""
    if not data:
        raise InvalidInputError.at(data, "board row expected")
    cells: list[Piece | None] = []
    while data:
        b = data[0]
        if _DIGIT_1 <= b <= _DIGIT_9:
            cells.extend([None] * (b - _DIGIT_1 + 1))
            data = data.range_from(1)
        else:
            data, piece = parse_piece(data)
            cells.append(piece)
        if len(cells) > NUM_COLS:
            raise InvalidInputError.at(data, "board row has more than 9 columns")
    if len(cells) != NUM_COLS:
        raise InvalidInputError.at(data, "board row has less than 9 columns")
    return data, cells


def board_to_sfen(board: Board) -> str:
    """Serialise *board*; blank runs are always written as one maximal digit."""
    rows: list[str] = []
    for row in ALL_ROWS:
        empty = 0
        text = ""
        for col in ALL_COLS:
            piece = board[make_square(col, row)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)


def board_from_sfen(text: str) -> Board:
    """Parse the board field of an SFEN string."""
    return parse_complete(parse_board, text)
