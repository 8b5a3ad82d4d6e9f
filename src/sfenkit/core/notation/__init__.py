"""Notation package: SFEN / USI parsing and serialization."""

from sfenkit.core.notation.board import board_from_sfen, board_to_sfen, parse_board
from sfenkit.core.notation.bytes import Bytes, Split, Tokens
from sfenkit.core.notation.errors import (
    ExtraInputError,
    InvalidInputError,
    SfenParseError,
    parse_complete,
)
from sfenkit.core.notation.hands import hands_from_sfen, hands_to_sfen, parse_hands
from sfenkit.core.notation.kifu import kifu_from_sfen, kifu_to_sfen, parse_kifu
from sfenkit.core.notation.leaf import (
    col_from_sfen,
    col_to_sfen,
    hand_piece_kind_from_sfen,
    hand_piece_kind_to_sfen,
    parse_col,
    parse_hand_piece_kind,
    parse_piece,
    parse_piece_kind,
    parse_row,
    parse_side,
    parse_square,
    piece_from_sfen,
    piece_kind_from_sfen,
    piece_kind_to_sfen,
    piece_to_sfen,
    row_from_sfen,
    row_to_sfen,
    side_from_sfen,
    side_to_sfen,
    square_from_sfen,
    square_to_sfen,
)
from sfenkit.core.notation.move import (
    move_drop_from_sfen,
    move_from_sfen,
    move_to_sfen,
    move_walk_from_sfen,
    parse_move,
    parse_move_drop,
    parse_move_walk,
)
from sfenkit.core.notation.position import (
    STARTPOS,
    STARTPOS_SFEN,
    parse_position,
    position_from_sfen,
    position_to_sfen,
)

__all__ = [
    "STARTPOS",
    "STARTPOS_SFEN",
    # Substrate / errors
    "Bytes",
    "Split",
    "Tokens",
    "SfenParseError",
    "InvalidInputError",
    "ExtraInputError",
    "parse_complete",
    # Grammars
    "parse_side",
    "parse_col",
    "parse_row",
    "parse_square",
    "parse_piece_kind",
    "parse_piece",
    "parse_hand_piece_kind",
    "parse_board",
    "parse_hands",
    "parse_move_walk",
    "parse_move_drop",
    "parse_move",
    "parse_position",
    "parse_kifu",
    # String-level API
    "side_from_sfen",
    "side_to_sfen",
    "col_from_sfen",
    "col_to_sfen",
    "row_from_sfen",
    "row_to_sfen",
    "square_from_sfen",
    "square_to_sfen",
    "piece_kind_from_sfen",
    "piece_kind_to_sfen",
    "piece_from_sfen",
    "piece_to_sfen",
    "hand_piece_kind_from_sfen",
    "hand_piece_kind_to_sfen",
    "board_from_sfen",
    "board_to_sfen",
    "hands_from_sfen",
    "hands_to_sfen",
    "move_from_sfen",
    "move_walk_from_sfen",
    "move_drop_from_sfen",
    "move_to_sfen",
    "position_from_sfen",
    "position_to_sfen",
    "kifu_from_sfen",
    "kifu_to_sfen",
]
