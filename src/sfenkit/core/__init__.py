"""Core domain layer — shogi value types and their SFEN notation.

Quick start::

    from sfenkit.core import kifu_from_sfen, kifu_to_sfen

    kifu = kifu_from_sfen("position startpos moves 7g7f 3c3d 8h2b+")
    for move in kifu.moves:
        print(move)
    assert kifu_to_sfen(kifu) == "position startpos moves 7g7f 3c3d 8h2b+"
"""

from sfenkit.core.board import Board
from sfenkit.core.enums import (
    HAND_ORDER,
    HandPieceKind,
    NotHandPieceKindError,
    PieceKind,
    Side,
)
from sfenkit.core.hand import HAND_COUNT_MAX, Hand, Hands
from sfenkit.core.kifu import Kifu
from sfenkit.core.move import Move, MoveDrop, MoveWalk, drop, is_drop, walk
from sfenkit.core.notation import (
    STARTPOS,
    STARTPOS_SFEN,
    ExtraInputError,
    InvalidInputError,
    SfenParseError,
    board_from_sfen,
    board_to_sfen,
    hands_from_sfen,
    hands_to_sfen,
    kifu_from_sfen,
    kifu_to_sfen,
    move_from_sfen,
    move_to_sfen,
    piece_from_sfen,
    piece_to_sfen,
    position_from_sfen,
    position_to_sfen,
    square_from_sfen,
    square_to_sfen,
)
from sfenkit.core.piece import Piece
from sfenkit.core.position import PLY_MAX, Position
from sfenkit.core.types import (
    Col,
    Row,
    Square,
    col_of,
    make_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums
    "Side",
    "PieceKind",
    "HandPieceKind",
    "NotHandPieceKindError",
    "HAND_ORDER",
    # Types / helpers
    "Col",
    "Row",
    "Square",
    "col_of",
    "row_of",
    "make_square",
    "square_name",
    # Domain objects
    "Board",
    "Hand",
    "Hands",
    "HAND_COUNT_MAX",
    "Kifu",
    "Move",
    "MoveDrop",
    "MoveWalk",
    "drop",
    "is_drop",
    "walk",
    "Piece",
    "Position",
    "PLY_MAX",
    # Notation
    "STARTPOS",
    "STARTPOS_SFEN",
    "SfenParseError",
    "InvalidInputError",
    "ExtraInputError",
    "board_from_sfen",
    "board_to_sfen",
    "hands_from_sfen",
    "hands_to_sfen",
    "kifu_from_sfen",
    "kifu_to_sfen",
    "move_from_sfen",
    "move_to_sfen",
    "piece_from_sfen",
    "piece_to_sfen",
    "position_from_sfen",
    "position_to_sfen",
    "square_from_sfen",
    "square_to_sfen",
]
