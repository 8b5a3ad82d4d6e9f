"""Single-token grammars: side, column, row, square, piece kinds and pieces.

Each ``parse_*`` takes a :class:`Bytes` view and returns ``(remain, value)``
after consuming the shortest prefix that decides the element. On rejection
nothing is consumed and :class:`InvalidInputError` points at the byte where
the element should have started.
"""

from __future__ import annotations

from sfenkit.core.enums import HandPieceKind, PieceKind, Side
from sfenkit.core.notation.bytes import Bytes
from sfenkit.core.notation.errors import InvalidInputError, parse_complete
from sfenkit.core.piece import ALL_PIECES, KIND_CHARS, Piece
from sfenkit.core.types import (
    Col,
    Row,
    Square,
    col_char,
    col_of,
    make_square,
    row_char,
    row_of,
)

PLUS = ord("+")

_SIDE_BYTES: dict[int, Side] = {ord("b"): Side.SENTE, ord("w"): Side.GOTE}
_SIDE_CHARS: tuple[str, ...] = ("b", "w")

# Raw kinds by SENTE letter; promoted kinds by the letter following '+'.
_RAW_KINDS: dict[int, PieceKind] = {
    ord(text): kind for kind, text in KIND_CHARS.items() if len(text) == 1
}
_PROMOTED_KINDS: dict[int, PieceKind] = {
    ord(text[1]): kind for kind, text in KIND_CHARS.items() if len(text) == 2
}
_HAND_KINDS: dict[int, HandPieceKind] = {
    ord(KIND_CHARS[hpk.to_piece_kind()]): hpk for hpk in HandPieceKind
}
_RAW_PIECES: dict[int, Piece] = {
    ord(str(p)): p for p in ALL_PIECES if not p.kind.is_promoted
}
_PROMOTED_PIECES: dict[int, Piece] = {
    ord(str(p)[1]): p for p in ALL_PIECES if p.kind.is_promoted
}


def _split_first(data: Bytes, description: str) -> tuple[int, Bytes]:
    """First byte and the rest, or reject empty input."""
    split = data.try_split_at(1)
    if split is None:
        raise InvalidInputError.at(data, description)
    head, remain = split
    return head[0], remain


# ── Side ──────────────────────────────────────────────────────────────────────


def parse_side(data: Bytes) -> tuple[Bytes, Side]:
    """``'b'`` (SENTE) | ``'w'`` (GOTE)."""
    description = "`Side` ('b' | 'w') expected"
    b, remain = _split_first(data, description)
    side = _SIDE_BYTES.get(b)
    if side is None:
        raise InvalidInputError.at(data, description)
    return remain, side


def side_to_sfen(side: Side) -> str:
    return _SIDE_CHARS[side]


# ── Column / row / square ─────────────────────────────────────────────────────


def parse_col(data: Bytes) -> tuple[Bytes, Col]:
    """``'9'``..``'1'`` → column 0..8."""
    description = "`Col` ([1-9]) expected"
    b, remain = _split_first(data, description)
    if not (ord("1") <= b <= ord("9")):
        raise InvalidInputError.at(data, description)
    return remain, ord("9") - b


def col_to_sfen(col: Col) -> str:
    return col_char(col)


def parse_row(data: Bytes) -> tuple[Bytes, Row]:
    """``'a'``..``'i'`` → row 0..8."""
    description = "`Row` ([a-i]) expected"
    b, remain = _split_first(data, description)
    if not (ord("a") <= b <= ord("i")):
        raise InvalidInputError.at(data, description)
    return remain, b - ord("a")


def row_to_sfen(row: Row) -> str:
    return row_char(row)


def parse_square(data: Bytes) -> tuple[Bytes, Square]:
    """Col Row, e.g. ``7g``."""
    data, col = parse_col(data)
    remain, row = parse_row(data)
    return remain, make_square(col, row)


def square_to_sfen(sq: Square) -> str:
    return col_to_sfen(col_of(sq)) + row_to_sfen(row_of(sq))


# ── Piece kinds / pieces ──────────────────────────────────────────────────────


def parse_piece_kind(data: Bytes) -> tuple[Bytes, PieceKind]:
    """Kind in SENTE spelling: ``P``..``K`` or ``'+'`` followed by ``PLNSBR``."""
    if data.get(0) == PLUS:
        description = "promoted piece kind expected"
        rest = data.range_from(1)
        b, remain = _split_first(rest, description)
        kind = _PROMOTED_KINDS.get(b)
        if kind is None:
            raise InvalidInputError.at(rest, description)
        return remain, kind

    description = "piece kind expected"
    b, remain = _split_first(data, description)
    kind = _RAW_KINDS.get(b)
    if kind is None:
        raise InvalidInputError.at(data, description)
    return remain, kind


def piece_kind_to_sfen(kind: PieceKind) -> str:
    return KIND_CHARS[kind]


def parse_piece(data: Bytes) -> tuple[Bytes, Piece]:
    """RawPiece | ``'+'`` PromotedPiece; letter case selects the side."""
    if data.get(0) == PLUS:
        return _parse_promoted_piece(data.range_from(1))
    return _parse_raw_piece(data)


def _parse_raw_piece(data: Bytes) -> tuple[Bytes, Piece]:
    description = "raw piece expected"
    b, remain = _split_first(data, description)
    piece = _RAW_PIECES.get(b)
    if piece is None:
        raise InvalidInputError.at(data, description)
    return remain, piece


def _parse_promoted_piece(data: Bytes) -> tuple[Bytes, Piece]:
    description = "promoted piece expected"
    b, remain = _split_first(data, description)
    piece = _PROMOTED_PIECES.get(b)
    if piece is None:
        raise InvalidInputError.at(data, description)
    return remain, piece


def piece_to_sfen(piece: Piece) -> str:
    return str(piece)


# ── Hand piece kinds ──────────────────────────────────────────────────────────


def parse_hand_piece_kind(data: Bytes) -> tuple[Bytes, HandPieceKind]:
    """One of ``PLNSBRG`` (uppercase only)."""
    description = "hand piece kind expected"
    b, remain = _split_first(data, description)
    kind = _HAND_KINDS.get(b)
    if kind is None:
        raise InvalidInputError.at(data, description)
    return remain, kind


def hand_piece_kind_to_sfen(kind: HandPieceKind) -> str:
    return KIND_CHARS[kind.to_piece_kind()]


# ── String-level API ──────────────────────────────────────────────────────────


def side_from_sfen(text: str) -> Side:
    return parse_complete(parse_side, text)


def col_from_sfen(text: str) -> Col:
    return parse_complete(parse_col, text)


def row_from_sfen(text: str) -> Row:
    return parse_complete(parse_row, text)


def square_from_sfen(text: str) -> Square:
    """Parse a square name, e.g. ``'7g'`` → ``SQ_77``."""
    return parse_complete(parse_square, text)


def piece_kind_from_sfen(text: str) -> PieceKind:
    return parse_complete(parse_piece_kind, text)


def piece_from_sfen(text: str) -> Piece:
    """Parse a board piece, e.g. ``'+b'`` → GOTE horse."""
    return parse_complete(parse_piece, text)


def hand_piece_kind_from_sfen(text: str) -> HandPieceKind:
    return parse_complete(parse_hand_piece_kind, text)
