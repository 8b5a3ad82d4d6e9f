"""Hands field: '-' or a run of optionally counted hand-piece letters.

Parsing is more lenient than the canonical form:

* pieces may appear in any order;
* a (side, kind) pair may repeat, and the counts are summed;
* an explicit count of 1 is allowed;
* sums above 255 saturate instead of failing (each element still carries at
  most two digits).

Formatting always emits the canonical form.
"""

from __future__ import annotations

from sfenkit.core.enums import HAND_ORDER, HandPieceKind, Side
from sfenkit.core.hand import Hands
from sfenkit.core.notation.bytes import Bytes
from sfenkit.core.notation.errors import InvalidInputError, parse_complete
from sfenkit.core.piece import KIND_CHARS

DASH = ord("-")

_DIGIT_0 = ord("0")
_DIGIT_1 = ord("1")
_DIGIT_9 = ord("9")


def _hand_letter(side: Side, kind: HandPieceKind) -> str:
    letter = KIND_CHARS[kind.to_piece_kind()]
    return letter if side == Side.SENTE else letter.lower()


_HAND_PIECES: dict[int, tuple[Side, HandPieceKind]] = {
    ord(_hand_letter(side, kind)): (side, kind)
    for side in Side
    for kind in HandPieceKind
}


def parse_hands(data: Bytes) -> tuple[Bytes, Hands]:
    """('-' | HandsElem+), reading to the end of *data*."""
    if not data:
        raise InvalidInputError.at(data, "`Hands` expected")
    if len(data) == 1 and data[0] == DASH:
        return data.exhausted(), Hands()

    hands = Hands()
    while data:
        data, count = _parse_count(data)
        data, (side, kind) = _parse_hand_piece(data)
        hands[side].add(kind, count)
    return data, hands


def _parse_count(data: Bytes) -> tuple[Bytes, int]:
    """[1-9][0-9]?; absent means 1 and consumes nothing."""
    first = data.get(0)
    if first is None or not (_DIGIT_1 <= first <= _DIGIT_9):
        return data, 1
    count = first - _DIGIT_0
    second = data.get(1)
    if second is not None and _DIGIT_0 <= second <= _DIGIT_9:
        return data.range_from(2), 10 * count + second - _DIGIT_0
    return data.range_from(1), count


def _parse_hand_piece(data: Bytes) -> tuple[Bytes, tuple[Side, HandPieceKind]]:
    """One of PLNSBRG (SENTE) or plnsbrg (GOTE)."""
    entry = _HAND_PIECES.get(data[0]) if data else None
    if entry is None:
        raise InvalidInputError.at(data, "hand piece expected")
    return data.range_from(1), entry


def hands_to_sfen(hands: Hands) -> str:
    """Canonical hands: SENTE then GOTE, rook→pawn, counts only above 1."""
    if hands.is_empty():
        return "-"
    parts: list[str] = []
    for side in (Side.SENTE, Side.GOTE):
        hand = hands[side]
        for kind in HAND_ORDER:
            count = hand[kind]
            if count == 0:
                continue
            if count > 1:
                parts.append(str(count))
            parts.append(_hand_letter(side, kind))
    return "".join(parts)


def hands_from_sfen(text: str) -> Hands:
    """Parse the hands field of an SFEN string."""
    return parse_complete(parse_hands, text)
