"""Hand - captured pieces available for dropping."""

from __future__ import annotations

from collections.abc import Iterator

from sfenkit.core.enums import HandPieceKind, Side

HAND_COUNT_MAX = 255

_HAND_KIND_COUNT = len(HandPieceKind)
_SIDE_COUNT = len(Side)


class Hand:
    """One side's hand: a count (0–255) per :class:`HandPieceKind`."""

    __slots__ = ("_counts", "_frozen")

    def __init__(self) -> None:
        self._counts: list[int] = [0] * _HAND_KIND_COUNT
        self._frozen = False

    def __getitem__(self, kind: HandPieceKind) -> int:
        return self._counts[kind]

    def __setitem__(self, kind: HandPieceKind, count: int) -> None:
        self._check_mutable()
        if not (0 <= count <= HAND_COUNT_MAX):
            raise ValueError(f"hand count out of range: {count}")
        self._counts[kind] = count

    def add(self, kind: HandPieceKind, count: int = 1) -> None:
        """Increase *kind* by *count*, clamping at ``HAND_COUNT_MAX``."""
        self._check_mutable()
        if count < 0:
            raise ValueError(f"negative hand count: {count}")
        self._counts[kind] = min(self._counts[kind] + count, HAND_COUNT_MAX)

    def items(self) -> Iterator[tuple[HandPieceKind, int]]:
        """Non-zero ``(kind, count)`` pairs in :class:`HandPieceKind` order."""
        for kind in HandPieceKind:
            count = self._counts[kind]
            if count:
                yield kind, count

    def is_empty(self) -> bool:
        return not any(self._counts)

    def total(self) -> int:
        return sum(self._counts)

    def copy(self) -> Hand:
        h = Hand()
        h._counts = self._counts.copy()
        return h

    def freeze(self) -> Hand:
        """Make this hand read-only and return it."""
        self._frozen = True
        return self

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self) -> None:
        if self._frozen:
            raise TypeError("frozen Hand cannot be changed")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self._counts == other._counts

    def __hash__(self) -> int:
        return hash(tuple(self._counts))

    def __repr__(self) -> str:
        inner = ", ".join(f"{kind.name}={count}" for kind, count in self.items())
        return f"Hand({inner})"


class Hands:
    """Both sides' hands, indexed by :class:`Side`."""

    __slots__ = ("_hands",)

    def __init__(self) -> None:
        self._hands: list[Hand] = [Hand() for _ in range(_SIDE_COUNT)]

    def __getitem__(self, side: Side) -> Hand:
        return self._hands[side]

    def is_empty(self) -> bool:
        return all(hand.is_empty() for hand in self._hands)

    def copy(self) -> Hands:
        h = Hands()
        h._hands = [hand.copy() for hand in self._hands]
        return h

    def freeze(self) -> Hands:
        """Freeze both hands and return self."""
        for hand in self._hands:
            hand.freeze()
        return self

    @property
    def is_frozen(self) -> bool:
        return all(hand.is_frozen for hand in self._hands)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hands):
            return NotImplemented
        return self._hands == other._hands

    def __hash__(self) -> int:
        return hash(tuple(self._hands))

    def __repr__(self) -> str:
        return f"Hands(sente={self[Side.SENTE]!r}, gote={self[Side.GOTE]!r})"

    def __str__(self) -> str:
        from sfenkit.core.notation.hands import hands_to_sfen

        return hands_to_sfen(self)
