"""Core enumerations for the shogi domain."""

from __future__ import annotations

from enum import IntEnum


class Side(IntEnum):
    """Side to move. ``SENTE`` moves first."""

    SENTE = 0
    GOTE = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Piece kind without side. Promoted kinds follow the raw ones."""

    PAWN = 0
    LANCE = 1
    KNIGHT = 2
    SILVER = 3
    BISHOP = 4
    ROOK = 5
    GOLD = 6
    KING = 7
    PRO_PAWN = 8
    PRO_LANCE = 9
    PRO_KNIGHT = 10
    PRO_SILVER = 11
    HORSE = 12
    DRAGON = 13

    @property
    def is_promoted(self) -> bool:
        return self >= PieceKind.PRO_PAWN

    @property
    def can_promote(self) -> bool:
        return self in _PROMOTED

    def promoted(self) -> PieceKind:
        """Promoted counterpart, e.g. BISHOP → HORSE."""
        try:
            return _PROMOTED[self]
        except KeyError:
            raise ValueError(f"{self.name} has no promoted form") from None

    def unpromoted(self) -> PieceKind:
        """Raw counterpart of a promoted kind; raw kinds map to themselves."""
        return _UNPROMOTED.get(self, self)


_PROMOTED: dict[PieceKind, PieceKind] = {
    PieceKind.PAWN: PieceKind.PRO_PAWN,
    PieceKind.LANCE: PieceKind.PRO_LANCE,
    PieceKind.KNIGHT: PieceKind.PRO_KNIGHT,
    PieceKind.SILVER: PieceKind.PRO_SILVER,
    PieceKind.BISHOP: PieceKind.HORSE,
    PieceKind.ROOK: PieceKind.DRAGON,
}
_UNPROMOTED: dict[PieceKind, PieceKind] = {v: k for k, v in _PROMOTED.items()}


class NotHandPieceKindError(ValueError):
    """Raised when a :class:`PieceKind` cannot be held in hand."""

    def __init__(self, kind: PieceKind) -> None:
        super().__init__(f"not hand piece kind: {kind.name}")
        self.kind = kind


class HandPieceKind(IntEnum):
    """Kinds that may appear in a hand (captured, unpromoted, non-royal)."""

    PAWN = 0
    LANCE = 1
    KNIGHT = 2
    SILVER = 3
    BISHOP = 4
    ROOK = 5
    GOLD = 6

    def to_piece_kind(self) -> PieceKind:
        return PieceKind[self.name]

    @classmethod
    def from_piece_kind(cls, kind: PieceKind) -> HandPieceKind:
        """Hand kind for *kind*; king and promoted kinds are rejected."""
        try:
            return cls[kind.name]
        except KeyError:
            raise NotHandPieceKindError(kind) from None


# Canonical SFEN order for hand output (rook first, pawn last).
HAND_ORDER: tuple[HandPieceKind, ...] = (
    HandPieceKind.ROOK,
    HandPieceKind.BISHOP,
    HandPieceKind.GOLD,
    HandPieceKind.SILVER,
    HandPieceKind.KNIGHT,
    HandPieceKind.LANCE,
    HandPieceKind.PAWN,
)
