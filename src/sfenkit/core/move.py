"""Move value objects (USI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from sfenkit.core.enums import HandPieceKind
from sfenkit.core.piece import KIND_CHARS
from sfenkit.core.types import Square, is_valid_square, square_name


def _check_square(sq: Square) -> None:
    if not is_valid_square(sq):
        raise ValueError(f"square index out of range: {sq}")


@dataclass(frozen=True, slots=True)
class MoveWalk:
    """A piece moving on the board, optionally promoting on arrival."""

    src: Square
    dst: Square
    promotion: bool = False

    def __post_init__(self) -> None:
        _check_square(self.src)
        _check_square(self.dst)

    def __str__(self) -> str:
        base = f"{square_name(self.src)}{square_name(self.dst)}"
        return base + "+" if self.promotion else base


@dataclass(frozen=True, slots=True)
class MoveDrop:
    """A piece placed from hand onto the board."""

    kind: HandPieceKind
    dst: Square

    def __post_init__(self) -> None:
        _check_square(self.dst)

    def __str__(self) -> str:
        return f"{KIND_CHARS[self.kind.to_piece_kind()]}*{square_name(self.dst)}"


Move: TypeAlias = MoveWalk | MoveDrop


def walk(src: Square, dst: Square, promotion: bool = False) -> Move:
    return MoveWalk(src, dst, promotion)


def drop(kind: HandPieceKind, dst: Square) -> Move:
    return MoveDrop(kind, dst)


def is_drop(move: Move) -> bool:
    return isinstance(move, MoveDrop)
