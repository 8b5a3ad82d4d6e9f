"""Kifu - a game record, the starting position plus the moves played from it."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from sfenkit.core.move import Move
from sfenkit.core.position import Position


@dataclass(frozen=True, slots=True, init=False)
class Kifu:
    """Immutable game record.

    Moves are stored as given; nothing here replays them against the
    position.
    """

    position: Position
    moves: tuple[Move, ...]

    def __init__(
        self, position: Position | None = None, moves: Iterable[Move] = ()
    ) -> None:
        if position is None:
            position = Position.startpos()
        object.__setattr__(self, "position", position)
        object.__setattr__(self, "moves", tuple(moves))

    @classmethod
    def startpos(cls) -> Kifu:
        """Record with the even-game start and no moves."""
        return cls(Position.startpos(), ())

    def __str__(self) -> str:
        from sfenkit.core.notation.kifu import kifu_to_sfen

        return kifu_to_sfen(self)
