"""Position - side to move, board, hands and move number."""

from __future__ import annotations

from dataclasses import dataclass, field

from sfenkit.core.board import Board
from sfenkit.core.enums import Side
from sfenkit.core.hand import Hands

PLY_MAX = 2**32 - 1


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable shogi position.

    *ply* is the 1-based number of the next move to be played. The board and
    hands passed in are copied and frozen: later changes to the caller's
    objects do not leak in, and ``position.board`` / ``position.hands`` reject
    mutation. Use ``.copy()`` to get an editable board or hands.
    """

    side_to_move: Side = Side.SENTE
    board: Board = field(default_factory=Board.startpos)
    hands: Hands = field(default_factory=Hands)
    ply: int = 1

    def __post_init__(self) -> None:
        if not (1 <= self.ply <= PLY_MAX):
            raise ValueError(f"ply must be in 1..{PLY_MAX}: {self.ply}")
        object.__setattr__(self, "side_to_move", Side(self.side_to_move))
        object.__setattr__(self, "board", self.board.copy().freeze())
        object.__setattr__(self, "hands", self.hands.copy().freeze())

    @classmethod
    def startpos(cls) -> Position:
        """Even-game starting position, SENTE to move, move 1."""
        return cls(Side.SENTE, Board.startpos(), Hands(), 1)

    def is_startpos(self) -> bool:
        return self == _STARTPOS

    def __str__(self) -> str:
        from sfenkit.core.notation.position import position_to_sfen

        return position_to_sfen(self)


_STARTPOS = Position.startpos()
