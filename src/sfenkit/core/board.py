"""Board - piece placement on a 9x9 board."""

from __future__ import annotations

from collections.abc import Iterator

from sfenkit.core.enums import PieceKind, Side
from sfenkit.core.piece import Piece
from sfenkit.core.types import (
    ALL_COLS,
    ALL_ROWS,
    NUM_SQUARES,
    Square,
    col_char,
    make_square,
    row_char,
)

_BACK_RANK = (
    PieceKind.LANCE,
    PieceKind.KNIGHT,
    PieceKind.SILVER,
    PieceKind.GOLD,
    PieceKind.KING,
    PieceKind.GOLD,
    PieceKind.SILVER,
    PieceKind.KNIGHT,
    PieceKind.LANCE,
)


class Board:
    """81-square board, row-major from 9a to 1i.

    A board is mutable until :meth:`freeze` is called; positions hold frozen
    boards only. Copies are always mutable.
    """

    __slots__ = ("_squares", "_frozen")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * NUM_SQUARES
        self._frozen = False

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._check_mutable()
        self._squares[sq] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares with their pieces, in square order."""
        for sq, piece in enumerate(self._squares):
            if piece is not None:
                yield sq, piece

    def count(self, side: Side) -> int:
        """Number of *side*'s pieces on the board."""
        return sum(1 for _, piece in self.pieces() if piece.side == side)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._check_mutable()
        self._squares = [None] * NUM_SQUARES

    def freeze(self) -> Board:
        """Make this board read-only and return it."""
        self._frozen = True
        return self

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self) -> None:
        if self._frozen:
            raise TypeError("frozen Board does not support item assignment")

    # -- Factory ------------------------------------------------------------

    @classmethod
    def startpos(cls) -> Board:
        """Standard (even game) starting arrangement."""
        b = cls()
        for col, kind in zip(ALL_COLS, _BACK_RANK):
            b[make_square(col, 0)] = Piece(Side.GOTE, kind)
            b[make_square(col, 8)] = Piece(Side.SENTE, kind)
        for col in ALL_COLS:
            b[make_square(col, 2)] = Piece(Side.GOTE, PieceKind.PAWN)
            b[make_square(col, 6)] = Piece(Side.SENTE, PieceKind.PAWN)

        b[make_square(1, 1)] = Piece(Side.GOTE, PieceKind.ROOK)
        b[make_square(7, 1)] = Piece(Side.GOTE, PieceKind.BISHOP)
        b[make_square(1, 7)] = Piece(Side.SENTE, PieceKind.BISHOP)
        b[make_square(7, 7)] = Piece(Side.SENTE, PieceKind.ROOK)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(tuple(self._squares))

    def __repr__(self) -> str:
        rows: list[str] = ["   " + "  ".join(col_char(c) for c in ALL_COLS)]
        for row in ALL_ROWS:
            cells = []
            for col in ALL_COLS:
                p = self[make_square(col, row)]
                cells.append(f"{p!s:>2}" if p else " .")
            rows.append(f"{row_char(row)} {' '.join(cells)}")
        return "\n".join(rows)

    def __str__(self) -> str:
        from sfenkit.core.notation.board import board_to_sfen

        return board_to_sfen(self)
