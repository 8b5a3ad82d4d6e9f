"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from sfenkit.core.enums import PieceKind, Side

# SFEN spelling of each kind as written for SENTE; GOTE uses lowercase.
KIND_CHARS: dict[PieceKind, str] = {
    PieceKind.PAWN: "P",
    PieceKind.LANCE: "L",
    PieceKind.KNIGHT: "N",
    PieceKind.SILVER: "S",
    PieceKind.BISHOP: "B",
    PieceKind.ROOK: "R",
    PieceKind.GOLD: "G",
    PieceKind.KING: "K",
    PieceKind.PRO_PAWN: "+P",
    PieceKind.PRO_LANCE: "+L",
    PieceKind.PRO_KNIGHT: "+N",
    PieceKind.PRO_SILVER: "+S",
    PieceKind.HORSE: "+B",
    PieceKind.DRAGON: "+R",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a shogi piece on the board."""

    side: Side
    kind: PieceKind

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """SFEN spelling (uppercase = SENTE, lowercase = GOTE)."""
        text = KIND_CHARS[self.kind]
        return text if self.side == Side.SENTE else text.lower()

    # ── Derived pieces ───────────────────────────────────────────────────

    def promoted(self) -> Piece:
        return Piece(self.side, self.kind.promoted())

    def unpromoted(self) -> Piece:
        return Piece(self.side, self.kind.unpromoted())

    def flipped(self) -> Piece:
        """Same kind, owned by the other side."""
        return Piece(self.side.opposite, self.kind)


S_PAWN = Piece(Side.SENTE, PieceKind.PAWN)
S_LANCE = Piece(Side.SENTE, PieceKind.LANCE)
S_KNIGHT = Piece(Side.SENTE, PieceKind.KNIGHT)
S_SILVER = Piece(Side.SENTE, PieceKind.SILVER)
S_BISHOP = Piece(Side.SENTE, PieceKind.BISHOP)
S_ROOK = Piece(Side.SENTE, PieceKind.ROOK)
S_GOLD = Piece(Side.SENTE, PieceKind.GOLD)
S_KING = Piece(Side.SENTE, PieceKind.KING)
S_PRO_PAWN = Piece(Side.SENTE, PieceKind.PRO_PAWN)
S_PRO_LANCE = Piece(Side.SENTE, PieceKind.PRO_LANCE)
S_PRO_KNIGHT = Piece(Side.SENTE, PieceKind.PRO_KNIGHT)
S_PRO_SILVER = Piece(Side.SENTE, PieceKind.PRO_SILVER)
S_HORSE = Piece(Side.SENTE, PieceKind.HORSE)
S_DRAGON = Piece(Side.SENTE, PieceKind.DRAGON)

G_PAWN = Piece(Side.GOTE, PieceKind.PAWN)
G_LANCE = Piece(Side.GOTE, PieceKind.LANCE)
G_KNIGHT = Piece(Side.GOTE, PieceKind.KNIGHT)
G_SILVER = Piece(Side.GOTE, PieceKind.SILVER)
G_BISHOP = Piece(Side.GOTE, PieceKind.BISHOP)
G_ROOK = Piece(Side.GOTE, PieceKind.ROOK)
G_GOLD = Piece(Side.GOTE, PieceKind.GOLD)
G_KING = Piece(Side.GOTE, PieceKind.KING)
G_PRO_PAWN = Piece(Side.GOTE, PieceKind.PRO_PAWN)
G_PRO_LANCE = Piece(Side.GOTE, PieceKind.PRO_LANCE)
G_PRO_KNIGHT = Piece(Side.GOTE, PieceKind.PRO_KNIGHT)
G_PRO_SILVER = Piece(Side.GOTE, PieceKind.PRO_SILVER)
G_HORSE = Piece(Side.GOTE, PieceKind.HORSE)
G_DRAGON = Piece(Side.GOTE, PieceKind.DRAGON)

ALL_PIECES: tuple[Piece, ...] = tuple(
    Piece(side, kind) for side in Side for kind in PieceKind
)
