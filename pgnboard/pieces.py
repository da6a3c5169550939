"""Chess piece kinds and coloured pieces."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from pgnboard.players import Player

_KIND_CHARS = "PNBRQK"
_KIND_NAMES = ("pawn", "knight", "bishop", "rook", "queen", "king")


class PieceKind(Enum):
    """The kind of a chess piece; the value is its stable numeric id."""

    PAWN = 0
    KNIGHT = 1
    BISHOP = 2
    ROOK = 3
    QUEEN = 4
    KING = 5

    def as_char(self) -> str:
        """Return the upper-case letter of this kind."""
        return _KIND_CHARS[self.value]

    @classmethod
    def from_char(cls, value: str) -> PieceKind:
        """Return the kind named by a letter, in either case."""
        if not isinstance(value, str) or len(value) != 1:
            raise ValueError(f"invalid piece character: {value!r}")
        upper = value.upper()
        if upper not in _KIND_CHARS or not value.isascii():
            raise ValueError(f"invalid piece character: {value!r}")
        return cls(_KIND_CHARS.index(upper))

    def __str__(self) -> str:
        return _KIND_NAMES[self.value]


@dataclass(frozen=True)
class Piece:
    """A piece of a given kind belonging to one side."""

    player: Player
    kind: PieceKind

    WHITE_PAWN: ClassVar[Piece]
    BLACK_PAWN: ClassVar[Piece]

    def to_fen(self) -> str:
        """Return the FEN letter: upper case for white, lower case for black."""
        char = self.kind.as_char()
        return char.upper() if self.player is Player.WHITE else char.lower()

    def __repr__(self) -> str:
        return self.player.as_char() + self.kind.as_char()


Piece.WHITE_PAWN = Piece(Player.WHITE, PieceKind.PAWN)
Piece.BLACK_PAWN = Piece(Player.BLACK, PieceKind.PAWN)