"""Moves from one square to another, with optional promotion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from pgnboard.files import File
from pgnboard.location import Location
from pgnboard.pieces import PieceKind
from pgnboard.players import Player
from pgnboard.ranks import Rank

_PIECE_KIND_NAMES = {kind: kind.name.capitalize() for kind in PieceKind}


@dataclass(frozen=True)
class Move:
    """A piece moving from one square to another."""

    from_: Location
    to: Location

    WHITE_CASTLE_KINGSIDE: ClassVar[Move]
    BLACK_CASTLE_KINGSIDE: ClassVar[Move]
    WHITE_CASTLE_QUEENSIDE: ClassVar[Move]
    BLACK_CASTLE_QUEENSIDE: ClassVar[Move]

    def to_dict(self) -> dict[str, Any]:
        """Return the serialised form of this move."""
        return {"from": self.from_.to_dict(), "to": self.to.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Move:
        """Build a move from its serialised form."""
        try:
            from_data = data["from"]
            to_data = data["to"]
        except (KeyError, TypeError) as exc:
            raise ValueError(f"invalid move data: {data!r}") from exc
        return cls(Location.from_dict(from_data), Location.from_dict(to_data))

    def __repr__(self) -> str:
        return f"{self.from_} -> {self.to}"


def _castle(player: Player, destination: File) -> Move:
    rank = Rank.castle(player)
    return Move(Location(File.king_starting(), rank), Location(destination, rank))


Move.WHITE_CASTLE_KINGSIDE = _castle(Player.WHITE, File.castle_kingside_destination())
Move.BLACK_CASTLE_KINGSIDE = _castle(Player.BLACK, File.castle_kingside_destination())
Move.WHITE_CASTLE_QUEENSIDE = _castle(Player.WHITE, File.castle_queenside_destination())
Move.BLACK_CASTLE_QUEENSIDE = _castle(Player.BLACK, File.castle_queenside_destination())


@dataclass(frozen=True)
class PossibleMove:
    """A legal move; a promotion still needs a piece kind chosen."""

    move: Move
    is_promotion: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return the serialised form, tagged by its type."""
        return {
            "type": "Promotion" if self.is_promotion else "Normal",
            "move": self.move.to_dict(),
        }


@dataclass(frozen=True)
class SelectedMove:
    """A move chosen to be played, with the promotion kind if it promotes."""

    move: Move
    promotion_kind: PieceKind | None = None

    @property
    def is_promotion(self) -> bool:
        """Whether this move promotes a pawn."""
        return self.promotion_kind is not None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SelectedMove:
        """Build a selected move from its serialised, type-tagged form."""
        try:
            kind = data["type"]
            move = Move.from_dict(data["move"])
        except (KeyError, TypeError) as exc:
            raise ValueError(f"invalid selected move data: {data!r}") from exc
        if kind == "Normal":
            return cls(move)
        if kind == "Promotion":
            name = data.get("promotion_kind")
            for piece_kind, piece_name in _PIECE_KIND_NAMES.items():
                if piece_name == name:
                    return cls(move, piece_kind)
            raise ValueError(f"invalid promotion kind: {name!r}")
        raise ValueError(f"invalid selected move type: {kind!r}")