"""Squares of the chess board."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from pgnboard.files import File
from pgnboard.players import Player
from pgnboard.ranks import Rank

_U64_MASK = (1 << 64) - 1
FAILED_FROM_U64_MESSAGE = "Expected only one bit to be populated."


@dataclass(frozen=True)
class Location:
    """A single square, named by its file and rank."""

    file: File
    rank: Rank

    @classmethod
    def king_starting(cls, player: Player) -> Location:
        """Return the square the given side's king starts on."""
        return cls(File.king_starting(), Rank.castle(player))

    @classmethod
    def all_locations(cls) -> Iterator[Location]:
        """Iterate over every square, rank by rank from a1 to h8."""
        for rank in Rank.all_ranks_ascending():
            for file in File.all_files_ascending():
                yield cls(file, rank)

    @classmethod
    def from_bitboard(cls, bitboard: int) -> list[Location]:
        """Return the squares whose bits are set, from a1 towards h8."""
        bitboard &= _U64_MASK
        locations = []
        while bitboard:
            lowest = bitboard & -bitboard
            locations.append(cls.from_u64(lowest))
            bitboard ^= lowest
        return locations

    @classmethod
    def from_u64(cls, value: int) -> Location:
        """Return the square for a bitboard with exactly one bit set."""
        if (
            isinstance(value, bool)
            or not isinstance(value, int)
            or value <= 0
            or value > _U64_MASK
            or value & (value - 1)
        ):
            raise ValueError(FAILED_FROM_U64_MESSAGE)
        index = value.bit_length() - 1
        return cls(File.from_index(index % 8), Rank.from_index(index // 8))

    def as_u64(self) -> int:
        """Return the bitboard with only this square's bit set."""
        return self.file.bit_filter() & self.rank.bit_filter()

    def to_dict(self) -> dict[str, Any]:
        """Return the serialised form of this square."""
        return {"file": self.file.as_char(), "rank": self.rank.serialize()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Location:
        """Build a square from its serialised form."""
        try:
            file_value = data["file"]
            rank_value = data["rank"]
        except (KeyError, TypeError) as exc:
            raise ValueError(f"invalid location data: {data!r}") from exc
        return cls(File.from_char(file_value), Rank.deserialize(rank_value))

    def __str__(self) -> str:
        return self.file.as_char() + self.rank.as_char()