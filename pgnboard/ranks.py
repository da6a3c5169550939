"""Board ranks (rows) one through eight."""

from __future__ import annotations

from enum import Enum
from functools import total_ordering
from typing import Iterator

from pgnboard.players import Player

_FIRST_RANK_MASK = 0x00_00_00_00_00_00_00_FF
_DESERIALIZE_ERROR = "Expected an integer between 0 and 8."


@total_ordering
class Rank(Enum):
    """A row of the board, ordered from one to eight."""

    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value < other.value

    def __hash__(self) -> int:
        return hash(self.value)

    @classmethod
    def castle(cls, player: Player) -> Rank:
        """Return the back rank on which the given side castles."""
        return cls.ONE if player is Player.WHITE else cls.EIGHT

    @classmethod
    def all_ranks_ascending(cls) -> Iterator[Rank]:
        """Iterate over the ranks from one to eight."""
        return iter(cls)

    def as_char(self) -> str:
        """Return the digit of this rank."""
        return str(self.value)

    def as_index(self) -> int:
        """Return the zero-based index of this rank."""
        return self.value - 1

    def as_int(self) -> int:
        """Return the rank number, one to eight."""
        return self.value

    def bit_filter(self) -> int:
        """Return the 64-bit mask of every square on this rank."""
        return _FIRST_RANK_MASK << (8 * self.as_index())

    @classmethod
    def from_index(cls, value: int) -> Rank:
        """Return the rank with the given zero-based index."""
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 7:
            raise ValueError(f"invalid rank index: {value!r}")
        return cls(value + 1)

    @classmethod
    def from_char(cls, value: str) -> Rank:
        """Return the rank named by a digit 1 to 8."""
        if not isinstance(value, str) or len(value) != 1 or value not in "12345678":
            raise ValueError(f"invalid rank character: {value!r}")
        return cls(int(value))

    @classmethod
    def from_int(cls, value: int) -> Rank:
        """Return the rank with the given number, one to eight."""
        if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= 8:
            raise ValueError(f"invalid rank number: {value!r}")
        return cls(value)

    def serialize(self) -> int:
        """Return the serialised form of this rank: its number."""
        return self.as_int()

    @classmethod
    def deserialize(cls, value: int | str) -> Rank:
        """Build a rank from its number, or from a single digit character."""
        if isinstance(value, bool):
            raise ValueError(_DESERIALIZE_ERROR)
        if isinstance(value, int):
            if 0 < value <= 8:
                return cls(value)
            raise ValueError(_DESERIALIZE_ERROR)
        if isinstance(value, str) and len(value) == 1:
            try:
                return cls.from_char(value)
            except ValueError:
                raise ValueError(_DESERIALIZE_ERROR) from None
        raise ValueError(_DESERIALIZE_ERROR)

    def __str__(self) -> str:
        return self.as_char()