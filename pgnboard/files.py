"""Board files (columns) a through h."""

from __future__ import annotations

from enum import Enum
from functools import total_ordering
from typing import Iterator

_A_FILE_MASK = 0x01_01_01_01_01_01_01_01
_CHARS = "abcdefgh"


@total_ordering
class File(Enum):
    """A column of the board, ordered from a to h."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, File):
            return NotImplemented
        return self.value < other.value

    def __hash__(self) -> int:
        return hash(self.value)

    @classmethod
    def castle_kingside_destination(cls) -> File:
        """File the king lands on when castling kingside."""
        return cls.G

    @classmethod
    def castle_queenside_destination(cls) -> File:
        """File the king lands on when castling queenside."""
        return cls.C

    @classmethod
    def king_starting(cls) -> File:
        """File the king starts the game on."""
        return cls.E

    @classmethod
    def all_files_ascending(cls) -> Iterator[File]:
        """Iterate over the files from a to h."""
        return iter(cls)

    def as_char(self) -> str:
        """Return the lower-case letter of this file."""
        return _CHARS[self.value]

    def as_index(self) -> int:
        """Return the zero-based index of this file."""
        return self.value

    def as_int(self) -> int:
        """Return the zero-based number of this file."""
        return self.value

    def bit_filter(self) -> int:
        """Return the 64-bit mask of every square on this file."""
        return _A_FILE_MASK << self.value

    @classmethod
    def from_index(cls, value: int) -> File:
        """Return the file with the given zero-based index."""
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 7:
            raise ValueError(f"invalid file index: {value!r}")
        return cls(value)

    @classmethod
    def from_char(cls, value: str) -> File:
        """Return the file named by a lower-case letter a to h."""
        if not isinstance(value, str) or len(value) != 1 or value not in _CHARS:
            raise ValueError(f"invalid file character: {value!r}")
        return cls(_CHARS.index(value))

    def __str__(self) -> str:
        return self.as_char()