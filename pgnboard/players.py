"""The two sides of a chess game."""

from __future__ import annotations

from enum import Enum


class Player(Enum):
    """A side in a chess game."""

    BLACK = "black"
    WHITE = "white"

    def as_char(self) -> str:
        """Return the single-letter FEN code for this side."""
        return "w" if self is Player.WHITE else "b"

    def as_index(self) -> int:
        """Return the table index of this side: white is 0, black is 1."""
        return 0 if self is Player.WHITE else 1

    def other_player(self) -> Player:
        """Return the opposing side."""
        return Player.BLACK if self is Player.WHITE else Player.WHITE

    @classmethod
    def from_index(cls, value: int) -> Player:
        """Return the side with the given table index."""
        if value == 0:
            return cls.WHITE
        if value == 1:
            return cls.BLACK
        raise ValueError(f"invalid player index: {value!r}")

    def __str__(self) -> str:
        return self.value