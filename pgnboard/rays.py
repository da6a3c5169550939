"""Bitboard shifts and the rays of sliding and jumping pieces."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Callable, ClassVar, Iterable, Iterator

from pgnboard.files import File

_U64 = (1 << 64) - 1
_NOT_A_FILE = ~File.A.bit_filter() & _U64
_NOT_H_FILE = ~File.H.bit_filter() & _U64


def up(bitboard: int) -> int:
    """Shift every square one rank towards rank eight."""
    return (bitboard << 8) & _U64


def down(bitboard: int) -> int:
    """Shift every square one rank towards rank one."""
    return (bitboard & _U64) >> 8


def left(bitboard: int) -> int:
    """Shift every square one file towards the a file."""
    return (bitboard & _NOT_A_FILE) >> 1


def right(bitboard: int) -> int:
    """Shift every square one file towards the h file."""
    return ((bitboard & _NOT_H_FILE) << 1) & _U64


def up_left(bitboard: int) -> int:
    """Shift every square one step diagonally up and to the left."""
    return up(left(bitboard))


def up_right(bitboard: int) -> int:
    """Shift every square one step diagonally up and to the right."""
    return up(right(bitboard))


def down_left(bitboard: int) -> int:
    """Shift every square one step diagonally down and to the left."""
    return down(left(bitboard))


def down_right(bitboard: int) -> int:
    """Shift every square one step diagonally down and to the right."""
    return down(right(bitboard))


class DiagonalDirection(Enum):
    """A direction a bishop can slide in."""

    UP_LEFT = "up_left"
    UP_RIGHT = "up_right"
    DOWN_LEFT = "down_left"
    DOWN_RIGHT = "down_right"


class StraightDirection(Enum):
    """A direction a rook can slide in."""

    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"


_STEPS: dict[Enum, Callable[[int], int]] = {
    DiagonalDirection.UP_LEFT: up_left,
    DiagonalDirection.UP_RIGHT: up_right,
    DiagonalDirection.DOWN_LEFT: down_left,
    DiagonalDirection.DOWN_RIGHT: down_right,
    StraightDirection.UP: up,
    StraightDirection.RIGHT: right,
    StraightDirection.DOWN: down,
    StraightDirection.LEFT: left,
}


class _RayWalker:
    """Shared state of a walk outward from a square, one direction at a time."""

    _DIRECTION_TYPE: ClassVar[type[Enum]]
    _DEFAULT_DIRECTIONS: ClassVar[tuple[Enum, ...]]

    def __init__(self, bitboard: int) -> None:
        self._original = bitboard
        self._previous = bitboard
        self._directions: deque[Enum] = deque(self._DEFAULT_DIRECTIONS)

    @classmethod
    def _build(cls, directions: Iterable[Enum], bitboard: int):
        chosen = deque(directions)
        for direction in chosen:
            if not isinstance(direction, cls._DIRECTION_TYPE):
                raise TypeError(
                    f"expected a {cls._DIRECTION_TYPE.__name__}, got {direction!r}"
                )
        walker = cls(bitboard)
        walker._directions = chosen
        return walker

    def _drop_direction(self) -> bool:
        if self._directions:
            self._directions.popleft()
        self._previous = self._original
        return bool(self._directions)

    def _advance(self) -> int:
        while self._directions:
            self._previous = _STEPS[self._directions[0]](self._previous)
            if self._previous == 0:
                self._drop_direction()
            else:
                return self._previous
        raise StopIteration


class BishopMovesIterator(_RayWalker):
    """Every square along the diagonals from a square, ignoring blockers."""

    _DIRECTION_TYPE = DiagonalDirection
    _DEFAULT_DIRECTIONS = (
        DiagonalDirection.DOWN_LEFT,
        DiagonalDirection.DOWN_RIGHT,
        DiagonalDirection.UP_LEFT,
        DiagonalDirection.UP_RIGHT,
    )

    @classmethod
    def with_directions(
        cls, directions: Iterable[DiagonalDirection], bitboard: int
    ) -> "BishopMovesIterator":
        """Walk only the given directions, in the given order."""
        return cls._build(directions, bitboard)

    def next_direction(self) -> bool:
        """Abandon the current direction; return whether any remain."""
        return self._drop_direction()

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self._advance()


class RookMovesIterator(_RayWalker):
    """Every square along the rank and file of a square, ignoring blockers."""

    _DIRECTION_TYPE = StraightDirection
    _DEFAULT_DIRECTIONS = (
        StraightDirection.UP,
        StraightDirection.RIGHT,
        StraightDirection.DOWN,
        StraightDirection.LEFT,
    )

    @classmethod
    def with_directions(
        cls, directions: Iterable[StraightDirection], bitboard: int
    ) -> "RookMovesIterator":
        """Walk only the given directions, in the given order."""
        return cls._build(directions, bitboard)

    def next_direction(self) -> bool:
        """Abandon the current direction; return whether any remain."""
        return self._drop_direction()

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self._advance()


_KNIGHT_JUMPS: tuple[Callable[[int], int], ...] = (
    lambda bb: left(up_left(bb)),
    lambda bb: up(up_left(bb)),
    lambda bb: right(up_right(bb)),
    lambda bb: up(up_right(bb)),
    lambda bb: left(down_left(bb)),
    lambda bb: down(down_left(bb)),
    lambda bb: right(down_right(bb)),
    lambda bb: down(down_right(bb)),
)


def knight_moves(bitboard: int) -> Iterator[int]:
    """Yield every on-board square a knight can jump to from a square."""
    for jump in _KNIGHT_JUMPS:
        square = jump(bitboard)
        if square:
            yield square