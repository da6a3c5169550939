"""Squares that stop a check, and pieces pinned to their king."""

from __future__ import annotations

from typing import Iterable

from pgnboard.location import Location
from pgnboard.players import Player
from pgnboard.position import Position
from pgnboard.rays import (
    BishopMovesIterator,
    DiagonalDirection,
    RookMovesIterator,
    StraightDirection,
    down_left,
    down_right,
    knight_moves,
    up_left,
    up_right,
)


def check_stopping_squares(
    position: Position, player: Player, target: int, mailbox: int | None = None
) -> list[Location]:
    """Return the squares on which a piece would stop every check on ``target``.

    ``target`` is the bitboard of ``player``'s king square. Each checking
    piece contributes its own square, and for sliders every square between
    it and the king; with several checkers only the squares common to all
    remain. An empty list means either no check, or no square stops them all.
    ``mailbox`` is the occupancy that blocks sliding pieces; it defaults to
    every occupied square. Raises ValueError if ``target`` is not one square.
    """
    Location.from_u64(target)
    if mailbox is None:
        mailbox = position.mailbox
    enemy = player.other_player().as_index()

    result: list[int] = []

    def resolve(squares: list[int]) -> bool:
        nonlocal result
        if not result:
            result = list(squares)
            return True
        result = [square for square in result if square in squares]
        return bool(result)

    if player is Player.WHITE:
        pawn_sources = (up_left(target), up_right(target))
    else:
        pawn_sources = (down_left(target), down_right(target))
    for square in pawn_sources:
        if square & position.pawns[enemy] and not resolve([square]):
            return []

    for square in knight_moves(target):
        if square & position.knights[enemy] and not resolve([square]):
            return []

    diagonal_attackers = position.bishops[enemy] | position.queens[enemy]
    for direction in DiagonalDirection:
        ray = list(BishopMovesIterator.with_directions([direction], target))
        attacking = None
        for index, square in enumerate(ray):
            if square & diagonal_attackers:
                attacking = index
                break
            if square & mailbox:
                break
        if attacking is not None and not resolve(ray[: attacking + 1]):
            return []

    straight_attackers = position.rooks[enemy] | position.queens[enemy]
    for direction in StraightDirection:
        ray = list(RookMovesIterator.with_directions([direction], target))
        attacking = None
        for index, square in enumerate(ray):
            if square & straight_attackers:
                attacking = index
            if square & mailbox:
                break
        if attacking is not None and not resolve(ray[: attacking + 1]):
            return []

    return [Location.from_u64(square) for square in result]


def _find_pin(
    ray: Iterable[int],
    friendly: int,
    hostile: int,
    attackers: int,
    stop_at_any_attacker: bool,
) -> tuple[Location, list[Location]] | None:
    pinned: int | None = None
    path: list[int] = []
    for square in ray:
        if square & friendly:
            # Two friendly pieces on the line: neither is pinned alone.
            if pinned is not None:
                return None
            pinned = square
            continue
        if square & attackers:
            if pinned is not None:
                path.append(square)
                return Location.from_u64(pinned), [Location.from_u64(s) for s in path]
            if stop_at_any_attacker:
                return None
        if square & hostile:
            return None
        path.append(square)
    return None


def king_protecting_locations(
    position: Position, player: Player, target: int, mailbox: int | None = None
) -> list[tuple[Location, list[Location]]]:
    """Return the pieces of ``player`` pinned to the king on ``target``.

    Each entry pairs a pinned piece's square with the squares it may still
    move to along the pin: the line from the king to the pinning piece,
    that piece included. Diagonal pins come first, then straight ones.
    When ``mailbox`` is given, pieces outside it are treated as absent
    (the pinning pieces themselves are always taken from the position).
    Raises ValueError if ``target`` is not one square.
    """
    Location.from_u64(target)
    other = player.other_player()
    enemy = other.as_index()
    friendly = position.create_mailbox_for_player(player)
    hostile = position.create_mailbox_for_player(other)
    if mailbox is not None:
        friendly &= mailbox
        hostile &= mailbox

    pins: list[tuple[Location, list[Location]]] = []

    diagonal_attackers = position.bishops[enemy] | position.queens[enemy]
    for direction in DiagonalDirection:
        ray = BishopMovesIterator.with_directions([direction], target)
        pin = _find_pin(ray, friendly, hostile, diagonal_attackers, True)
        if pin is not None:
            pins.append(pin)

    straight_attackers = position.rooks[enemy] | position.queens[enemy]
    for direction in StraightDirection:
        ray = RookMovesIterator.with_directions([direction], target)
        pin = _find_pin(ray, friendly, hostile, straight_attackers, False)
        if pin is not None:
            pins.append(pin)

    return pins