"""Knight, bishop, rook and queen moves for the side to move."""

from __future__ import annotations

from typing import Iterator

from pgnboard.location import Location
from pgnboard.moves import Move
from pgnboard.position import Position
from pgnboard.rays import BishopMovesIterator, RookMovesIterator, knight_moves


def legal_knight_moves(position: Position) -> Iterator[Move]:
    """Yield knight jumps that do not land on a friendly piece.

    Checks and pins are not considered here.
    """
    player = position.player_to_move
    friendlies = position.create_mailbox_for_player(player)
    for location in Location.from_bitboard(position.knights[player.as_index()]):
        for target in knight_moves(location.as_u64()):
            if target & friendlies:
                continue
            yield Move(location, Location.from_u64(target))


def _sliding_moves(
    position: Position, bitboard: int, rays_type: type[BishopMovesIterator] | type[RookMovesIterator]
) -> Iterator[Move]:
    player = position.player_to_move
    friendlies = position.create_mailbox_for_player(player)
    hostiles = position.create_mailbox_for_player(player.other_player())
    for location in Location.from_bitboard(bitboard):
        rays = rays_type(location.as_u64())
        for target in rays:
            if target & friendlies:
                rays.next_direction()
                continue
            if target & hostiles:
                rays.next_direction()
            yield Move(location, Location.from_u64(target))


def legal_bishop_moves(position: Position, bitboard: int | None = None) -> Iterator[Move]:
    """Yield diagonal slides for the pieces on ``bitboard``.

    By default the side to move's bishops are used. A slide stops before a
    friendly piece and on a hostile one; checks and pins are not considered.
    """
    if bitboard is None:
        bitboard = position.bishops[position.player_to_move.as_index()]
    return _sliding_moves(position, bitboard, BishopMovesIterator)


def legal_rook_moves(position: Position, bitboard: int | None = None) -> Iterator[Move]:
    """Yield straight slides for the pieces on ``bitboard``.

    By default the side to move's rooks are used. A slide stops before a
    friendly piece and on a hostile one; checks and pins are not considered.
    """
    if bitboard is None:
        bitboard = position.rooks[position.player_to_move.as_index()]
    return _sliding_moves(position, bitboard, RookMovesIterator)


def legal_queen_moves(position: Position) -> Iterator[Move]:
    """Yield the side to move's queen moves: diagonal slides, then straight ones."""
    queens = position.queens[position.player_to_move.as_index()]
    yield from legal_bishop_moves(position, queens)
    yield from legal_rook_moves(position, queens)