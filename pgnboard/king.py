"""Attacks on a square, check detection and king moves."""

from __future__ import annotations

from typing import Iterator

from pgnboard.files import File
from pgnboard.location import Location
from pgnboard.moves import Move
from pgnboard.players import Player
from pgnboard.position import Position
from pgnboard.ranks import Rank
from pgnboard.rays import (
    BishopMovesIterator,
    RookMovesIterator,
    down,
    down_left,
    down_right,
    knight_moves,
    left,
    right,
    up,
    up_left,
    up_right,
)

_KING_STEPS = (up, up_right, right, down_right, down, down_left, left, up_left)


def captures_at_location(
    position: Position, player: Player, target: int, mailbox: int | None = None
) -> Iterator[Move]:
    """Yield moves by which ``player``'s pieces could capture on ``target``.

    ``target`` is a bitboard with one bit set. ``mailbox`` is the occupancy
    that blocks sliding pieces; it defaults to every occupied square.
    Raises ValueError if ``target`` is not a single square.
    """
    target_location = Location.from_u64(target)
    if mailbox is None:
        mailbox = position.mailbox
    return _captures(position, player.as_index(), player, target, target_location, mailbox)


def _captures(
    position: Position,
    index: int,
    player: Player,
    target: int,
    target_location: Location,
    mailbox: int,
) -> Iterator[Move]:
    if player is Player.WHITE:
        pawn_sources = (down_left(target), down_right(target))
    else:
        pawn_sources = (up_left(target), up_right(target))
    for square in pawn_sources:
        if square & position.pawns[index]:
            yield Move(Location.from_u64(square), target_location)

    for square in knight_moves(target):
        if square & position.knights[index]:
            yield Move(Location.from_u64(square), target_location)

    for rays, sliders in (
        (BishopMovesIterator(target), position.bishops[index] | position.queens[index]),
        (RookMovesIterator(target), position.rooks[index] | position.queens[index]),
    ):
        for square in rays:
            if square & sliders:
                yield Move(Location.from_u64(square), target_location)
                continue
            if square & mailbox and not rays.next_direction():
                break

    for step in _KING_STEPS:
        square = step(target)
        if square & position.kings[index]:
            yield Move(Location.from_u64(square), target_location)


def is_check(position: Position, player: Player, king_position: int) -> bool:
    """Whether ``player``'s king would be attacked on ``king_position``.

    The player's own king is left out of the blocking pieces, so a king
    cannot step back along the line of the piece giving check.
    """
    index = player.as_index()
    mailbox = (
        position.pawns[index]
        | position.knights[index]
        | position.bishops[index]
        | position.rooks[index]
        | position.queens[index]
        | position.create_mailbox_for_player(player.other_player())
    )
    attacks = captures_at_location(position, player.other_player(), king_position, mailbox)
    return next(attacks, None) is not None


def legal_king_moves(position: Position, player: Player | None = None) -> Iterator[Move]:
    """Yield the king's safe steps, then queenside and kingside castling.

    ``player`` defaults to the side to move.
    """
    if player is None:
        player = position.player_to_move
    return _king_moves(position, player)


def _king_moves(position: Position, player: Player) -> Iterator[Move]:
    king = position.kings[player.as_index()]
    friendlies = position.create_mailbox_for_player(player)

    for step in _KING_STEPS:
        square = step(king)
        if not square or square & friendlies:
            continue
        if is_check(position, player, square):
            continue
        yield Move(Location.from_u64(king), Location.from_u64(square))

    if is_check(position, player, king):
        return

    castle_rank = Rank.castle(player)
    occupied = position.mailbox

    def squares(*files: File) -> list[int]:
        return [Location(file, castle_rank).as_u64() for file in files]

    if position.player_can_castle_queenside(player):
        destination = Location(File.C, castle_rank)
        if (
            not any(square & occupied for square in squares(File.B, File.C, File.D))
            and not any(is_check(position, player, sq) for sq in squares(File.C, File.D))
            and not is_check(position, player, destination.as_u64())
        ):
            yield Move(Location.from_u64(king), destination)

    if position.player_can_castle_kingside(player):
        destination = Location(File.G, castle_rank)
        if (
            not any(square & occupied for square in squares(File.F, File.G))
            and not any(is_check(position, player, sq) for sq in squares(File.F, File.G))
            and not is_check(position, player, destination.as_u64())
        ):
            yield Move(Location.from_u64(king), destination)