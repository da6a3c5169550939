"""Pawn moves for the side to move."""

from __future__ import annotations

from typing import Iterator

from pgnboard.location import Location
from pgnboard.moves import Move
from pgnboard.players import Player
from pgnboard.position import Position
from pgnboard.ranks import Rank
from pgnboard.rays import down, down_left, down_right, up, up_left, up_right


def legal_pawn_moves(position: Position) -> Iterator[Move]:
    """Yield pawn pushes and captures, ignoring checks and pins.

    For each pawn, from a1 towards h8: the single push, the double push,
    then captures to the left and to the right (en passant included).
    """
    player = position.player_to_move
    hostiles = position.create_mailbox_for_player(player.other_player())
    occupied = position.mailbox
    en_passant = position.en_passant_target_square()
    targets = hostiles | (en_passant.as_u64() if en_passant is not None else 0)

    if player is Player.WHITE:
        forward, captures, start_rank = up, (up_left, up_right), Rank.TWO
    else:
        forward, captures, start_rank = down, (down_left, down_right), Rank.SEVEN

    for location in Location.from_bitboard(position.pawns[player.as_index()]):
        square = location.as_u64()
        single = forward(square)
        if single and not single & occupied:
            yield Move(location, Location.from_u64(single))
            if location.rank is start_rank:
                double = forward(single)
                if double and not double & occupied:
                    yield Move(location, Location.from_u64(double))
        for capture in captures:
            target = capture(square)
            if target and target & targets:
                yield Move(location, Location.from_u64(target))