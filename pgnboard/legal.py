"""Fully legal moves for the side to move, with checks and pins applied."""

from __future__ import annotations

from typing import Iterable, Iterator

from pgnboard.king import is_check, legal_king_moves
from pgnboard.location import Location
from pgnboard.moves import Move, PossibleMove, SelectedMove
from pgnboard.pawns import legal_pawn_moves
from pgnboard.pieces import PieceKind
from pgnboard.pins import check_stopping_squares, king_protecting_locations
from pgnboard.players import Player
from pgnboard.position import Position
from pgnboard.ranks import Rank
from pgnboard.rays import down, up
from pgnboard.sliders import (
    legal_bishop_moves,
    legal_knight_moves,
    legal_queen_moves,
    legal_rook_moves,
)

_PROMOTION_ORDER = (PieceKind.QUEEN, PieceKind.KNIGHT, PieceKind.BISHOP, PieceKind.ROOK)

Pins = list[tuple[Location, list[Location]]]


def _meeting_constraints(
    moves: Iterable[Move], pins: Pins, check_blocks: list[Location] | None
) -> Iterator[Move]:
    """Keep moves that stop any check and keep pinned pieces on their line."""
    allowed_by_pin: dict[Location, list[Location]] = {}
    for square, allowed in pins:
        allowed_by_pin.setdefault(square, allowed)

    for move in moves:
        if check_blocks is not None and move.to not in check_blocks:
            continue
        allowed = allowed_by_pin.get(move.from_)
        if allowed is not None and move.to not in allowed:
            continue
        yield move


def _pawn_moves(
    position: Position,
    player: Player,
    king: int,
    check_blocks: list[Location] | None,
    pins: Pins,
) -> Iterator[PossibleMove]:
    en_passant = position.en_passant_target_square()
    en_passant_pawn = 0
    blocks = check_blocks

    if en_passant is not None:
        square = en_passant.as_u64()
        en_passant_pawn = down(square) if player is Player.WHITE else up(square)
        if check_blocks and any(loc.as_u64() == en_passant_pawn for loc in check_blocks):
            # The checking pawn may be removed en passant: capturing it stops the check.
            behind = up(en_passant_pawn) if player is Player.WHITE else down(en_passant_pawn)
            blocks = []
            for loc in check_stopping_squares(
                position, player, king, position.mailbox ^ en_passant_pawn
            ):
                if loc.as_u64() == en_passant_pawn:
                    blocks.append(Location.from_u64(behind))
                blocks.append(loc)

    for move in _meeting_constraints(legal_pawn_moves(position), pins, blocks):
        if en_passant is not None and move.to == en_passant:
            pinned = king_protecting_locations(
                position, player, king, position.mailbox ^ en_passant_pawn
            )
            if any(square == move.from_ for square, _ in pinned):
                continue
        promotes = move.to.rank in (Rank.ONE, Rank.EIGHT)
        yield PossibleMove(move, is_promotion=promotes)


def legal_moves(position: Position) -> Iterator[PossibleMove]:
    """Yield every legal move for the side to move.

    King moves come first, then pawn, knight, bishop, rook and queen moves.
    Nothing is yielded when either side has no king.
    """
    white_king, black_king = position.kings
    if not white_king or not black_king:
        return

    player = position.player_to_move
    king = position.kings[player.as_index()]

    for move in legal_king_moves(position, player):
        yield PossibleMove(move)

    check_blocks = (
        check_stopping_squares(position, player, king)
        if is_check(position, player, king)
        else None
    )
    pins = king_protecting_locations(position, player, king)

    yield from _pawn_moves(position, player, king, check_blocks, pins)

    for moves in (
        legal_knight_moves(position),
        legal_bishop_moves(position),
        legal_rook_moves(position),
        legal_queen_moves(position),
    ):
        for move in _meeting_constraints(moves, pins, check_blocks):
            yield PossibleMove(move)


def possible_moves(position: Position) -> Iterator[SelectedMove]:
    """Yield every legal move, expanding each promotion into its four choices.

    Promotions are offered as queen, knight, bishop, then rook.
    """
    for possible in legal_moves(position):
        if possible.is_promotion:
            for kind in _PROMOTION_ORDER:
                yield SelectedMove(possible.move, kind)
        else:
            yield SelectedMove(possible.move)