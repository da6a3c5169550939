import pytest

from pgnboard.files import File
from pgnboard.king import captures_at_location, is_check, legal_king_moves
from pgnboard.location import Location
from pgnboard.moves import Move
from pgnboard.pieces import Piece, PieceKind
from pgnboard.players import Player
from pgnboard.position import Position
from pgnboard.ranks import Rank


def loc(name):
    return Location(File.from_char(name[0]), Rank.from_char(name[1]))


def mv(a, b):
    return Move(loc(a), loc(b))


def white(kind):
    return Piece(Player.WHITE, kind)


def black(kind):
    return Piece(Player.BLACK, kind)


def test_rook_on_open_file_gives_check():
    pieces = {
        loc("e1"): white(PieceKind.KING),
        loc("e8"): black(PieceKind.ROOK),
        loc("h8"): black(PieceKind.KING),
    }
    position = Position.from_pieces(pieces)
    assert is_check(position, Player.WHITE, loc("e1").as_u64()) is True


def test_blocked_rook_gives_no_check():
    pieces = {
        loc("e1"): white(PieceKind.KING),
        loc("e2"): white(PieceKind.PAWN),
        loc("e8"): black(PieceKind.ROOK),
        loc("h8"): black(PieceKind.KING),
    }
    position = Position.from_pieces(pieces)
    assert is_check(position, Player.WHITE, loc("e1").as_u64()) is False


def test_pawn_capture_found():
    pieces = {loc("d4"): white(PieceKind.PAWN), loc("e5"): black(PieceKind.PAWN)}
    position = Position.from_pieces(pieces)
    assert list(captures_at_location(position, Player.WHITE, loc("e5").as_u64())) == [
        mv("d4", "e5")
    ]


def test_sliding_capture_blocked_by_mailbox():
    pieces = {loc("a1"): white(PieceKind.ROOK), loc("a4"): black(PieceKind.PAWN)}
    position = Position.from_pieces(pieces)
    assert list(captures_at_location(position, Player.WHITE, loc("a8").as_u64())) == []


def test_custom_mailbox_lets_ray_through():
    pieces = {loc("a1"): white(PieceKind.ROOK), loc("a4"): black(PieceKind.PAWN)}
    position = Position.from_pieces(pieces)
    moves = list(captures_at_location(position, Player.WHITE, loc("a8").as_u64(), 0))
    assert moves == [mv("a1", "a8")]


def test_invalid_target_raises():
    position = Position.starting()
    with pytest.raises(ValueError):
        is_check(position, Player.WHITE, 3)


def test_king_has_no_moves_in_starting_position():
    assert list(legal_king_moves(Position.starting())) == []


def test_lone_king_steps():
    pieces = {loc("e1"): white(PieceKind.KING), loc("h8"): black(PieceKind.KING)}
    position = Position.from_pieces(pieces)
    expected = {mv("e1", sq) for sq in ("d1", "d2", "e2", "f2", "f1")}
    assert set(legal_king_moves(position)) == expected


def _castling_pieces():
    return {
        loc("e1"): white(PieceKind.KING),
        loc("a1"): white(PieceKind.ROOK),
        loc("h1"): white(PieceKind.ROOK),
        loc("e8"): black(PieceKind.KING),
    }


def test_castling_both_sides():
    position = Position.from_pieces(_castling_pieces(), Player.WHITE, "KQ")
    moves = list(legal_king_moves(position))
    assert Move.WHITE_CASTLE_KINGSIDE in moves
    assert Move.WHITE_CASTLE_QUEENSIDE in moves
    assert moves.index(Move.WHITE_CASTLE_QUEENSIDE) < moves.index(Move.WHITE_CASTLE_KINGSIDE)


def test_no_castling_without_rights():
    position = Position.from_pieces(_castling_pieces(), Player.WHITE, "-")
    moves = list(legal_king_moves(position))
    assert Move.WHITE_CASTLE_KINGSIDE not in moves
    assert Move.WHITE_CASTLE_QUEENSIDE not in moves


def test_no_castling_through_attacked_square():
    pieces = _castling_pieces()
    pieces[loc("f8")] = black(PieceKind.ROOK)
    position = Position.from_pieces(pieces, Player.WHITE, "KQ")
    moves = list(legal_king_moves(position))
    assert Move.WHITE_CASTLE_KINGSIDE not in moves
    assert Move.WHITE_CASTLE_QUEENSIDE in moves
    assert mv("e1", "f1") not in moves


def test_no_queenside_castling_with_piece_in_way():
    pieces = _castling_pieces()
    pieces[loc("b1")] = white(PieceKind.KNIGHT)
    position = Position.from_pieces(pieces, Player.WHITE, "KQ")
    moves = list(legal_king_moves(position))
    assert Move.WHITE_CASTLE_QUEENSIDE not in moves
    assert Move.WHITE_CASTLE_KINGSIDE in moves


def test_no_castling_while_in_check():
    pieces = _castling_pieces()
    del pieces[loc("e8")]
    pieces[loc("h8")] = black(PieceKind.KING)
    pieces[loc("e7")] = black(PieceKind.ROOK)
    position = Position.from_pieces(pieces, Player.WHITE, "KQ")
    moves = list(legal_king_moves(position))
    assert Move.WHITE_CASTLE_KINGSIDE not in moves
    assert Move.WHITE_CASTLE_QUEENSIDE not in moves
    assert mv("e1", "e2") not in moves


def test_black_castling_uses_eighth_rank():
    pieces = {
        loc("e8"): black(PieceKind.KING),
        loc("h8"): black(PieceKind.ROOK),
        loc("e1"): white(PieceKind.KING),
    }
    position = Position.from_pieces(pieces, Player.BLACK, "k")
    assert Move.BLACK_CASTLE_KINGSIDE in list(legal_king_moves(position))