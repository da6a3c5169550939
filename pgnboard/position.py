"""A chess position held as one bitboard per piece kind and side."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from pgnboard.files import File
from pgnboard.location import Location
from pgnboard.pieces import Piece, PieceKind
from pgnboard.players import Player
from pgnboard.ranks import Rank

_CASTLING_CHARS = "KQkq"
_BACK_RANK = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)

Pair = tuple[int, int]


@dataclass(frozen=True)
class Position:
    """Piece placement, side to move, castling rights and en passant square.

    Each piece field holds two bitboards, indexed by ``Player.as_index()``.
    """

    pawns: Pair = (0, 0)
    knights: Pair = (0, 0)
    bishops: Pair = (0, 0)
    rooks: Pair = (0, 0)
    queens: Pair = (0, 0)
    kings: Pair = (0, 0)
    player_to_move: Player = Player.WHITE
    castling: frozenset[str] = frozenset()
    en_passant: Location | None = None

    @classmethod
    def starting(cls) -> Position:
        """Return the standard starting position with white to move."""
        pieces: dict[Location, Piece] = {}
        for file, kind in zip(File.all_files_ascending(), _BACK_RANK):
            pieces[Location(file, Rank.ONE)] = Piece(Player.WHITE, kind)
            pieces[Location(file, Rank.TWO)] = Piece.WHITE_PAWN
            pieces[Location(file, Rank.SEVEN)] = Piece.BLACK_PAWN
            pieces[Location(file, Rank.EIGHT)] = Piece(Player.BLACK, kind)
        return cls.from_pieces(pieces, Player.WHITE, _CASTLING_CHARS, None)

    @classmethod
    def from_pieces(
        cls,
        pieces: Mapping[Location, Piece] | Iterable[tuple[Location, Piece]],
        player_to_move: Player = Player.WHITE,
        castling: str = "-",
        en_passant: Location | None = None,
    ) -> Position:
        """Build a position from square-to-piece pairs.

        ``castling`` uses FEN letters (``KQkq``), or ``-`` for none.
        """
        boards = {kind: [0, 0] for kind in PieceKind}
        for location, piece in dict(pieces).items():
            if not isinstance(location, Location):
                raise TypeError(f"expected a Location, got {location!r}")
            if not isinstance(piece, Piece):
                raise TypeError(f"expected a Piece, got {piece!r}")
            boards[piece.kind][piece.player.as_index()] |= location.as_u64()

        if not isinstance(player_to_move, Player):
            raise TypeError(f"expected a Player, got {player_to_move!r}")
        if en_passant is not None and not isinstance(en_passant, Location):
            raise TypeError(f"expected a Location or None, got {en_passant!r}")

        rights = "" if castling in ("", "-") else castling
        invalid = [ch for ch in rights if ch not in _CASTLING_CHARS]
        if invalid:
            raise ValueError(f"invalid castling rights: {castling!r}")

        def pair(kind: PieceKind) -> Pair:
            white, black = boards[kind]
            return (white, black)

        return cls(
            pawns=pair(PieceKind.PAWN),
            knights=pair(PieceKind.KNIGHT),
            bishops=pair(PieceKind.BISHOP),
            rooks=pair(PieceKind.ROOK),
            queens=pair(PieceKind.QUEEN),
            kings=pair(PieceKind.KING),
            player_to_move=player_to_move,
            castling=frozenset(rights),
            en_passant=en_passant,
        )

    @property
    def mailbox(self) -> int:
        """Bitboard of every occupied square."""
        return self.create_mailbox_for_player(Player.WHITE) | self.create_mailbox_for_player(
            Player.BLACK
        )

    def create_mailbox_for_player(self, player: Player) -> int:
        """Bitboard of every square occupied by the given side."""
        index = player.as_index()
        return (
            self.pawns[index]
            | self.knights[index]
            | self.bishops[index]
            | self.rooks[index]
            | self.queens[index]
            | self.kings[index]
        )

    def player_can_castle_kingside(self, player: Player) -> bool:
        """Whether the side still holds its kingside castling right."""
        return ("K" if player is Player.WHITE else "k") in self.castling

    def player_can_castle_queenside(self, player: Player) -> bool:
        """Whether the side still holds its queenside castling right."""
        return ("Q" if player is Player.WHITE else "q") in self.castling

    def en_passant_target_square(self) -> Location | None:
        """Return the square a pawn may capture onto en passant, if any."""
        return self.en_passant