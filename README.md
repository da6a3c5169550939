# pgnboard

Chess building blocks on 64-bit bitboards. It covers squares, pieces, moves and
a legal move generator. It also has a small codec for ISO 8859-1 (Latin-1) text.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Overview

### Coordinates and pieces

- `pgnboard.files.File` and `pgnboard.ranks.Rank` are the columns `A`–`H` and
  the rows `ONE`–`EIGHT`. Each has:
  - `as_char()`, `as_index()` and `as_int()`;
  - `bit_filter()`, the 64-bit mask of its squares;
  - `from_index()` and `from_char()` (and `Rank.from_int()`), which raise
    `ValueError` on bad input.
- `Rank.serialize()` returns the rank number. `Rank.deserialize()` accepts a
  number from 1 to 8 or a single digit character.
- `pgnboard.players.Player` is `WHITE` or `BLACK`. It has `as_char()`,
  `as_index()` (white 0, black 1), `other_player()` and `from_index()`.
- `pgnboard.pieces.PieceKind` runs from `PAWN` to `KING`, with numeric values 0
  to 5. `str()` of a kind gives its lower-case name, and `from_char()` accepts a
  letter in either case.
- `pgnboard.pieces.Piece(player, kind)` is a coloured piece. `to_fen()` gives its
  FEN letter, upper case for white and lower case for black.

### Squares and moves

- `pgnboard.location.Location(file, rank)` is one square.
  - `as_u64()` gives its one-bit bitboard, and `Location.from_u64()` converts
    back. `from_u64()` raises `ValueError` unless exactly one bit is set.
  - `Location.from_bitboard()` lists every set square in order from a1 to h8.
  - `Location.all_locations()` yields every square.
  - `Location.king_starting(player)` gives the square the side's king starts on.
  - `str()` gives the square's name, for example `e4`.
- `pgnboard.moves.Move(from_, to)` is a move from one square to another. Its
  repr looks like `e2 -> e4`. The class also has the four castling moves as
  constants, for example `Move.WHITE_CASTLE_KINGSIDE`.
- `PossibleMove(move, is_promotion)` is a legal move. If it is a promotion, a
  piece kind must still be chosen.
- `SelectedMove(move, promotion_kind)` is a move chosen to be played.
- `to_dict()` / `from_dict()` turn moves and squares into plain dictionaries and
  back.

### Positions and move generation

- `pgnboard.position.Position` holds:
  - one bitboard pair per piece kind, indexed by `Player.as_index()`;
  - the side to move;
  - castling rights, as FEN letters;
  - an en passant square.

  Build one with `Position.starting()` or with
  `Position.from_pieces(pieces, player_to_move, castling, en_passant)`.
- `pgnboard.legal.legal_moves(position)` yields every legal `PossibleMove` for
  the side to move. King moves come first, then pawn, knight, bishop, rook and
  queen moves. It yields nothing if either side has no king.
- `pgnboard.legal.possible_moves(position)` yields `SelectedMove`s. Each
  promotion appears four times: queen, knight, bishop, rook.
- Lower-level helpers:
  - `pgnboard.king`: `captures_at_location`, `is_check` and `legal_king_moves`.
  - `pgnboard.pins`: `check_stopping_squares` and `king_protecting_locations`.
  - `pgnboard.pawns.legal_pawn_moves` and `pgnboard.sliders` (knight, bishop,
    rook, queen): these give piece moves without checking for checks or pins.
  - `pgnboard.rays`: bitboard shifts (`up`, `down_left`, …), the ray iterators
    `BishopMovesIterator` and `RookMovesIterator`, and `knight_moves`.

### Text

- `pgnboard.encoding.Iso8859String` wraps ISO 8859-1 bytes.
  - `str()` decodes the bytes to text.
  - `Iso8859String.from_str()` encodes text. It raises `Iso8859TranscodeError`
    (a `ValueError`) for any character above U+00FF.

## Examples

Move generation from the starting position:

```python
from pgnboard.position import Position
from pgnboard.legal import legal_moves

start = Position.starting()
print(len(list(legal_moves(start))))  # 20
```

Building a position and expanding a promotion:

```python
from pgnboard.files import File
from pgnboard.ranks import Rank
from pgnboard.location import Location
from pgnboard.pieces import Piece, PieceKind
from pgnboard.players import Player
from pgnboard.position import Position
from pgnboard.legal import possible_moves

position = Position.from_pieces(
    {
        Location(File.E, Rank.ONE): Piece(Player.WHITE, PieceKind.KING),
        Location(File.E, Rank.EIGHT): Piece(Player.BLACK, PieceKind.KING),
        Location(File.A, Rank.SEVEN): Piece.WHITE_PAWN,
    },
    Player.WHITE,
    "-",
    None,
)
for selected in possible_moves(position):
    print(selected.move, selected.promotion_kind)
```

Latin-1 text:

```python
from pgnboard.encoding import Iso8859String

text = str(Iso8859String.from_bytes(b"Caf\xe9"))
assert text == "Café"
assert Iso8859String.from_str(text).as_bytes() == b"Caf\xe9"
```

## What this package does not do

- It does not read or write PGN or FEN text. Positions are built in Python with
  `Position.starting()` or `Position.from_pieces()`.
- It does not play moves on a position. `Position` is immutable and has no way
  to apply a `Move` or `SelectedMove`.
- There is no command-line program and no storage. For example, nothing loads
  games into a database.