import pytest

from pgnboard.players import Player
from pgnboard.ranks import Rank


def test_castle_rank():
    assert Rank.castle(Player.WHITE) is Rank.ONE
    assert Rank.castle(Player.BLACK) is Rank.EIGHT


def test_all_ranks_ascending():
    ranks = list(Rank.all_ranks_ascending())
    assert [r.as_char() for r in ranks] == list("12345678")
    assert ranks == sorted(ranks)


def test_bit_filters_match_source_constants():
    assert Rank.ONE.bit_filter() == 0x00_00_00_00_00_00_00_FF
    assert Rank.THREE.bit_filter() == 0x00_00_00_00_00_FF_00_00
    assert Rank.EIGHT.bit_filter() == 0xFF_00_00_00_00_00_00_00


def test_bit_filters_partition_board():
    combined = 0
    for r in Rank.all_ranks_ascending():
        assert combined & r.bit_filter() == 0
        combined |= r.bit_filter()
    assert combined == (1 << 64) - 1


@pytest.mark.parametrize("r", list(Rank))
def test_round_trips(r):
    assert Rank.from_index(r.as_index()) is r
    assert Rank.from_char(r.as_char()) is r
    assert Rank.from_int(r.as_int()) is r
    assert Rank.deserialize(r.serialize()) is r
    assert r.as_int() == r.as_index() + 1


@pytest.mark.parametrize("value", [0, 9, -3])
def test_from_int_rejects(value):
    with pytest.raises(ValueError):
        Rank.from_int(value)


@pytest.mark.parametrize("value", [8, -1])
def test_from_index_rejects(value):
    with pytest.raises(ValueError):
        Rank.from_index(value)


@pytest.mark.parametrize("value", ["0", "9", "a", ""])
def test_from_char_rejects(value):
    with pytest.raises(ValueError):
        Rank.from_char(value)


def test_deserialize_char():
    assert Rank.deserialize("5") is Rank.FIVE


@pytest.mark.parametrize("value", [0, 9, "12", "", "x", True, 2.0])
def test_deserialize_rejects(value):
    with pytest.raises(ValueError, match="Expected an integer between 0 and 8."):
        Rank.deserialize(value)