import pytest

from pgnboard.players import Player


def test_as_char():
    assert Player.WHITE.as_char() == "w"
    assert Player.BLACK.as_char() == "b"


def test_as_index():
    assert Player.WHITE.as_index() == 0
    assert Player.BLACK.as_index() == 1


def test_other_player_is_involution():
    assert Player.WHITE.other_player() is Player.BLACK
    assert Player.BLACK.other_player() is Player.WHITE
    assert Player.WHITE.other_player().other_player() is Player.WHITE


@pytest.mark.parametrize("player", list(Player))
def test_from_index_round_trip(player):
    assert Player.from_index(player.as_index()) is player


@pytest.mark.parametrize("value", [2, -1, 100])
def test_from_index_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        Player.from_index(value)