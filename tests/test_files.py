import pytest

from pgnboard.files import File


def test_castle_and_king_files():
    assert File.castle_kingside_destination() is File.G
    assert File.castle_queenside_destination() is File.C
    assert File.king_starting() is File.E


def test_all_files_ascending_order():
    files = list(File.all_files_ascending())
    assert [f.as_char() for f in files] == list("abcdefgh")
    assert files == sorted(files)


def test_bit_filters_match_source_constants():
    assert File.A.bit_filter() == 0x01_01_01_01_01_01_01_01
    assert File.D.bit_filter() == 0x08_08_08_08_08_08_08_08
    assert File.H.bit_filter() == 0x80_80_80_80_80_80_80_80


def test_bit_filters_partition_board():
    combined = 0
    for f in File.all_files_ascending():
        assert combined & f.bit_filter() == 0
        combined |= f.bit_filter()
    assert combined == (1 << 64) - 1


@pytest.mark.parametrize("f", list(File))
def test_index_and_char_round_trip(f):
    assert File.from_index(f.as_index()) is f
    assert File.from_char(f.as_char()) is f
    assert f.as_int() == f.as_index()


@pytest.mark.parametrize("value", [8, -1])
def test_from_index_rejects(value):
    with pytest.raises(ValueError):
        File.from_index(value)


@pytest.mark.parametrize("value", ["i", "A", "", "ab"])
def test_from_char_rejects(value):
    with pytest.raises(ValueError):
        File.from_char(value)


def test_ordering():
    assert File.from_char("a") < File.from_char("h")
    assert File.from_char("e") > File.from_char("c")