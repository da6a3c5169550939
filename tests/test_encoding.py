import pytest

from pgnboard.encoding import Iso8859String, Iso8859TranscodeError

PRINTABLE_ASCII = (
    " !\"#$%&'()*+,-./0123456789:;<=>?@ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "[\\]^_`abcdefghijklmnopqrstuvwxyz{|}~"
)
LATIN_161_TO_172 = "¡¢£¤¥¦§¨©ª«¬"
LATIN_174_TO_255 = (
    "®¯°±²³´µ¶·¸¹º»¼½¾¿ÀÁÂÃÄÅÆÇÈÉÊËÌÍÎÏÐÑÒÓÔÕÖ×ØÙÚÛÜÝÞß"
    "àáâãäåæçèéêëìíîïðñòóôõö÷øùúûüýþÿ"
)


def test_decodes_correctly():
    decoded = str(Iso8859String.from_bytes(bytes(range(256))))
    assert len(decoded) == 256
    for i, ch in enumerate(decoded):
        if i <= 0x1F:
            assert ord(ch) == i, f"failure at {i}"
        elif i <= 126:
            assert ch == PRINTABLE_ASCII[i - 0x20], f"failure at {i}"
        elif i == 127:
            assert ch == chr(127)
        elif i < 160:
            continue
        elif i == 160:
            assert ch == "\u00a0"
        elif i <= 172:
            assert ch == LATIN_161_TO_172[i - 161], f"failure at {i}"
        elif i == 173:
            assert ch == "\xad"
        else:
            assert ch == LATIN_174_TO_255[i - 174], f"failure at {i}"


@pytest.mark.parametrize("byte", range(256))
def test_encodes_correctly(byte):
    text = str(Iso8859String.from_bytes(bytes([byte])))
    assert Iso8859String.from_str(text).as_bytes() == bytes([byte])


def test_code_point_above_255_is_unrepresentable():
    text = bytes([0xC4, 0x81]).decode("utf-8")
    with pytest.raises(Iso8859TranscodeError):
        Iso8859String.from_str(text)


def test_three_byte_character_is_unrepresentable():
    with pytest.raises(Iso8859TranscodeError):
        Iso8859String.from_str("abc\u20acdef")


def test_as_bytes_returns_given_bytes():
    raw = bytearray(b"[Event \xe9t\xe9]")
    assert Iso8859String.from_bytes(raw).as_bytes() == bytes(raw)


def test_text_round_trip():
    text = "Café Müller ¿qué?"
    assert str(Iso8859String.from_str(text)) == text