import pytest

from thermoprint.text.encoding import CP858_TABLE, cp858_byte, encode_cp858


def test_ascii_passes_through() -> None:
    assert encode_cp858("TOTAL 100") == b"TOTAL 100"


@pytest.mark.parametrize(
    "char,byte",
    [
        ("é", 0x82),
        ("è", 0x8A),
        ("à", 0x85),
        ("ç", 0x87),
        ("ñ", 0xA4),
        ("ü", 0x81),
        ("É", 0x90),
        ("Ç", 0x80),
        ("Ñ", 0xA5),
        ("€", 0xD5),
    ],
)
def test_mapped_characters(char: str, byte: int) -> None:
    assert encode_cp858(char) == bytes([byte])


def test_french_text() -> None:
    assert encode_cp858("Café crème") == b"Caf\x82 cr\x8ame"


def test_one_byte_per_character() -> None:
    text = "Prix: 5€ à emporter"
    assert len(encode_cp858(text)) == len(text)


def test_unmapped_falls_back_to_low_byte() -> None:
    assert cp858_byte("ß") == 0xDF
    # U+4E2D -> 0x2D
    assert encode_cp858("中") == b"\x2d"


def test_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        CP858_TABLE["x"] = 1  # type: ignore[index]
