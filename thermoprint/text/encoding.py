"""
text/encoding.py

Unicode -> code page 858 byte encoding for receipt text.

Only the Western-European accented letters the label tables and typical shop
data need are mapped explicitly. Anything else falls back to the low byte of
its code point: ASCII passes through unchanged, other characters print as
whatever glyph the printer has at that byte. This never raises.

Python's built-in "cp858" codec is intentionally not used: it raises on
unmapped characters and would turn a stray emoji in a product name into a
failed receipt.
"""

from types import MappingProxyType
from typing import Final, Mapping

__all__ = ["CP858_TABLE", "encode_cp858", "cp858_byte"]

CP858_TABLE: Final[Mapping[str, int]] = MappingProxyType(
    {
        # French / Spanish / Portuguese lowercase
        "à": 0x85,
        "â": 0x83,
        "ä": 0x84,
        "é": 0x82,
        "è": 0x8A,
        "ê": 0x88,
        "ë": 0x89,
        "î": 0x8C,
        "ï": 0x8B,
        "ô": 0x93,
        "ö": 0x94,
        "ù": 0x97,
        "û": 0x96,
        "ü": 0x81,
        "ç": 0x87,
        "ñ": 0xA4,
        # Uppercase
        "À": 0xB7,
        "Â": 0xB6,
        "É": 0x90,
        "È": 0xD4,
        "Ê": 0xD2,
        "Î": 0xD7,
        "Ô": 0xE4,
        "Ù": 0xEB,
        "Û": 0xEA,
        "Ç": 0x80,
        "Ñ": 0xA5,
        # Currency
        "€": 0xD5,
    }
)
"""Explicit character -> byte map (subset of CP858)."""


def cp858_byte(char: str) -> int:
    """Byte for a single character, falling back to the code point's low byte."""
    mapped = CP858_TABLE.get(char)
    if mapped is not None:
        return mapped
    return ord(char) & 0xFF


def encode_cp858(text: str) -> bytes:
    """
    Encode text for a printer switched to code page 858.

    One output byte per character (not per UTF-8 byte).

    Example:
        >>> encode_cp858("Café 5€")
        b'Caf\\x82 5\\xd5'
    """
    return bytes(cp858_byte(char) for char in text)
