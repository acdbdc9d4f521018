"""Text layer: code page 858 encoding and fixed-width column layout."""

from thermoprint.text.encoding import CP858_TABLE, cp858_byte, encode_cp858
from thermoprint.text.layout import center, right_align, truncate, two_column

__all__ = [
    "CP858_TABLE",
    "cp858_byte",
    "encode_cp858",
    "truncate",
    "center",
    "right_align",
    "two_column",
]
