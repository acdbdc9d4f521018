"""
Character code table selection for ESC/POS printers.

Receipts are printed in code page 858 (PC850 + Euro sign), which covers the
French, Spanish and Portuguese accented letters used by the label tables.

Reference: Epson ESC/POS Application Programming Guide, ESC t
"""

from enum import Enum
from typing import Final

from thermoprint.escpos.commands.hardware import ESC

__all__ = [
    "CharacterTable",
    "ESC_CODE_PAGE_858",
    "set_character_table",
]


class CharacterTable(Enum):
    """
    Character code tables (the n of ESC t n).

    Each table defines the glyphs for bytes 128-255; bytes 0-127 are ASCII.
    """

    PC437 = 0
    """PC437 - USA, Standard Europe (power-on default)."""

    PC850 = 2
    """PC850 - Multilingual (Latin 1)."""

    PC860 = 3
    """PC860 - Portuguese."""

    PC863 = 4
    """PC863 - Canadian-French."""

    PC865 = 5
    """PC865 - Nordic."""

    PC858 = 19
    """PC858 - PC850 with the Euro sign at 0xD5."""


def set_character_table(table: CharacterTable) -> bytes:
    """
    Select character code table.

    Command: ESC t n
    Hex: 1B 74 n

    Args:
        table: Code table to activate.

    Returns:
        3 command bytes.

    Example:
        >>> set_character_table(CharacterTable.PC858)
        b'\\x1bt\\x13'
    """
    return bytes([ESC, ord("t"), table.value])


ESC_CODE_PAGE_858: Final[bytes] = set_character_table(CharacterTable.PC858)
"""
Select Code Page 858 (Western European + Euro).

Command: ESC t 19
Hex: 1B 74 13
"""
