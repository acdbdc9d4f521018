"""
Character size commands for ESC/POS printers.

Size is a single printer mode with exactly four states, selected by the
print mode byte of ESC ! n. Selecting one state fully replaces the previous
one: there are no independent width/height toggles to combine.

Reference: Epson ESC/POS Application Programming Guide, ESC !
"""

from enum import Enum
from typing import Final

from thermoprint.escpos.commands.hardware import ESC

__all__ = [
    "TextSize",
    "ESC_NORMAL_SIZE",
    "ESC_DOUBLE_HEIGHT",
    "ESC_DOUBLE_WIDTH",
    "ESC_DOUBLE_SIZE",
    "select_size",
]


class TextSize(Enum):
    """
    Character size states (the print mode byte of ESC ! n).

    Bit 4 (0x10) doubles height, bit 5 (0x20) doubles width.
    """

    NORMAL = 0x00
    """Single width, single height."""

    DOUBLE_HEIGHT = 0x10
    """Double height, normal width. Keeps the full column count."""

    DOUBLE_WIDTH = 0x20
    """Double width, normal height. Halves the column count."""

    DOUBLE_SIZE = 0x30
    """Double width and double height (4x area). Halves the column count."""


def select_size(size: TextSize) -> bytes:
    """
    Select character size.

    Command: ESC ! n
    Hex: 1B 21 n

    Args:
        size: One of the four TextSize states.

    Returns:
        3 command bytes.

    Note:
        ESC ! also resets font selection and emphasis bits to 0 on most
        printers; callers re-enable bold after a size change when needed.

    Example:
        >>> select_size(TextSize.DOUBLE_SIZE)
        b'\\x1b!0'
    """
    return bytes([ESC, ord("!"), size.value])


ESC_NORMAL_SIZE: Final[bytes] = select_size(TextSize.NORMAL)
"""Normal size. Command: ESC ! 0, Hex: 1B 21 00."""

ESC_DOUBLE_HEIGHT: Final[bytes] = select_size(TextSize.DOUBLE_HEIGHT)
"""Double height only. Command: ESC ! 16, Hex: 1B 21 10."""

ESC_DOUBLE_WIDTH: Final[bytes] = select_size(TextSize.DOUBLE_WIDTH)
"""Double width only. Command: ESC ! 32, Hex: 1B 21 20."""

ESC_DOUBLE_SIZE: Final[bytes] = select_size(TextSize.DOUBLE_SIZE)
"""Double width and height. Command: ESC ! 48, Hex: 1B 21 30."""
