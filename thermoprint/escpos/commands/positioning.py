"""
Line control and justification commands for ESC/POS printers.

Contains the single-byte line/page controls and the three justification
selectors. Justification is a printer mode: it stays active until another
ESC a command or a reset.

Reference: Epson ESC/POS Application Programming Guide, ESC a
"""

from typing import Final

from thermoprint.escpos.commands.hardware import ESC
from thermoprint.model.enums import Align

__all__ = [
    "LF",
    "FF",
    "ESC_ALIGN_LEFT",
    "ESC_ALIGN_CENTER",
    "ESC_ALIGN_RIGHT",
    "set_alignment",
]

# =============================================================================
# BASIC CONTROL CHARACTERS
# =============================================================================

LF: Final[bytes] = b"\n"
"""
Line Feed.

Command: LF
Hex: 0A
Effect: Prints the line buffer and advances one line
"""

FF: Final[bytes] = b"\x0c"
"""
Form Feed.

Command: FF
Hex: 0C
Effect: Ejects the page on A4 / page-mode and impact printers.
        Most roll printers print the buffer and ignore the eject.
"""

# =============================================================================
# JUSTIFICATION
# =============================================================================

ESC_ALIGN_LEFT: Final[bytes] = bytes([ESC, ord("a"), 0])
"""Left justification. Command: ESC a 0, Hex: 1B 61 00."""

ESC_ALIGN_CENTER: Final[bytes] = bytes([ESC, ord("a"), 1])
"""Center justification. Command: ESC a 1, Hex: 1B 61 01."""

ESC_ALIGN_RIGHT: Final[bytes] = bytes([ESC, ord("a"), 2])
"""Right justification. Command: ESC a 2, Hex: 1B 61 02."""

_ALIGN_COMMANDS: Final = {
    Align.LEFT: ESC_ALIGN_LEFT,
    Align.CENTER: ESC_ALIGN_CENTER,
    Align.RIGHT: ESC_ALIGN_RIGHT,
}


def set_alignment(align: Align) -> bytes:
    """
    Select justification for the following lines.

    Args:
        align: LEFT, CENTER or RIGHT.

    Returns:
        3 command bytes (ESC a n).

    Note:
        Justification is only honored at the start of a line. Switching it
        mid-line takes effect from the next LF.
    """
    return _ALIGN_COMMANDS[align]
