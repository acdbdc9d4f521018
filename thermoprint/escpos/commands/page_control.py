"""
Paper feed, cutting and form control commands for ESC/POS printers.

Reference: Epson ESC/POS Application Programming Guide, ESC d / GS V
"""

from typing import Final

from thermoprint.escpos.commands.hardware import ESC, GS
from thermoprint.escpos.commands.positioning import FF

__all__ = [
    "GS_CUT_FULL",
    "GS_CUT_PARTIAL",
    "FORM_FEED",
    "feed_lines",
]

# =============================================================================
# PAPER FEED
# =============================================================================


def feed_lines(lines: int) -> bytes:
    """
    Print the buffer and feed paper by n lines.

    Command: ESC d n
    Hex: 1B 64 n

    Args:
        lines: Number of lines to feed (0-255).

    Returns:
        3 command bytes.

    Raises:
        ValueError: If lines is out of range.

    Note:
        Thermal printers need 3-5 lines of feed before a cut so the last
        printed line clears the cutter blade.

    Example:
        >>> feed_lines(3)
        b'\\x1bd\\x03'
    """
    if not (0 <= lines <= 255):
        raise ValueError(f"Feed lines must be 0-255, got {lines}")

    return bytes([ESC, ord("d"), lines])


# =============================================================================
# CUTTING
# =============================================================================

GS_CUT_FULL: Final[bytes] = bytes([GS, ord("V"), 0])
"""
Full cut.

Command: GS V 0
Hex: 1D 56 00
Effect: Cuts the paper completely at the current position
"""

GS_CUT_PARTIAL: Final[bytes] = bytes([GS, ord("V"), 66, 0])
"""
Feed to cutting position and partial cut.

Command: GS V 66 0
Hex: 1D 56 42 00
Effect: Leaves one point uncut so the receipt hangs from the roll
Note: Printers without a partial cutter perform a full cut instead
"""

# =============================================================================
# FORM CONTROL
# =============================================================================

FORM_FEED: Final[bytes] = FF
"""
Eject page (A4 / page-mode printers).

Command: FF
Hex: 0C
"""
