"""
Text emphasis ESC/POS commands: bold (emphasized) and underline.

Reference: Epson ESC/POS Application Programming Guide, ESC E / ESC -
"""

from typing import Final

from thermoprint.escpos.commands.hardware import ESC

__all__ = [
    "ESC_BOLD_ON",
    "ESC_BOLD_OFF",
    "ESC_UNDERLINE_ON",
    "ESC_UNDERLINE_OFF",
    "set_bold",
    "set_underline",
]

# =============================================================================
# BOLD (EMPHASIZED) MODE
# =============================================================================

ESC_BOLD_ON: Final[bytes] = bytes([ESC, ord("E"), 1])
"""
Enable emphasized (bold) printing.

Command: ESC E 1
Hex: 1B 45 01
Reset: Cancelled by ESC E 0 or ESC @

Example:
    >>> printer.send(ESC_BOLD_ON + b"TOTAL" + ESC_BOLD_OFF)
"""

ESC_BOLD_OFF: Final[bytes] = bytes([ESC, ord("E"), 0])
"""
Disable emphasized (bold) printing.

Command: ESC E 0
Hex: 1B 45 00
"""

# =============================================================================
# UNDERLINE
# =============================================================================

ESC_UNDERLINE_ON: Final[bytes] = bytes([ESC, ord("-"), 1])
"""
Enable 1-dot underline.

Command: ESC - 1
Hex: 1B 2D 01
Note: Not applied to the space produced by justification
"""

ESC_UNDERLINE_OFF: Final[bytes] = bytes([ESC, ord("-"), 0])
"""
Disable underline.

Command: ESC - 0
Hex: 1B 2D 00
"""


def set_bold(enabled: bool) -> bytes:
    return ESC_BOLD_ON if enabled else ESC_BOLD_OFF


def set_underline(enabled: bool) -> bytes:
    return ESC_UNDERLINE_ON if enabled else ESC_UNDERLINE_OFF
