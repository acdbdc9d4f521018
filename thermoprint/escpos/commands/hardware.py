"""
Printer control ESC/POS commands: reset and cash drawer.

Contains the two prefix bytes every ESC/POS command starts with, the printer
initialization command, and the cash drawer kick pulse.

Reference: Epson ESC/POS Application Programming Guide
Compatibility: Epson TM-series, Xprinter, Rongta and other ESC/POS clones
"""

from typing import Final

__all__ = [
    "ESC",
    "GS",
    "ESC_INIT_PRINTER",
    "cash_drawer_kick",
]

# =============================================================================
# PREFIX BYTES
# =============================================================================

ESC: Final[int] = 0x1B
"""Escape (ESC) - prefix of printer control commands."""

GS: Final[int] = 0x1D
"""Group Separator (GS) - prefix of extended graphics/barcode commands."""

# =============================================================================
# INITIALIZATION
# =============================================================================

ESC_INIT_PRINTER: Final[bytes] = bytes([ESC, ord("@")])
"""
Initialize printer (full reset).

Command: ESC @
Hex: 1B 40
Effect: Clears the print buffer and restores power-on defaults
        (alignment left, normal size, bold/underline off, code page 0)
Note: Does NOT clear the receive buffer or NV memory

Example:
    >>> printer.send(ESC_INIT_PRINTER + b"Fresh state\\n")
"""

# =============================================================================
# CASH DRAWER
# =============================================================================

# ESC p m t1 t2: on-time 25 * 2 ms, off-time 250 * 2 ms
_PULSE_ON: Final[int] = 25
_PULSE_OFF: Final[int] = 250


def cash_drawer_kick() -> bytes:
    """
    Generate the cash drawer kick pulse for both connector pins.

    Command: ESC p 0 t1 t2, ESC p 1 t1 t2
    Hex: 1B 70 00 19 FA 1B 70 01 19 FA

    Pin 2 drives most drawers; pin 5 is used by some others. Sending both
    opens either kind without knowing the wiring.

    Returns:
        10 command bytes.

    Example:
        >>> cash_drawer_kick()[:5]
        b'\\x1bp\\x00\\x19\\xfa'
    """
    return bytes(
        [
            ESC, ord("p"), 0, _PULSE_ON, _PULSE_OFF,  # pin 2
            ESC, ord("p"), 1, _PULSE_ON, _PULSE_OFF,  # pin 5
        ]
    )
