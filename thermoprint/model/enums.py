"""
model/enums.py

Domain enums for thermoprint receipts: paper widths, text alignment and the
raster binarization strategies. No protocol/ESC/POS command logic here.

- Only the three supported paper targets (58mm, 80mm thermal rolls, A4).
- Column counts are for the standard font (Font A, 12x24 dots).
- Raster pixel widths are the safe printable area, not the head width.

See Also:
    - thermoprint/escpos/commands (for protocol logic)
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Final

from thermoprint.errors import UnknownAlignError, UnknownWidthError

_logger: Final[logging.Logger] = logging.getLogger(__name__)

__all__ = [
    "PrintWidth",
    "Align",
    "DitheringAlgorithm",
    "DEFAULT_PRINT_WIDTH",
    "DEFAULT_DITHERING_ALGORITHM",
]


class PrintWidth(Enum):
    """
    Supported paper widths.

    Each member carries (code, cols, max_image_px):
        code: canonical template code ("58mm", "80mm", "a4")
        cols: printable character columns at the standard font
        max_image_px: maximum raster image width in pixels for logos
    """

    MM58 = ("58mm", 32, 256)
    """58 mm thermal roll - 32 characters, 256 px logos."""

    MM80 = ("80mm", 48, 384)
    """80 mm thermal roll - 48 characters, 384 px logos."""

    A4 = ("a4", 90, 576)
    """A4 / generic wide carriage - 90 characters, 576 px logos."""

    def __init__(self, code: str, cols: int, max_image_px: int) -> None:
        self.code = code
        self._cols = cols
        self.max_image_px = max_image_px

    def cols(self) -> int:
        """Printable character column count for this width."""
        return self._cols

    @property
    def is_thermal(self) -> bool:
        """Whether this is a thermal roll (ESC/POS) target."""
        return self in (PrintWidth.MM58, PrintWidth.MM80)

    @classmethod
    def from_code(cls, code: str) -> "PrintWidth":
        """
        Resolve a width code, case-insensitive.

        Accepts "58mm"/"58", "80mm"/"80" and "a4".

        Raises:
            UnknownWidthError: for any other value.
        """
        key = code.strip().lower()
        for member, aliases in _WIDTH_ALIASES.items():
            if key in aliases:
                return member
        _logger.debug("Rejected width code %r", code)
        raise UnknownWidthError(code)


_WIDTH_ALIASES: Final = {
    PrintWidth.MM58: ("58mm", "58"),
    PrintWidth.MM80: ("80mm", "80"),
    PrintWidth.A4: ("a4",),
}


class Align(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @classmethod
    def from_code(cls, code: str) -> "Align":
        try:
            return cls(code.strip().lower())
        except ValueError:
            raise UnknownAlignError(code) from None


class DitheringAlgorithm(str, Enum):
    """Binarization strategy for raster images."""

    THRESHOLD = "threshold"
    FLOYD_STEINBERG = "floyd_steinberg"


DEFAULT_PRINT_WIDTH: Final[PrintWidth] = PrintWidth.MM80
DEFAULT_DITHERING_ALGORITHM: Final[DitheringAlgorithm] = DitheringAlgorithm.FLOYD_STEINBERG
