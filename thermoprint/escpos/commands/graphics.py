"""
Raster bit image command for ESC/POS printers.

Reference: Epson ESC/POS Application Programming Guide, GS v 0
"""

from typing import Final

from thermoprint.escpos.commands.hardware import GS

__all__ = [
    "RASTER_HEADER_SIZE",
    "raster_image",
]

RASTER_HEADER_SIZE: Final[int] = 8
"""Byte length of the GS v 0 header preceding the bitmap."""

_NORMAL_DENSITY: Final[int] = 0


def raster_image(bytes_per_line: int, height: int, data: bytes) -> bytes:
    """
    Print a packed 1-bit raster image.

    Command: GS v 0 m xL xH yL yH d1...dk
    Hex: 1D 76 30 00 xL xH yL yH data

    Args:
        bytes_per_line: Row length in bytes, ceil(width_px / 8).
        height: Number of dot rows.
        data: Row-major bitmap, MSB-first, 1 = black dot. Expected length
              is bytes_per_line * height.

    Returns:
        8-byte header followed by data.

    Note:
        Both dimensions are 16-bit little-endian. Data is appended as-is;
        a length mismatch is not detected and garbles the printout.

    Example:
        >>> raster_image(1, 1, b"\\xf0")
        b'\\x1dv0\\x00\\x01\\x00\\x01\\x00\\xf0'
    """
    header = bytes(
        [
            GS, ord("v"), ord("0"), _NORMAL_DENSITY,
            bytes_per_line & 0xFF, (bytes_per_line >> 8) & 0xFF,
            height & 0xFF, (height >> 8) & 0xFF,
        ]
    )
    return header + data
