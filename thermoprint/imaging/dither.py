"""
imaging/dither.py

RGBA pixel buffer -> 1-bit ESC/POS raster conversion.

Pipeline (strict order):
    1. Grayscale: BT.601 luminance composited over a white background, so
       transparent pixels come out white.
    2. Downscale: only when wider than the printable area; bilinear sample to
       the maximum width, height scaled proportionally (rounded, at least 1).
    3. Binarize: fixed threshold at 128, or Floyd-Steinberg error diffusion.
    4. Pack: rows padded to whole bytes, MSB first, 1 = black dot.

Pure Python on flat lists; no image library is needed here. File decoding
lives in imaging/loader.py.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Final, Sequence

from thermoprint.errors import RasterInputError
from thermoprint.escpos.commands.graphics import raster_image
from thermoprint.model.enums import DitheringAlgorithm

logger: Final = logging.getLogger(__name__)

__all__ = [
    "RasterImage",
    "BLACK_THRESHOLD",
    "to_grayscale",
    "resize_bilinear",
    "fit_width",
    "threshold",
    "floyd_steinberg",
    "pack_bits",
    "rasterize_rgba",
    "dither_rgba",
    "threshold_rgba",
    "floyd_steinberg_rgba",
]

BLACK_THRESHOLD: Final[float] = 128.0
"""Gray levels strictly below this print as black."""

# BT.601 luma weights in thousandths. Luminance is summed in integers and
# divided once, so whole-number levels come out exact.
_R_WEIGHT: Final[int] = 299
_G_WEIGHT: Final[int] = 587
_B_WEIGHT: Final[int] = 114
_LUMA_SCALE: Final[int] = 1000 * 255

# Floyd-Steinberg error shares (right, below-left, below, below-right)
_FS_RIGHT: Final[float] = 7.0 / 16.0
_FS_BELOW_LEFT: Final[float] = 3.0 / 16.0
_FS_BELOW: Final[float] = 5.0 / 16.0
_FS_BELOW_RIGHT: Final[float] = 1.0 / 16.0


@dataclass(frozen=True, slots=True)
class RasterImage:
    """
    Intermediate and final products of one raster conversion.

    Attributes:
        width: Final width in pixels (after any downscale).
        height: Final height in pixels.
        gray: Grayscale buffer (0.0 black .. 255.0 white), row-major.
        mono: Binarized pixels, True = black dot, row-major.
        packed: Bit-packed rows, ceil(width / 8) bytes each, MSB first.
    """

    width: int
    height: int
    gray: tuple[float, ...]
    mono: tuple[bool, ...]
    packed: bytes

    @property
    def bytes_per_line(self) -> int:
        return math.ceil(self.width / 8)

    def to_command(self) -> bytes:
        """GS v 0 raster command carrying the packed bitmap."""
        return raster_image(self.bytes_per_line, self.height, self.packed)


# =============================================================================
# PIPELINE STAGES
# =============================================================================


def to_grayscale(rgba: bytes, width: int, height: int) -> list[float]:
    """
    Convert an RGBA buffer to luminance composited over white.

    luminance = (0.299 R + 0.587 G + 0.114 B) * alpha + 255 * (1 - alpha)

    Raises:
        RasterInputError: If len(rgba) != width * height * 4.
    """
    expected = width * height * 4
    if len(rgba) != expected:
        raise RasterInputError(expected, len(rgba))

    gray: list[float] = []
    for offset in range(0, expected, 4):
        r, g, b, a = rgba[offset], rgba[offset + 1], rgba[offset + 2], rgba[offset + 3]
        luma = _R_WEIGHT * r + _G_WEIGHT * g + _B_WEIGHT * b
        gray.append((luma * a + _LUMA_SCALE * (255 - a)) / _LUMA_SCALE)
    return gray


def resize_bilinear(
    gray: Sequence[float], width: int, height: int, new_width: int, new_height: int
) -> list[float]:
    """
    Bilinear resample of a grayscale buffer.

    Corner pixels map onto corner pixels: destination x samples source
    x * (width - 1) / (new_width - 1), and likewise for y.
    """
    x_scale = (width - 1) / max(new_width - 1, 1)
    y_scale = (height - 1) / max(new_height - 1, 1)
    resized: list[float] = []

    for y in range(new_height):
        src_y = y * y_scale
        y0 = int(src_y)
        y1 = min(y0 + 1, height - 1)
        fy = src_y - y0
        for x in range(new_width):
            src_x = x * x_scale
            x0 = int(src_x)
            x1 = min(x0 + 1, width - 1)
            fx = src_x - x0

            p00 = gray[y0 * width + x0]
            p10 = gray[y0 * width + x1]
            p01 = gray[y1 * width + x0]
            p11 = gray[y1 * width + x1]

            resized.append(
                p00 * (1.0 - fx) * (1.0 - fy)
                + p10 * fx * (1.0 - fy)
                + p01 * (1.0 - fx) * fy
                + p11 * fx * fy
            )
    return resized


def fit_width(
    gray: list[float], width: int, height: int, max_width_px: int
) -> tuple[list[float], int, int]:
    """
    Downscale to max_width_px if the image is wider; never upscale.

    Returns:
        (gray, width, height) after any resize.
    """
    if width <= max_width_px or height == 0:
        return gray, width, height

    new_height = max(1, int(height * max_width_px / width + 0.5))
    logger.debug(
        "Downscaling raster %dx%d -> %dx%d", width, height, max_width_px, new_height
    )
    return (
        resize_bilinear(gray, width, height, max_width_px, new_height),
        max_width_px,
        new_height,
    )


def threshold(gray: Sequence[float]) -> list[bool]:
    """Per-pixel binarization: gray < 128 prints black."""
    return [value < BLACK_THRESHOLD for value in gray]


def floyd_steinberg(gray: Sequence[float], width: int, height: int) -> list[bool]:
    """
    Floyd-Steinberg error diffusion, row-major scan.

    Quantization error spreads 7/16 right, 3/16 below-left, 5/16 below and
    1/16 below-right over a float working copy, so error carries across rows.
    """
    buf = list(gray)
    mono = [False] * (width * height)

    for y in range(height):
        has_next_row = y + 1 < height
        for x in range(width):
            idx = y * width + x
            old = buf[idx]
            black = old < BLACK_THRESHOLD
            mono[idx] = black
            err = old - (0.0 if black else 255.0)

            if x + 1 < width:
                buf[idx + 1] += err * _FS_RIGHT
            if has_next_row:
                below = idx + width
                if x > 0:
                    buf[below - 1] += err * _FS_BELOW_LEFT
                buf[below] += err * _FS_BELOW
                if x + 1 < width:
                    buf[below + 1] += err * _FS_BELOW_RIGHT
    return mono


def pack_bits(mono: Sequence[bool], width: int, height: int) -> bytes:
    """Pack rows into ceil(width / 8) bytes each, MSB first, 1 = black."""
    bytes_per_line = math.ceil(width / 8)
    packed = bytearray(bytes_per_line * height)
    for y in range(height):
        row_offset = y * bytes_per_line
        for x in range(width):
            if mono[y * width + x]:
                packed[row_offset + x // 8] |= 0x80 >> (x % 8)
    return bytes(packed)


# =============================================================================
# PUBLIC ENTRY POINTS
# =============================================================================


def rasterize_rgba(
    rgba: bytes,
    width: int,
    height: int,
    max_width_px: int,
    method: DitheringAlgorithm = DitheringAlgorithm.FLOYD_STEINBERG,
) -> RasterImage:
    """
    Run the full pipeline and keep every intermediate.

    Args:
        rgba: Row-major RGBA bytes, 4 per pixel.
        width: Source width in pixels.
        height: Source height in pixels.
        max_width_px: Printable width; wider images are scaled down.
        method: Binarization strategy.

    Raises:
        RasterInputError: If the buffer length is not width * height * 4.
    """
    gray = to_grayscale(rgba, width, height)
    gray, width, height = fit_width(gray, width, height, max_width_px)

    if method is DitheringAlgorithm.THRESHOLD:
        mono = threshold(gray)
    else:
        mono = floyd_steinberg(gray, width, height)

    return RasterImage(
        width=width,
        height=height,
        gray=tuple(gray),
        mono=tuple(mono),
        packed=pack_bits(mono, width, height),
    )


def dither_rgba(
    rgba: bytes,
    width: int,
    height: int,
    max_width_px: int,
    method: DitheringAlgorithm = DitheringAlgorithm.FLOYD_STEINBERG,
) -> bytes:
    """
    Convert RGBA pixels to a ready-to-send GS v 0 raster command.

    Output length is 8 + ceil(W / 8) * H for the final dimensions W, H.

    Example:
        >>> black = bytes([0, 0, 0, 255]) * 4
        >>> dither_rgba(black, 4, 1, 384, DitheringAlgorithm.THRESHOLD)[-1]
        240
    """
    return rasterize_rgba(rgba, width, height, max_width_px, method).to_command()


def threshold_rgba(rgba: bytes, width: int, height: int, max_width_px: int) -> bytes:
    return dither_rgba(rgba, width, height, max_width_px, DitheringAlgorithm.THRESHOLD)


def floyd_steinberg_rgba(rgba: bytes, width: int, height: int, max_width_px: int) -> bytes:
    return dither_rgba(
        rgba, width, height, max_width_px, DitheringAlgorithm.FLOYD_STEINBERG
    )
