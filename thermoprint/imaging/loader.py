"""
imaging/loader.py

Image file decoding for receipt logos, backed by Pillow.

Decoding is the only part of the raster path that touches the filesystem.
The decoded image is flattened to RGBA and handed to the pure dithering
pipeline, so files and in-memory buffers print identically.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final, Union

from PIL import Image, UnidentifiedImageError

from thermoprint.errors import LogoLoadError
from thermoprint.imaging.dither import RasterImage, rasterize_rgba
from thermoprint.model.enums import DitheringAlgorithm

logger: Final = logging.getLogger(__name__)

__all__ = ["load_rgba", "rasterize_file"]

PathLike = Union[str, Path]


def load_rgba(path: PathLike) -> tuple[bytes, int, int]:
    """
    Decode an image file into raw RGBA bytes.

    Returns:
        (rgba, width, height)

    Raises:
        LogoLoadError: If the file is missing, unreadable or not an image.
            The underlying exception is chained as __cause__.
    """
    try:
        with Image.open(path) as img:
            rgba_img = img.convert("RGBA")
    except (OSError, UnidentifiedImageError, ValueError) as e:
        logger.error("Failed to decode logo %s: %s", path, e)
        raise LogoLoadError(str(path), str(e)) from e

    width, height = rgba_img.size
    logger.debug("Decoded logo %s (%dx%d)", path, width, height)
    return rgba_img.tobytes(), width, height


def rasterize_file(
    path: PathLike,
    max_width_px: int,
    method: DitheringAlgorithm = DitheringAlgorithm.THRESHOLD,
) -> RasterImage:
    """Decode an image file and run it through the raster pipeline."""
    rgba, width, height = load_rgba(path)
    return rasterize_rgba(rgba, width, height, max_width_px, method)
