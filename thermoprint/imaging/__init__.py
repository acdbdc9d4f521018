"""Raster layer: RGBA -> 1-bit ESC/POS raster conversion and logo loading."""

from thermoprint.imaging.dither import (
    RasterImage,
    dither_rgba,
    floyd_steinberg_rgba,
    rasterize_rgba,
    threshold_rgba,
)
from thermoprint.imaging.loader import load_rgba, rasterize_file

__all__ = [
    "RasterImage",
    "dither_rgba",
    "threshold_rgba",
    "floyd_steinberg_rgba",
    "rasterize_rgba",
    "load_rgba",
    "rasterize_file",
]
