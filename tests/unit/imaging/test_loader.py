from pathlib import Path

import pytest
from PIL import Image

from thermoprint.errors import LogoLoadError, ThermoprintError
from thermoprint.imaging.loader import load_rgba, rasterize_file
from thermoprint.model.enums import DitheringAlgorithm


def _save(tmp_path: Path, img: Image.Image, name: str = "logo.png") -> Path:
    path = tmp_path / name
    img.save(path)
    return path


def test_load_rgba(tmp_path: Path) -> None:
    path = _save(tmp_path, Image.new("RGBA", (8, 2), (0, 0, 0, 255)))
    rgba, width, height = load_rgba(path)
    assert (width, height) == (8, 2)
    assert rgba == bytes([0, 0, 0, 255]) * 16


def test_load_converts_grayscale_images(tmp_path: Path) -> None:
    path = _save(tmp_path, Image.new("L", (3, 1), 255))
    rgba, width, height = load_rgba(path)
    assert rgba == bytes([255, 255, 255, 255]) * 3


def test_rasterize_file(tmp_path: Path) -> None:
    path = _save(tmp_path, Image.new("RGB", (8, 1), (0, 0, 0)))
    raster = rasterize_file(path, 384)
    assert raster.packed == b"\xff"
    assert raster.to_command() == bytes([0x1D, 0x76, 0x30, 0, 1, 0, 1, 0, 0xFF])


def test_rasterize_file_scales_to_width(tmp_path: Path) -> None:
    path = _save(tmp_path, Image.new("RGB", (512, 100), (255, 255, 255)))
    raster = rasterize_file(path, 256, DitheringAlgorithm.FLOYD_STEINBERG)
    assert (raster.width, raster.height) == (256, 50)


def test_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "nope.png"
    with pytest.raises(LogoLoadError) as exc_info:
        load_rgba(missing)
    assert exc_info.value.path == str(missing)
    assert exc_info.value.__cause__ is not None
    assert isinstance(exc_info.value, ThermoprintError)


def test_not_an_image(tmp_path: Path) -> None:
    path = tmp_path / "logo.png"
    path.write_text("definitely not a png")
    with pytest.raises(LogoLoadError):
        rasterize_file(path, 384)
