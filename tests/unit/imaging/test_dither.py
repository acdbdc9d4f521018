import pytest

from thermoprint.errors import RasterInputError
from thermoprint.imaging.dither import (
    RasterImage,
    dither_rgba,
    fit_width,
    floyd_steinberg,
    floyd_steinberg_rgba,
    pack_bits,
    rasterize_rgba,
    resize_bilinear,
    threshold,
    threshold_rgba,
    to_grayscale,
)
from thermoprint.model.enums import DitheringAlgorithm

BLACK = bytes([0, 0, 0, 255])
WHITE = bytes([255, 255, 255, 255])
TRANSPARENT = bytes([0, 0, 0, 0])
HEADER = 8


def test_solid_black_threshold() -> None:
    out = dither_rgba(BLACK * 4, 4, 1, 384, DitheringAlgorithm.THRESHOLD)
    assert out == bytes([0x1D, 0x76, 0x30, 0x00, 1, 0, 1, 0, 0xF0])


def test_solid_white_threshold() -> None:
    out = threshold_rgba(WHITE * 4, 4, 1, 384)
    assert out[HEADER:] == b"\x00"


@pytest.mark.parametrize("method", list(DitheringAlgorithm))
@pytest.mark.parametrize("width,height", [(1, 1), (4, 1), (10, 3), (17, 5)])
def test_transparent_is_blank(method: DitheringAlgorithm, width: int, height: int) -> None:
    raster = rasterize_rgba(TRANSPARENT * (width * height), width, height, 384, method)
    assert raster.packed == bytes(raster.bytes_per_line * height)


def test_half_black_half_white() -> None:
    rgba = BLACK * 2 + WHITE * 2
    assert threshold_rgba(rgba, 4, 1, 384)[-1] == 0b11000000
    assert floyd_steinberg_rgba(rgba, 4, 1, 384)[-1] == 0b11000000


def test_downscale_to_max_width() -> None:
    out = threshold_rgba(BLACK * 16, 16, 1, 8)
    assert out == bytes([0x1D, 0x76, 0x30, 0x00, 1, 0, 1, 0, 0xFF])


def test_downscale_height_is_rounded() -> None:
    raster = rasterize_rgba(WHITE * (1000 * 10), 1000, 10, 384)
    assert (raster.width, raster.height) == (384, 4)
    assert len(raster.to_command()) == HEADER + 48 * 4


def test_downscale_height_at_least_one() -> None:
    raster = rasterize_rgba(WHITE * 1000, 1000, 1, 8)
    assert raster.height == 1


def test_floyd_steinberg_mid_gray_mixes_dots() -> None:
    gray = bytes([128, 128, 128, 255])
    raster = rasterize_rgba(gray * 16, 8, 2, 384, DitheringAlgorithm.FLOYD_STEINBERG)
    assert len(raster.to_command()) == HEADER + 2
    assert 0 < sum(raster.mono) < 16


def test_output_length_matches_dimensions() -> None:
    for width, height in [(1, 1), (7, 3), (8, 2), (9, 4), (384, 2)]:
        out = dither_rgba(WHITE * (width * height), width, height, 384)
        assert len(out) == HEADER + ((width + 7) // 8) * height


def test_length_mismatch_fails_fast() -> None:
    with pytest.raises(RasterInputError) as exc_info:
        dither_rgba(BLACK * 3, 4, 1, 384)
    assert exc_info.value.expected == 16
    assert exc_info.value.actual == 12
    assert isinstance(exc_info.value, ValueError)


class TestStages:
    def test_grayscale_composites_alpha_over_white(self) -> None:
        gray = to_grayscale(BLACK + TRANSPARENT + bytes([0, 0, 0, 51]), 3, 1)
        assert gray[0] == pytest.approx(0.0)
        assert gray[1] == pytest.approx(255.0)
        assert gray[2] == pytest.approx(204.0)

    def test_grayscale_luma_weights(self) -> None:
        gray = to_grayscale(bytes([255, 0, 0, 255, 0, 255, 0, 255, 0, 0, 255, 255]), 3, 1)
        assert gray == pytest.approx([0.299 * 255, 0.587 * 255, 0.114 * 255])

    def test_threshold_boundary(self) -> None:
        assert threshold([0.0, 127.9, 128.0, 255.0]) == [True, True, False, False]

    def test_mid_gray_luminance_is_exact(self) -> None:
        assert to_grayscale(bytes([128, 128, 128, 255]), 1, 1) == [128.0]


@pytest.mark.parametrize("method", list(DitheringAlgorithm))
@pytest.mark.parametrize(
    "pixel,expected",
    [
        (bytes([128, 128, 128, 255]), 0x00),  # luminance 128 -> white
        (bytes([127, 127, 127, 255]), 0x80),  # luminance 127 -> black
        (bytes([0, 0, 0, 127]), 0x00),  # 255 - 127 = 128 over white
        (bytes([0, 0, 0, 128]), 0x80),  # 255 - 128 = 127 over white
    ],
)
def test_luminance_boundary_through_pipeline(
    method: DitheringAlgorithm, pixel: bytes, expected: int
) -> None:
    out = dither_rgba(pixel, 1, 1, 384, method)
    assert out[HEADER:] == bytes([expected])


def test_opaque_mid_gray_row_threshold_is_white() -> None:
    out = threshold_rgba(bytes([128, 128, 128, 255]) * 8, 8, 1, 384)
    assert out[-1] == 0x00

    def test_floyd_steinberg_keeps_pure_pixels(self) -> None:
        assert floyd_steinberg([0.0, 255.0, 0.0, 255.0], 2, 2) == [True, False, True, False]

    def test_floyd_steinberg_diffuses_error_right(self) -> None:
        # 100 -> black, error +100 * 7/16 pushes the next 100 up to 143.75
        assert floyd_steinberg([100.0, 100.0], 2, 1) == [True, False]

    def test_bilinear_interpolates(self) -> None:
        assert resize_bilinear([0.0, 255.0], 2, 1, 3, 1) == pytest.approx([0.0, 127.5, 255.0])

    def test_fit_width_never_upscales(self) -> None:
        gray = [1.0, 2.0]
        assert fit_width(gray, 2, 1, 384) == (gray, 2, 1)

    def test_pack_bits_msb_first_with_row_padding(self) -> None:
        mono = [True] + [False] * 8 + [False] * 8 + [True]
        assert pack_bits(mono, 9, 2) == b"\x80\x00\x00\x80"


def test_raster_image_properties() -> None:
    raster = rasterize_rgba(BLACK * 20, 10, 2, 384, DitheringAlgorithm.THRESHOLD)
    assert isinstance(raster, RasterImage)
    assert raster.bytes_per_line == 2
    assert raster.packed == b"\xff\xc0\xff\xc0"
    assert len(raster.gray) == 20
    assert raster.to_command()[:8] == bytes([0x1D, 0x76, 0x30, 0, 2, 0, 2, 0])
