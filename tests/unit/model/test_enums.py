from decimal import Decimal

import pytest

from thermoprint.errors import (
    TemplateError,
    UnknownAlignError,
    UnknownWidthError,
)
from thermoprint.model import (
    DEFAULT_DITHERING_ALGORITHM,
    DEFAULT_PRINT_WIDTH,
    Align,
    DitheringAlgorithm,
    PrintWidth,
    TaxEntry,
)


@pytest.mark.parametrize(
    "width,cols,max_px",
    [
        (PrintWidth.MM58, 32, 256),
        (PrintWidth.MM80, 48, 384),
        (PrintWidth.A4, 90, 576),
    ],
)
def test_print_width_dimensions(width: PrintWidth, cols: int, max_px: int) -> None:
    assert width.cols() == cols
    assert width.max_image_px == max_px


def test_print_width_is_thermal() -> None:
    assert PrintWidth.MM58.is_thermal
    assert PrintWidth.MM80.is_thermal
    assert not PrintWidth.A4.is_thermal


@pytest.mark.parametrize(
    "code,expected",
    [
        ("58mm", PrintWidth.MM58),
        ("58", PrintWidth.MM58),
        ("80mm", PrintWidth.MM80),
        ("80", PrintWidth.MM80),
        ("a4", PrintWidth.A4),
        ("A4", PrintWidth.A4),
        (" 80MM ", PrintWidth.MM80),
    ],
)
def test_print_width_from_code(code: str, expected: PrintWidth) -> None:
    assert PrintWidth.from_code(code) is expected


@pytest.mark.parametrize("code", ["999mm", "", "letter", "76mm"])
def test_print_width_unknown_code(code: str) -> None:
    with pytest.raises(UnknownWidthError) as exc_info:
        PrintWidth.from_code(code)
    assert exc_info.value.value == code
    assert isinstance(exc_info.value, TemplateError)
    assert isinstance(exc_info.value, ValueError)


def test_align_from_code() -> None:
    assert Align.from_code("left") is Align.LEFT
    assert Align.from_code("Center") is Align.CENTER
    assert Align.from_code("RIGHT") is Align.RIGHT
    with pytest.raises(UnknownAlignError):
        Align.from_code("middle")


def test_defaults() -> None:
    assert DEFAULT_PRINT_WIDTH is PrintWidth.MM80
    assert DEFAULT_DITHERING_ALGORITHM is DitheringAlgorithm.FLOYD_STEINBERG
    assert DitheringAlgorithm("threshold") is DitheringAlgorithm.THRESHOLD


def test_tax_entry_inert_when_not_positive() -> None:
    assert TaxEntry("TVA", Decimal("0")).is_inert
    assert TaxEntry("TVA", Decimal("-1")).is_inert
    assert not TaxEntry("TVA", Decimal("0.01")).is_inert
    assert TaxEntry("TVA", Decimal("10")).included is False
