import pytest

from thermoprint.escpos.commands import (
    ESC_ALIGN_CENTER,
    ESC_ALIGN_LEFT,
    ESC_ALIGN_RIGHT,
    ESC_BOLD_OFF,
    ESC_BOLD_ON,
    ESC_CODE_PAGE_858,
    ESC_INIT_PRINTER,
    ESC_UNDERLINE_OFF,
    ESC_UNDERLINE_ON,
    FF,
    FORM_FEED,
    GS_CUT_FULL,
    GS_CUT_PARTIAL,
    LF,
    CharacterTable,
    TextSize,
    cash_drawer_kick,
    feed_lines,
    select_size,
    set_alignment,
    set_bold,
    set_character_table,
    set_underline,
)
from thermoprint.model.enums import Align


def test_init_and_code_page() -> None:
    assert ESC_INIT_PRINTER == b"\x1b\x40"
    assert ESC_CODE_PAGE_858 == b"\x1b\x74\x13"
    assert set_character_table(CharacterTable.PC437) == b"\x1b\x74\x00"


def test_control_characters() -> None:
    assert LF == b"\x0a"
    assert FF == b"\x0c"
    assert FORM_FEED == FF


@pytest.mark.parametrize(
    "align,expected",
    [
        (Align.LEFT, b"\x1b\x61\x00"),
        (Align.CENTER, b"\x1b\x61\x01"),
        (Align.RIGHT, b"\x1b\x61\x02"),
    ],
)
def test_alignment(align: Align, expected: bytes) -> None:
    assert set_alignment(align) == expected


def test_alignment_constants() -> None:
    assert (ESC_ALIGN_LEFT, ESC_ALIGN_CENTER, ESC_ALIGN_RIGHT) == (
        b"\x1ba\x00",
        b"\x1ba\x01",
        b"\x1ba\x02",
    )


def test_bold_and_underline() -> None:
    assert ESC_BOLD_ON == b"\x1b\x45\x01"
    assert ESC_BOLD_OFF == b"\x1b\x45\x00"
    assert ESC_UNDERLINE_ON == b"\x1b\x2d\x01"
    assert ESC_UNDERLINE_OFF == b"\x1b\x2d\x00"
    assert set_bold(True) == ESC_BOLD_ON
    assert set_bold(False) == ESC_BOLD_OFF
    assert set_underline(True) == ESC_UNDERLINE_ON
    assert set_underline(False) == ESC_UNDERLINE_OFF


@pytest.mark.parametrize(
    "size,mode",
    [
        (TextSize.NORMAL, 0x00),
        (TextSize.DOUBLE_HEIGHT, 0x10),
        (TextSize.DOUBLE_WIDTH, 0x20),
        (TextSize.DOUBLE_SIZE, 0x30),
    ],
)
def test_select_size_is_one_byte_per_state(size: TextSize, mode: int) -> None:
    assert select_size(size) == bytes([0x1B, 0x21, mode])


def test_size_states_are_distinct() -> None:
    assert len({select_size(s) for s in TextSize}) == 4


def test_feed_lines() -> None:
    assert feed_lines(0) == b"\x1b\x64\x00"
    assert feed_lines(3) == b"\x1b\x64\x03"
    assert feed_lines(255) == b"\x1b\x64\xff"


@pytest.mark.parametrize("lines", [-1, 256])
def test_feed_lines_out_of_range(lines: int) -> None:
    with pytest.raises(ValueError):
        feed_lines(lines)


def test_cut_variants_are_distinct() -> None:
    assert GS_CUT_FULL == b"\x1d\x56\x00"
    assert GS_CUT_PARTIAL == b"\x1d\x56\x42\x00"


def test_cash_drawer_kicks_both_pins() -> None:
    assert cash_drawer_kick() == bytes.fromhex("1b700019fa1b700119fa")
