"""
ESC/POS command primitives for thermal receipt printers.

Every function here is pure: it maps one semantic action to the raw bytes the
printer expects, with no knowledge of what was sent before. State (alignment,
size, bold) lives in the printer; sequencing is the receipt builder's job.

Module Structure:
    commands/
    ├── __init__.py             # This file (public API exports)
    ├── hardware.py             # ESC/GS prefixes, reset, cash drawer
    ├── charset.py              # Code page selection (PC858)
    ├── positioning.py          # LF, FF, justification
    ├── text_formatting.py      # Bold, underline
    ├── sizing.py               # Four-state character size
    ├── page_control.py         # Feed, cut, form feed
    ├── barcode.py              # CODE128, EAN-13, QR, HRI setup
    └── graphics.py             # GS v 0 raster image

Usage:
    >>> from thermoprint.escpos.commands import ESC_BOLD_ON, ESC_BOLD_OFF
    >>> command = ESC_BOLD_ON + b"TOTAL" + ESC_BOLD_OFF
"""

# Barcode commands
from thermoprint.escpos.commands.barcode import (
    CODE128_MAX_LEN,
    BarcodeHRI,
    HRIFont,
    check_code128,
    check_ean13,
    code128,
    ean13,
    qr_code,
    set_barcode_height,
    set_barcode_width,
    set_hri_font,
    set_hri_position,
)

# Character set commands
from thermoprint.escpos.commands.charset import (
    ESC_CODE_PAGE_858,
    CharacterTable,
    set_character_table,
)

# Graphics commands
from thermoprint.escpos.commands.graphics import RASTER_HEADER_SIZE, raster_image

# Hardware commands
from thermoprint.escpos.commands.hardware import (
    ESC,
    ESC_INIT_PRINTER,
    GS,
    cash_drawer_kick,
)

# Page control commands
from thermoprint.escpos.commands.page_control import (
    FORM_FEED,
    GS_CUT_FULL,
    GS_CUT_PARTIAL,
    feed_lines,
)

# Positioning commands
from thermoprint.escpos.commands.positioning import (
    ESC_ALIGN_CENTER,
    ESC_ALIGN_LEFT,
    ESC_ALIGN_RIGHT,
    FF,
    LF,
    set_alignment,
)

# Sizing commands
from thermoprint.escpos.commands.sizing import (
    ESC_DOUBLE_HEIGHT,
    ESC_DOUBLE_SIZE,
    ESC_DOUBLE_WIDTH,
    ESC_NORMAL_SIZE,
    TextSize,
    select_size,
)

# Text formatting commands
from thermoprint.escpos.commands.text_formatting import (
    ESC_BOLD_OFF,
    ESC_BOLD_ON,
    ESC_UNDERLINE_OFF,
    ESC_UNDERLINE_ON,
    set_bold,
    set_underline,
)

__all__ = [
    # Hardware
    "ESC",
    "GS",
    "ESC_INIT_PRINTER",
    "cash_drawer_kick",
    # Charset
    "CharacterTable",
    "ESC_CODE_PAGE_858",
    "set_character_table",
    # Positioning
    "LF",
    "FF",
    "ESC_ALIGN_LEFT",
    "ESC_ALIGN_CENTER",
    "ESC_ALIGN_RIGHT",
    "set_alignment",
    # Text formatting
    "ESC_BOLD_ON",
    "ESC_BOLD_OFF",
    "ESC_UNDERLINE_ON",
    "ESC_UNDERLINE_OFF",
    "set_bold",
    "set_underline",
    # Sizing
    "TextSize",
    "ESC_NORMAL_SIZE",
    "ESC_DOUBLE_HEIGHT",
    "ESC_DOUBLE_WIDTH",
    "ESC_DOUBLE_SIZE",
    "select_size",
    # Page control
    "feed_lines",
    "GS_CUT_FULL",
    "GS_CUT_PARTIAL",
    "FORM_FEED",
    # Barcode
    "BarcodeHRI",
    "HRIFont",
    "CODE128_MAX_LEN",
    "set_barcode_width",
    "set_barcode_height",
    "set_hri_position",
    "set_hri_font",
    "code128",
    "ean13",
    "qr_code",
    "check_code128",
    "check_ean13",
    # Graphics
    "RASTER_HEADER_SIZE",
    "raster_image",
]
