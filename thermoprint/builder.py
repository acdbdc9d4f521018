"""
builder.py

Fluent receipt builder: composes ESC/POS primitives, text layout and raster
conversion into receipt-level operations (header, items, taxes, totals).

The builder is a write-only accumulator. It never tracks printer state such
as the current alignment: every call appends instructions in the order the
caller asks for them, and nothing already appended is ever rewritten.

Each builder produces exactly one receipt. build() hands the bytes out and
marks the builder consumed; any further call raises BuilderConsumedError.

Example:
    >>> from thermoprint import PrintWidth, ReceiptBuilder
    >>> data = (
    ...     ReceiptBuilder(PrintWidth.MM80)
    ...     .init()
    ...     .shop_header("MA BOUTIQUE", "+221 77 000 00 00", "Dakar")
    ...     .item("T-shirt", 2, "15000")
    ...     .total("30000")
    ...     .cut()
    ...     .build()
    ... )
"""

from __future__ import annotations

import functools
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any, Callable, Final, Iterable, Mapping, Optional, TypeVar, Union

from thermoprint.errors import BuilderConsumedError
from thermoprint.escpos import commands as cmd
from thermoprint.i18n import DEFAULT_LANGUAGE, Language, ReceiptLabels
from thermoprint.imaging.dither import rasterize_rgba
from thermoprint.imaging.loader import rasterize_file
from thermoprint.model.enums import Align, DitheringAlgorithm, PrintWidth
from thermoprint.model.tax import TaxEntry
from thermoprint.money import Amount, format_money, to_decimal
from thermoprint.text.encoding import encode_cp858
from thermoprint.text.layout import center, right_align, truncate, two_column

logger = logging.getLogger(__name__)

__all__ = [
    "ReceiptBuilder",
    "DEFAULT_CURRENCY",
    "DEFAULT_BARCODE_WIDTH",
    "DEFAULT_BARCODE_HEIGHT",
    "DEFAULT_QR_SIZE",
]

DEFAULT_CURRENCY: Final[str] = "FCFA"
DEFAULT_BARCODE_WIDTH: Final[int] = 2
DEFAULT_BARCODE_HEIGHT: Final[int] = 60
DEFAULT_QR_SIZE: Final[int] = 4

_ZERO: Final[Decimal] = Decimal(0)

F = TypeVar("F", bound=Callable[..., Any])


def _chainable(method: F) -> F:
    """Reject calls on a consumed builder and return the builder itself."""

    @functools.wraps(method)
    def wrapper(self: "ReceiptBuilder", *args: Any, **kwargs: Any) -> "ReceiptBuilder":
        if self._consumed:
            raise BuilderConsumedError(method.__name__)
        method(self, *args, **kwargs)
        return self

    return wrapper  # type: ignore[return-value]


class ReceiptBuilder:
    """
    Accumulates the ESC/POS byte stream for one receipt.

    Args:
        width: Paper width; fixes the column count and logo pixel width.
        currency: Symbol appended to every formatted amount.
        language: Label set for receipt-level lines (TOTAL, taxes, ...).
        dither_method: Default binarization for image(); None means
            Floyd-Steinberg.
    """

    def __init__(
        self,
        width: PrintWidth,
        currency: str = DEFAULT_CURRENCY,
        language: Language = DEFAULT_LANGUAGE,
        dither_method: Optional[DitheringAlgorithm] = None,
    ) -> None:
        self._data = bytearray()
        self._width = width
        self._currency = currency
        self._language = language
        self._dither_method = dither_method
        self._consumed = False
        logger.debug(
            "ReceiptBuilder created: width=%s, cols=%d, currency=%s, language=%s",
            width.code,
            width.cols(),
            currency,
            language.value,
        )

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "ReceiptBuilder":
        """
        Create a builder from a configuration mapping (see load_config()).

        Uses the keys default_width, default_currency, default_language and
        dither_method; missing keys fall back to 80mm / FCFA / fr and
        Floyd-Steinberg for image().

        Raises:
            UnknownWidthError: If default_width is not a known width code.
            UnknownLanguageError: If default_language is not a known code.
            ValueError: If dither_method is not a DitheringAlgorithm value.
        """
        width = PrintWidth.from_code(str(config.get("default_width", "80mm")))
        language = Language.from_code(str(config.get("default_language", "fr")))
        currency = str(config.get("default_currency", DEFAULT_CURRENCY))
        method = config.get("dither_method")
        dither = DitheringAlgorithm(method) if method else None
        return cls(width, currency=currency, language=language, dither_method=dither)

    # ------------------------------------------------------------------ #
    # Properties
    # ------------------------------------------------------------------ #

    @property
    def width(self) -> PrintWidth:
        return self._width

    @property
    def cols(self) -> int:
        return self._width.cols()

    @property
    def labels(self) -> ReceiptLabels:
        return self._language.labels

    @property
    def consumed(self) -> bool:
        return self._consumed

    def __len__(self) -> int:
        return len(self._data)

    # ------------------------------------------------------------------ #
    # Settings
    # ------------------------------------------------------------------ #

    @_chainable
    def currency(self, symbol: str) -> None:
        """Set the currency symbol. Affects amounts formatted afterwards."""
        self._currency = symbol

    @_chainable
    def language(self, language: Language) -> None:
        """Switch the label set. Affects lines emitted afterwards."""
        self._language = language

    def build(self) -> bytes:
        """
        Return the accumulated bytes and consume the builder.

        Raises:
            BuilderConsumedError: If build() was already called.
        """
        if self._consumed:
            raise BuilderConsumedError("build")
        self._consumed = True
        data = bytes(self._data)
        self._data = bytearray()
        logger.debug("Receipt built: %d bytes", len(data))
        return data

    # ------------------------------------------------------------------ #
    # Low-level helpers
    # ------------------------------------------------------------------ #

    def _push(self, data: bytes) -> None:
        self._data += data

    def _push_text(self, text: str) -> None:
        self._data += encode_cp858(text)

    def _push_line(self, text: str) -> None:
        self._data += encode_cp858(text)
        self._data += cmd.LF

    def _fmt(self, amount: Decimal) -> str:
        return format_money(amount, self._currency)

    # ------------------------------------------------------------------ #
    # Initialisation and style
    # ------------------------------------------------------------------ #

    @_chainable
    def init(self) -> None:
        """Reset the printer twice, select CP858 and restore default style."""
        # Some clones ignore the first reset after power-on
        self._push(cmd.ESC_INIT_PRINTER + cmd.LF)
        self._push(cmd.ESC_INIT_PRINTER + cmd.LF)
        self._push(cmd.ESC_CODE_PAGE_858)
        self._push(cmd.ESC_ALIGN_LEFT)
        self._push(cmd.ESC_NORMAL_SIZE)
        self._push(cmd.ESC_BOLD_OFF)
        self._push(cmd.LF)

    @_chainable
    def align(self, align: Align) -> None:
        self._push(cmd.set_alignment(align))

    def align_left(self) -> "ReceiptBuilder":
        return self.align(Align.LEFT)

    def align_center(self) -> "ReceiptBuilder":
        return self.align(Align.CENTER)

    def align_right(self) -> "ReceiptBuilder":
        return self.align(Align.RIGHT)

    @_chainable
    def bold(self, on: bool = True) -> None:
        self._push(cmd.set_bold(on))

    @_chainable
    def underline(self, on: bool = True) -> None:
        self._push(cmd.set_underline(on))

    @_chainable
    def double_size(self, on: bool = True) -> None:
        self._push(cmd.ESC_DOUBLE_SIZE if on else cmd.ESC_NORMAL_SIZE)

    @_chainable
    def double_height(self, on: bool = True) -> None:
        self._push(cmd.ESC_DOUBLE_HEIGHT if on else cmd.ESC_NORMAL_SIZE)

    @_chainable
    def double_width(self, on: bool = True) -> None:
        self._push(cmd.ESC_DOUBLE_WIDTH if on else cmd.ESC_NORMAL_SIZE)

    @_chainable
    def normal_size(self) -> None:
        self._push(cmd.ESC_NORMAL_SIZE)

    # ------------------------------------------------------------------ #
    # Text output
    # ------------------------------------------------------------------ #

    @_chainable
    def text(self, text: str) -> None:
        """Append text without a line feed."""
        self._push_text(text)

    @_chainable
    def text_line(self, text: str) -> None:
        self._push_line(text)

    @_chainable
    def blank(self) -> None:
        self._push(cmd.LF)

    @_chainable
    def divider(self, char: str = "-") -> None:
        """
        Full-width rule made of the first character of char.

        The rule is written as UTF-8, not CP858, so use ASCII characters.
        """
        rule = (char[:1] or "-") * self.cols
        self._push(rule.encode("utf-8"))
        self._push(cmd.LF)

    @_chainable
    def centered(self, text: str) -> None:
        self._push_line(center(text, self.cols))

    @_chainable
    def right(self, text: str) -> None:
        self._push_line(right_align(text, self.cols))

    @_chainable
    def row(self, left: str, right: str) -> None:
        self._push_line(two_column(left, right, self.cols))

    # ------------------------------------------------------------------ #
    # Paper movement and peripherals
    # ------------------------------------------------------------------ #

    @_chainable
    def feed(self, lines: int = 3) -> None:
        self._push(cmd.feed_lines(lines))

    @_chainable
    def cut(self) -> None:
        """Partial cut."""
        self._push(cmd.GS_CUT_PARTIAL)

    @_chainable
    def cut_full(self) -> None:
        self._push(cmd.GS_CUT_FULL)

    @_chainable
    def form_feed(self) -> None:
        self._push(cmd.FORM_FEED)

    @_chainable
    def open_cash_drawer(self) -> None:
        self._push(cmd.cash_drawer_kick())

    # ------------------------------------------------------------------ #
    # Barcodes and QR
    # ------------------------------------------------------------------ #

    @_chainable
    def barcode_code128(
        self,
        value: str,
        bar_width: int = DEFAULT_BARCODE_WIDTH,
        bar_height: int = DEFAULT_BARCODE_HEIGHT,
    ) -> None:
        """CODE128 with HRI text below in font A. The value is not validated."""
        self._push(cmd.set_barcode_width(bar_width))
        self._push(cmd.set_barcode_height(bar_height))
        self._push(cmd.set_hri_position(cmd.BarcodeHRI.BELOW))
        self._push(cmd.set_hri_font(cmd.HRIFont.FONT_A))
        self._push(cmd.code128(value))
        self._push(cmd.LF)

    @_chainable
    def barcode_ean13(self, value: str) -> None:
        """EAN-13 with HRI text below. value must be 12 digits (not validated)."""
        self._push(cmd.set_barcode_width(DEFAULT_BARCODE_WIDTH))
        self._push(cmd.set_barcode_height(DEFAULT_BARCODE_HEIGHT))
        self._push(cmd.set_hri_position(cmd.BarcodeHRI.BELOW))
        self._push(cmd.ean13(value))
        self._push(cmd.LF)

    @_chainable
    def qr_code(self, data: str, size: int = DEFAULT_QR_SIZE) -> None:
        self._push(cmd.qr_code(data, size))
        self._push(cmd.LF)

    # ------------------------------------------------------------------ #
    # Images
    # ------------------------------------------------------------------ #

    @_chainable
    def logo(
        self,
        path: Union[str, Path],
        method: DitheringAlgorithm = DitheringAlgorithm.THRESHOLD,
    ) -> None:
        """
        Decode an image file and print it scaled to the paper width.

        Logos default to plain thresholding; the configured dither method
        only applies to image().

        Raises:
            LogoLoadError: If the file cannot be opened or decoded. Nothing
                is appended in that case.
        """
        raster = rasterize_file(path, self._width.max_image_px, method)
        logger.debug("Logo %s rasterized to %dx%d", path, raster.width, raster.height)
        self._push(raster.to_command())
        self._push(cmd.LF)

    @_chainable
    def image(
        self,
        rgba: bytes,
        width: int,
        height: int,
        method: Optional[DitheringAlgorithm] = None,
    ) -> None:
        """
        Print an in-memory RGBA buffer scaled to the paper width.

        Raises:
            RasterInputError: If len(rgba) != width * height * 4.
        """
        method = method or self._dither_method or DitheringAlgorithm.FLOYD_STEINBERG
        raster = rasterize_rgba(rgba, width, height, self._width.max_image_px, method)
        self._push(raster.to_command())
        self._push(cmd.LF)

    @_chainable
    def logo_raw(self, raster: bytes) -> None:
        """Append a pre-built raster command (e.g. from dither_rgba())."""
        self._push(raster)
        self._push(cmd.LF)

    # ------------------------------------------------------------------ #
    # Receipt-level helpers
    # ------------------------------------------------------------------ #

    def shop_header(self, name: str, phone: str = "", address: str = "") -> "ReceiptBuilder":
        """Centered bold double-size shop name, then phone and address."""
        return (
            self.align_center()
            .bold(True)
            .double_size(True)
            .text_line(name)
            .bold(False)
            .normal_size()
            .text_line(phone)
            .text_line(address)
            .align_left()
        )

    @_chainable
    def item(
        self,
        name: str,
        qty: int,
        unit_price: Amount,
        discount: Optional[Amount] = None,
    ) -> None:
        """
        One line item.

        Layout: bold name (truncated to cols - 2), "{qty} x {unit price}",
        then the right-aligned line total. With a positive discount the
        original total, a discount line and the bold discounted total are
        printed instead. A blank line follows.
        """
        cols = self.cols
        price = to_decimal(unit_price)
        disc = to_decimal(discount) if discount is not None else None
        line_total = price * qty

        self._push(cmd.ESC_BOLD_ON)
        self._push_line(truncate(name, cols - 2))
        self._push(cmd.ESC_BOLD_OFF)
        self._push_line(f"{qty} x {self._fmt(price)}")

        if disc is not None and disc > _ZERO:
            self._push_line(right_align(self._fmt(line_total), cols))
            self._push_line(f"  {self.labels.item_discount} -{self._fmt(disc)}")
            self._push(cmd.ESC_BOLD_ON)
            self._push_line(right_align(self._fmt(line_total - disc), cols))
            self._push(cmd.ESC_BOLD_OFF)
        else:
            self._push_line(right_align(self._fmt(line_total), cols))

        self._push(cmd.LF)

    @_chainable
    def subtotal(self, amount: Amount) -> None:
        """Subtotal row followed by the right-aligned "excluding tax" note."""
        self._push_line(two_column(self.labels.subtotal_ht, self._fmt(to_decimal(amount)), self.cols))
        self._push_line(right_align(self.labels.excl_tax_note, self.cols))

    @_chainable
    def discount(self, amount: Amount, coupon_code: Optional[str] = None) -> None:
        """Order-level discount row. No-op when amount <= 0."""
        value = to_decimal(amount)
        if value <= _ZERO:
            return
        label = self.labels.discount
        if coupon_code is not None:
            label = f"{label} ({coupon_code})"
        self._push_line(two_column(label, f"-{self._fmt(value)}", self.cols))

    @_chainable
    def taxes(self, entries: Iterable[TaxEntry]) -> None:
        """
        Tax breakdown block.

        Included taxes show the "included" suffix and a plain amount; others
        show a "+" amount. Entries with amount <= 0 get no row but still
        count toward the sum of non-included taxes; when that sum is above
        zero a separator and an "additional taxes" total row close the block.
        """
        entries = list(entries)
        labels = self.labels
        cols = self.cols
        additional = sum((e.amount for e in entries if not e.included), _ZERO)

        self._push_line(labels.tax_details)
        for entry in entries:
            if entry.is_inert:
                continue
            if entry.included:
                label = f"  {entry.label} ({labels.tax_included})"
                value = self._fmt(entry.amount)
            else:
                label = f"  {entry.label}"
                value = f"+ {self._fmt(entry.amount)}"
            self._push_line(two_column(label, value, cols))

        if additional > _ZERO:
            self._push_line("  " + "-" * max(cols - 2, 0))
            self._push_line(
                two_column(f"  {labels.additional_taxes}", f"+ {self._fmt(additional)}", cols)
            )

    @_chainable
    def total(self, amount: Amount) -> None:
        """Bold double-height TOTAL row; style is restored afterwards."""
        row = two_column(self.labels.total, self._fmt(to_decimal(amount)), self.cols)
        self._push(cmd.ESC_BOLD_ON)
        self._push(cmd.ESC_DOUBLE_HEIGHT)
        self._push_line(row)
        self._push(cmd.ESC_NORMAL_SIZE)
        self._push(cmd.ESC_BOLD_OFF)

    @_chainable
    def received(self, amount: Amount) -> None:
        """Amount tendered. No-op when amount <= 0."""
        value = to_decimal(amount)
        if value > _ZERO:
            self._push_line(two_column(self.labels.received, self._fmt(value), self.cols))

    @_chainable
    def change(self, amount: Amount) -> None:
        """Change given back. No-op when amount <= 0."""
        value = to_decimal(amount)
        if value > _ZERO:
            self._push_line(two_column(self.labels.change, self._fmt(value), self.cols))

    @_chainable
    def served_by(self, name: str) -> None:
        self._push_line(f"{self.labels.served_by} {name}")

    def thank_you(self, shop_name: str) -> "ReceiptBuilder":
        return (
            self.align_center()
            .text_line(self.labels.thank_you)
            .text_line(f"{self.labels.see_you_at} {shop_name}")
            .align_left()
        )

    def __repr__(self) -> str:
        state = "consumed" if self._consumed else f"{len(self._data)} bytes"
        return (
            f"ReceiptBuilder(width={self._width.code!r}, currency={self._currency!r}, "
            f"language={self._language.value!r}, {state})"
        )
