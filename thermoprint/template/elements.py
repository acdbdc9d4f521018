"""
template/elements.py

Receipt template elements: one dataclass per element type, registered by its
"type" tag.

Each element knows how to build itself from a JSON object (from_dict), check
its field types (validate) and replay itself against a ReceiptBuilder
(apply). Supporting a new element type means writing one decorated class;
the engine never changes.

Field typing is strict: str fields must be strings, int fields integers (not
booleans), bool fields booleans. Money amounts are strings and are parsed as
exact decimals when the element is applied. Unknown keys are ignored.
"""

from __future__ import annotations

import dataclasses
import logging
import typing
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Callable, ClassVar, Dict, List, Optional, Tuple, Type, TypeVar

from thermoprint.builder import (
    DEFAULT_BARCODE_HEIGHT,
    DEFAULT_BARCODE_WIDTH,
    DEFAULT_QR_SIZE,
    ReceiptBuilder,
)
from thermoprint.errors import InvalidDecimalError, TemplateDecimalError, TemplateParseError
from thermoprint.model.enums import Align
from thermoprint.model.tax import TaxEntry
from thermoprint.money import parse_decimal

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="BaseElement")

__all__ = [
    "BaseElement",
    "ElementRegistry",
    "element_class",
    "element_from_dict",
    "DEFAULT_DIVIDER_CHAR",
    "DEFAULT_FEED_LINES",
]

DEFAULT_DIVIDER_CHAR = "-"
DEFAULT_FEED_LINES = 3

# Field metadata marking a single-byte integer parameter
_U8: Dict[str, Any] = {"u8": True}


class ElementRegistry:
    """Registry of element classes keyed by their "type" tag."""

    _registry: Dict[str, Tuple[Type["BaseElement"], int]] = {}

    @classmethod
    def register(cls, type_key: str, element_cls: Type["BaseElement"], order: int = 100) -> None:
        key = type_key.lower().strip()
        if key in cls._registry:
            logger.warning(
                "Re-registering element type '%s', was %s, now %s",
                key,
                cls._registry[key][0].__name__,
                element_cls.__name__,
            )
        cls._registry[key] = (element_cls, order)
        element_cls.type_key = key

    @classmethod
    def get(cls, type_key: str) -> Optional[Type["BaseElement"]]:
        entry = cls._registry.get(type_key)
        return entry[0] if entry else None

    @classmethod
    def unregister(cls, type_key: str) -> None:
        cls._registry.pop(type_key.lower().strip(), None)

    @classmethod
    def all_types(cls) -> List[str]:
        return [k for k, _ in sorted(cls._registry.items(), key=lambda x: x[1][1])]


def element_class(
    type_key: str, order: int = 100
) -> Callable[[Type["BaseElement"]], Type["BaseElement"]]:
    """Decorator registering an element class under its type tag."""

    def wrapper(cls: Type["BaseElement"]) -> Type["BaseElement"]:
        ElementRegistry.register(type_key, cls, order=order)
        return cls

    return wrapper


def _money(value: str) -> Decimal:
    try:
        return parse_decimal(value)
    except InvalidDecimalError as e:
        raise TemplateDecimalError(e.value, e.reason) from e


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", str(tp))


@dataclass
class BaseElement(ABC):
    """Base class of all template elements."""

    type_key: ClassVar[str] = ""

    @classmethod
    def from_dict(cls: Type[T], data: Dict[str, Any], index: Optional[int] = None) -> T:
        """
        Build the element from a JSON object, then validate field types.

        Raises:
            TemplateParseError: If a required field is missing or a field has
                the wrong type.
        """
        fields = {f.name: f for f in dataclasses.fields(cls)}
        for name, f in fields.items():
            required = f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING
            if required and name not in data:
                raise TemplateParseError(
                    f"'{cls.type_key}' element is missing required field '{name}'", index
                )
        obj = cls(**{k: v for k, v in data.items() if k in fields})
        obj.validate(index)
        return obj

    def validate(self, index: Optional[int] = None) -> None:
        hints = typing.get_type_hints(type(self))
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            expected = hints[f.name]
            optional = type(None) in typing.get_args(expected)
            if optional:
                if value is None:
                    continue
                expected = next(a for a in typing.get_args(expected) if a is not type(None))
            # bool is an int subclass; keep the two apart
            if isinstance(value, bool) and expected is not bool:
                ok = False
            else:
                ok = isinstance(value, expected)
            if not ok:
                raise TemplateParseError(
                    f"'{self.type_key}.{f.name}' must be {_type_name(expected)}, "
                    f"got {type(value).__name__}",
                    index,
                )
            if f.metadata.get("u8") and not 0 <= value <= 255:
                raise TemplateParseError(
                    f"'{self.type_key}.{f.name}' must be 0-255, got {value}", index
                )

    @abstractmethod
    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        """Replay this element on the builder and return it."""
        ...


def element_from_dict(data: Any, index: Optional[int] = None) -> BaseElement:
    """
    Create an element from one entry of the template "elements" list.

    Raises:
        TemplateParseError: If the entry is not an object, has no string
            "type", names an unknown type, or has invalid fields.
    """
    if not isinstance(data, dict):
        raise TemplateParseError(f"element must be an object, got {type(data).__name__}", index)
    type_key = data.get("type")
    if not isinstance(type_key, str):
        raise TemplateParseError("element is missing a string 'type' field", index)
    cls = ElementRegistry.get(type_key)
    if cls is None:
        raise TemplateParseError(f"unknown element type '{type_key}'", index)
    return cls.from_dict(data, index)


# =============================================================================
# SETUP AND STYLE
# =============================================================================


@element_class("init", order=0)
@dataclass
class InitElement(BaseElement):
    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        return builder.init()


@element_class("bold", order=10)
@dataclass
class BoldElement(BaseElement):
    on: bool = True

    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        return builder.bold(self.on)


@element_class("underline", order=11)
@dataclass
class UnderlineElement(BaseElement):
    on: bool = True

    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        return builder.underline(self.on)


@element_class("double_size", order=12)
@dataclass
class DoubleSizeElement(BaseElement):
    on: bool = True

    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        return builder.double_size(self.on)


@element_class("double_height", order=13)
@dataclass
class DoubleHeightElement(BaseElement):
    on: bool = True

    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        return builder.double_height(self.on)


@element_class("double_width", order=14)
@dataclass
class DoubleWidthElement(BaseElement):
    on: bool = True

    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        return builder.double_width(self.on)


@element_class("normal_size", order=15)
@dataclass
class NormalSizeElement(BaseElement):
    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        return builder.normal_size()


@element_class("align", order=16)
@dataclass
class AlignElement(BaseElement):
    """Alignment switch; value is "left", "center" or "right"."""

    value: str

    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        return builder.align(Align.from_code(self.value))


# =============================================================================
# TEXT
# =============================================================================


@element_class("text", order=20)
@dataclass
class TextElement(BaseElement):
    text: str

    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        return builder.text(self.text)


@element_class("text_line", order=21)
@dataclass
class TextLineElement(BaseElement):
    text: str

    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        return builder.text_line(self.text)


@element_class("centered", order=22)
@dataclass
class CenteredElement(BaseElement):
    text: str

    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        return builder.centered(self.text)


@element_class("right", order=23)
@dataclass
class RightElement(BaseElement):
    text: str

    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        return builder.right(self.text)


@element_class("row", order=24)
@dataclass
class RowElement(BaseElement):
    left: str
    right: str

    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        return builder.row(self.left, self.right)


@element_class("divider", order=25)
@dataclass
class DividerElement(BaseElement):
    """Full-width rule. Only the first character of "char" is used."""

    char: str = DEFAULT_DIVIDER_CHAR

    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        return builder.divider(self.char or DEFAULT_DIVIDER_CHAR)


@element_class("blank", order=26)
@dataclass
class BlankElement(BaseElement):
    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        return builder.blank()


# =============================================================================
# RECEIPT CONTENT
# =============================================================================


@element_class("shop_header", order=30)
@dataclass
class ShopHeaderElement(BaseElement):
    name: str
    phone: str = ""
    address: str = ""

    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        return builder.shop_header(self.name, self.phone, self.address)


@element_class("item", order=31)
@dataclass
class ItemElement(BaseElement):
    """Line item. unit_price and discount are decimal strings."""

    name: str
    qty: int
    unit_price: str
    discount: Optional[str] = None

    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        price = _money(self.unit_price)
        disc = _money(self.discount) if self.discount is not None else None
        return builder.item(self.name, self.qty, price, disc)


@element_class("subtotal", order=32)
@dataclass
class SubtotalElement(BaseElement):
    amount: str

    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        return builder.subtotal(_money(self.amount))


@element_class("tax", order=33)
@dataclass
class TaxElement(BaseElement):
    """
    A one-entry tax block.

    Each tax element prints its own "tax details" header; list several taxes
    through the builder's taxes() when one header is wanted.
    """

    label: str
    amount: str
    included: bool = False

    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        entry = TaxEntry(self.label, _money(self.amount), self.included)
        return builder.taxes([entry])


@element_class("discount", order=34)
@dataclass
class DiscountElement(BaseElement):
    amount: str
    coupon_code: Optional[str] = None

    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        return builder.discount(_money(self.amount), self.coupon_code)


@element_class("total", order=35)
@dataclass
class TotalElement(BaseElement):
    amount: str

    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        return builder.total(_money(self.amount))


@element_class("received", order=36)
@dataclass
class ReceivedElement(BaseElement):
    amount: str

    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        return builder.received(_money(self.amount))


@element_class("change", order=37)
@dataclass
class ChangeElement(BaseElement):
    amount: str

    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        return builder.change(_money(self.amount))


@element_class("served_by", order=38)
@dataclass
class ServedByElement(BaseElement):
    name: str

    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        return builder.served_by(self.name)


@element_class("thank_you", order=39)
@dataclass
class ThankYouElement(BaseElement):
    shop_name: str

    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        return builder.thank_you(self.shop_name)


# =============================================================================
# CODES
# =============================================================================


@element_class("barcode_code128", order=40)
@dataclass
class BarcodeCode128Element(BaseElement):
    value: str
    bar_width: int = field(default=DEFAULT_BARCODE_WIDTH, metadata=_U8)
    bar_height: int = field(default=DEFAULT_BARCODE_HEIGHT, metadata=_U8)

    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        return builder.barcode_code128(self.value, self.bar_width, self.bar_height)


@element_class("barcode_ean13", order=41)
@dataclass
class BarcodeEan13Element(BaseElement):
    value: str

    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        return builder.barcode_ean13(self.value)


@element_class("qr_code", order=42)
@dataclass
class QrCodeElement(BaseElement):
    data: str
    size: int = field(default=DEFAULT_QR_SIZE, metadata=_U8)

    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        return builder.qr_code(self.data, self.size)


# =============================================================================
# PAPER AND PERIPHERALS
# =============================================================================


@element_class("feed", order=50)
@dataclass
class FeedElement(BaseElement):
    lines: int = field(default=DEFAULT_FEED_LINES, metadata=_U8)

    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        return builder.feed(self.lines)


@element_class("cut", order=51)
@dataclass
class CutElement(BaseElement):
    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        return builder.cut()


@element_class("cut_full", order=52)
@dataclass
class CutFullElement(BaseElement):
    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        return builder.cut_full()


@element_class("form_feed", order=53)
@dataclass
class FormFeedElement(BaseElement):
    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        return builder.form_feed()


@element_class("open_cash_drawer", order=54)
@dataclass
class OpenCashDrawerElement(BaseElement):
    def apply(self, builder: ReceiptBuilder) -> ReceiptBuilder:
        return builder.open_cash_drawer()
