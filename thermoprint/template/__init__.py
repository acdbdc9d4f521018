"""Declarative JSON receipt templates replayed against the receipt builder."""

from thermoprint.template.elements import (
    BaseElement,
    ElementRegistry,
    element_class,
    element_from_dict,
)
from thermoprint.template.engine import ReceiptTemplate, render_json

__all__ = [
    "BaseElement",
    "ElementRegistry",
    "element_class",
    "element_from_dict",
    "ReceiptTemplate",
    "render_json",
]
