"""
template/engine.py

JSON receipt templates: parse a document once, render it to ESC/POS bytes.

Document shape:

    {
      "width": "80mm",          # optional, "58mm"/"58", "80mm"/"80", "a4"
      "currency": "FCFA",       # optional
      "language": "fr",         # optional, fr/en/es/pt/ar/wo or English name
      "elements": [ {"type": "init"}, ... ]
    }

Elements replay against a fresh ReceiptBuilder strictly in document order.
Rendering is all-or-nothing: the first failing element aborts the render and
no bytes are returned. A rendered template is byte-identical to the same
sequence of builder calls.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Final, List

from thermoprint.builder import DEFAULT_CURRENCY, ReceiptBuilder
from thermoprint.errors import TemplateError, TemplateParseError
from thermoprint.i18n import Language
from thermoprint.model.enums import PrintWidth
from thermoprint.template.elements import BaseElement, element_from_dict

logger = logging.getLogger(__name__)

__all__ = [
    "ReceiptTemplate",
    "render_json",
    "DEFAULT_TEMPLATE_WIDTH",
    "DEFAULT_TEMPLATE_LANGUAGE",
]

DEFAULT_TEMPLATE_WIDTH: Final[str] = "80mm"
DEFAULT_TEMPLATE_LANGUAGE: Final[str] = "fr"


@dataclass
class ReceiptTemplate:
    """A parsed receipt template."""

    width: str = DEFAULT_TEMPLATE_WIDTH
    currency: str = DEFAULT_CURRENCY
    language: str = DEFAULT_TEMPLATE_LANGUAGE
    elements: List[BaseElement] = field(default_factory=list)

    @classmethod
    def from_json(cls, text: str) -> "ReceiptTemplate":
        """
        Parse a template from JSON text.

        Raises:
            TemplateParseError: If the text is not valid JSON or the document
                structure is wrong (the JSON error is chained as __cause__).
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            logger.error("Template is not valid JSON: %s", e)
            raise TemplateParseError(f"malformed JSON: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Any) -> "ReceiptTemplate":
        """
        Build a template from an already-decoded JSON document.

        Width and language codes are not resolved here; render() reports
        unknown codes.
        """
        if not isinstance(data, dict):
            raise TemplateParseError(
                f"template must be a JSON object, got {type(data).__name__}"
            )

        settings: Dict[str, str] = {}
        for key, default in (
            ("width", DEFAULT_TEMPLATE_WIDTH),
            ("currency", DEFAULT_CURRENCY),
            ("language", DEFAULT_TEMPLATE_LANGUAGE),
        ):
            value = data.get(key, default)
            if not isinstance(value, str):
                raise TemplateParseError(f"'{key}' must be a string, got {type(value).__name__}")
            settings[key] = value

        if "elements" not in data:
            raise TemplateParseError("missing required field 'elements'")
        raw_elements = data["elements"]
        if not isinstance(raw_elements, list):
            raise TemplateParseError(
                f"'elements' must be a list, got {type(raw_elements).__name__}"
            )

        elements = [element_from_dict(raw, index) for index, raw in enumerate(raw_elements)]
        logger.debug("Parsed template with %d elements", len(elements))
        return cls(elements=elements, **settings)

    def render(self) -> bytes:
        """
        Replay the elements against a fresh builder and return the bytes.

        Raises:
            UnknownWidthError: If width is not a known code.
            UnknownLanguageError: If language is not a known code.
            UnknownAlignError: If an align element has an unknown value.
            TemplateDecimalError: If a money field is not a decimal string.
        """
        try:
            width = PrintWidth.from_code(self.width)
            language = Language.from_code(self.language)
            builder = ReceiptBuilder(width, currency=self.currency, language=language)
            for element in self.elements:
                builder = element.apply(builder)
        except TemplateError as e:
            logger.error("Template render failed: %s", e)
            raise

        data = builder.build()
        logger.info(
            "Rendered template: %d elements, %d bytes (%s, %s)",
            len(self.elements),
            len(data),
            width.code,
            language.value,
        )
        return data


def render_json(text: str) -> bytes:
    """Parse a JSON template and render it in one step."""
    return ReceiptTemplate.from_json(text).render()
