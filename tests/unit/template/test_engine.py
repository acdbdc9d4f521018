import json
import logging

import pytest

from thermoprint.builder import ReceiptBuilder
from thermoprint.errors import (
    TemplateDecimalError,
    TemplateError,
    TemplateParseError,
    UnknownAlignError,
    UnknownLanguageError,
    UnknownWidthError,
)
from thermoprint.i18n import Language
from thermoprint.model.enums import PrintWidth
from thermoprint.template.engine import ReceiptTemplate, render_json

RECEIPT = {
    "width": "58mm",
    "currency": "FCFA",
    "language": "fr",
    "elements": [
        {"type": "init"},
        {"type": "shop_header", "name": "MA BOUTIQUE", "phone": "+221 77 000 00 00"},
        {"type": "divider"},
        {"type": "item", "name": "T-shirt", "qty": 2, "unit_price": "15000"},
        {"type": "item", "name": "Jean", "qty": 1, "unit_price": "25000", "discount": "5000"},
        {"type": "subtotal", "amount": "50000"},
        {"type": "tax", "label": "TVA 18%", "amount": "9000"},
        {"type": "total", "amount": "59000"},
        {"type": "received", "amount": "60000"},
        {"type": "change", "amount": "1000"},
        {"type": "served_by", "name": "Awa"},
        {"type": "barcode_code128", "value": "ORD-001"},
        {"type": "qr_code", "data": "https://example.com/r/1", "size": 5},
        {"type": "thank_you", "shop_name": "MA BOUTIQUE"},
        {"type": "feed", "lines": 4},
        {"type": "cut"},
    ],
}


def _same_receipt_via_builder() -> bytes:
    from decimal import Decimal

    from thermoprint.model.tax import TaxEntry

    return (
        ReceiptBuilder(PrintWidth.MM58, currency="FCFA", language=Language.FR)
        .init()
        .shop_header("MA BOUTIQUE", "+221 77 000 00 00")
        .divider()
        .item("T-shirt", 2, "15000")
        .item("Jean", 1, "25000", "5000")
        .subtotal("50000")
        .taxes([TaxEntry("TVA 18%", Decimal("9000"))])
        .total("59000")
        .received("60000")
        .change("1000")
        .served_by("Awa")
        .barcode_code128("ORD-001")
        .qr_code("https://example.com/r/1", 5)
        .thank_you("MA BOUTIQUE")
        .feed(4)
        .cut()
        .build()
    )


class TestParse:
    def test_from_json(self) -> None:
        template = ReceiptTemplate.from_json(json.dumps(RECEIPT))
        assert template.width == "58mm"
        assert len(template.elements) == len(RECEIPT["elements"])

    def test_defaults(self) -> None:
        template = ReceiptTemplate.from_dict({"elements": []})
        assert (template.width, template.currency, template.language) == ("80mm", "FCFA", "fr")
        assert template.render() == b""

    def test_malformed_json_chains_cause(self) -> None:
        with pytest.raises(TemplateParseError) as exc_info:
            ReceiptTemplate.from_json("{not json")
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    @pytest.mark.parametrize("doc", ["[]", "42", '"text"', "null"])
    def test_document_must_be_object(self, doc: str) -> None:
        with pytest.raises(TemplateParseError, match="JSON object"):
            ReceiptTemplate.from_json(doc)

    def test_elements_required(self) -> None:
        with pytest.raises(TemplateParseError, match="'elements'"):
            ReceiptTemplate.from_dict({"width": "80mm"})

    def test_elements_must_be_list(self) -> None:
        with pytest.raises(TemplateParseError, match="must be a list"):
            ReceiptTemplate.from_dict({"elements": {"type": "cut"}})

    @pytest.mark.parametrize("key", ["width", "currency", "language"])
    def test_settings_must_be_strings(self, key: str) -> None:
        with pytest.raises(TemplateParseError, match=f"'{key}' must be a string"):
            ReceiptTemplate.from_dict({key: 80, "elements": []})

    def test_bad_element_reports_index(self) -> None:
        doc = {"elements": [{"type": "init"}, {"type": "cut"}, {"type": "nope"}]}
        with pytest.raises(TemplateParseError) as exc_info:
            ReceiptTemplate.from_dict(doc)
        assert exc_info.value.index == 2
        assert "element #2" in str(exc_info.value)

    def test_unknown_codes_not_checked_at_parse_time(self) -> None:
        template = ReceiptTemplate.from_dict({"width": "100mm", "elements": []})
        assert template.width == "100mm"


class TestRender:
    def test_matches_builder_calls(self) -> None:
        assert render_json(json.dumps(RECEIPT)) == _same_receipt_via_builder()

    def test_render_is_deterministic(self) -> None:
        template = ReceiptTemplate.from_dict(RECEIPT)
        assert template.render() == template.render()

    def test_width_aliases(self) -> None:
        doc = {"width": "58", "elements": [{"type": "divider"}]}
        assert ReceiptTemplate.from_dict(doc).render() == b"-" * 32 + b"\n"

    def test_language_by_english_name(self) -> None:
        doc = {"language": "English", "elements": [{"type": "change", "amount": "5"}]}
        assert ReceiptTemplate.from_dict(doc).render().startswith(b"CHANGE")

    def test_currency_setting(self) -> None:
        doc = {"currency": "EUR", "elements": [{"type": "received", "amount": "12"}]}
        assert ReceiptTemplate.from_dict(doc).render().endswith(b"12 EUR\n")

    def test_unknown_width(self) -> None:
        with pytest.raises(UnknownWidthError):
            render_json('{"width": "100mm", "elements": []}')

    def test_unknown_language(self) -> None:
        with pytest.raises(UnknownLanguageError):
            render_json('{"language": "de", "elements": []}')

    def test_unknown_align_aborts_render(self) -> None:
        doc = {"elements": [{"type": "text_line", "text": "a"}, {"type": "align", "value": "up"}]}
        with pytest.raises(UnknownAlignError):
            ReceiptTemplate.from_dict(doc).render()

    def test_bad_amount_aborts_render(self, caplog: pytest.LogCaptureFixture) -> None:
        doc = {"elements": [{"type": "total", "amount": "abc"}]}
        with caplog.at_level(logging.ERROR, logger="thermoprint.template.engine"):
            with pytest.raises(TemplateDecimalError):
                ReceiptTemplate.from_dict(doc).render()

    def test_all_template_failures_share_base(self) -> None:
        for doc in ("{", '{"width": "x", "elements": []}', '{"elements": [{"type": "?"}]}'):
            with pytest.raises(TemplateError):
                render_json(doc)
