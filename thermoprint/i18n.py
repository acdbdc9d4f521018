"""
i18n.py

Receipt label tables, one immutable record per language.

Labels are plain ASCII where the language allows it (the printer prints code
page 858, and transliterated Arabic and Wolof keep every receipt readable on
any ESC/POS head). Adding a language means adding a Language member and one
ReceiptLabels record to _LABELS; no builder code changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping

from thermoprint.errors import UnknownLanguageError

_logger: Final[logging.Logger] = logging.getLogger(__name__)

__all__ = ["Language", "ReceiptLabels", "DEFAULT_LANGUAGE"]


@dataclass(frozen=True, slots=True)
class ReceiptLabels:
    """Display strings used by the receipt-level builder operations."""

    subtotal_ht: str
    excl_tax_note: str
    discount: str
    tax_details: str
    tax_included: str
    additional_taxes: str
    total: str
    received: str
    change: str
    served_by: str
    thank_you: str
    see_you_at: str
    item_discount: str


class Language(str, Enum):
    """Supported receipt languages (ISO 639-1 codes)."""

    FR = "fr"
    EN = "en"
    ES = "es"
    PT = "pt"
    AR = "ar"
    WO = "wo"

    @property
    def labels(self) -> ReceiptLabels:
        return _LABELS[self]

    @classmethod
    def from_code(cls, code: str) -> "Language":
        """
        Resolve a language code or English name, case-insensitive.

        Raises:
            UnknownLanguageError: for anything else.
        """
        key = code.strip().lower()
        language = _LANGUAGE_ALIASES.get(key)
        if language is None:
            _logger.debug("Rejected language code %r", code)
            raise UnknownLanguageError(code)
        return language


_LANGUAGE_ALIASES: Final[Mapping[str, Language]] = MappingProxyType(
    {
        "fr": Language.FR,
        "french": Language.FR,
        "en": Language.EN,
        "english": Language.EN,
        "es": Language.ES,
        "spanish": Language.ES,
        "pt": Language.PT,
        "portuguese": Language.PT,
        "ar": Language.AR,
        "arabic": Language.AR,
        "wo": Language.WO,
        "wolof": Language.WO,
    }
)

_LABELS: Final[Mapping[Language, ReceiptLabels]] = MappingProxyType(
    {
        Language.FR: ReceiptLabels(
            subtotal_ht="SOUS-TOTAL HT",
            excl_tax_note="(Hors TVA)",
            discount="REMISE",
            tax_details="DETAIL DES TAXES:",
            tax_included="incluse",
            additional_taxes="Taxes additionnelles",
            total="TOTAL",
            received="MONTANT RECU",
            change="MONNAIE",
            served_by="Servi par:",
            thank_you="Merci pour votre confiance!",
            see_you_at="A bientot chez",
            item_discount="Remise:",
        ),
        Language.EN: ReceiptLabels(
            subtotal_ht="SUBTOTAL",
            excl_tax_note="(Excl. Tax)",
            discount="DISCOUNT",
            tax_details="TAX DETAILS:",
            tax_included="included",
            additional_taxes="Additional taxes",
            total="TOTAL",
            received="AMOUNT RECEIVED",
            change="CHANGE",
            served_by="Served by:",
            thank_you="Thank you for your purchase!",
            see_you_at="See you soon at",
            item_discount="Discount:",
        ),
        Language.ES: ReceiptLabels(
            subtotal_ht="SUBTOTAL",
            excl_tax_note="(Sin IVA)",
            discount="DESCUENTO",
            tax_details="DETALLE DE IMPUESTOS:",
            tax_included="incluido",
            additional_taxes="Impuestos adicionales",
            total="TOTAL",
            received="MONTO RECIBIDO",
            change="CAMBIO",
            served_by="Atendido por:",
            thank_you="Gracias por su compra!",
            see_you_at="Hasta pronto en",
            item_discount="Descuento:",
        ),
        Language.PT: ReceiptLabels(
            subtotal_ht="SUBTOTAL",
            excl_tax_note="(Sem IVA)",
            discount="DESCONTO",
            tax_details="DETALHES DOS IMPOSTOS:",
            tax_included="incluido",
            additional_taxes="Impostos adicionais",
            total="TOTAL",
            received="VALOR RECEBIDO",
            change="TROCO",
            served_by="Atendido por:",
            thank_you="Obrigado pela sua compra!",
            see_you_at="Ate breve em",
            item_discount="Desconto:",
        ),
        Language.AR: ReceiptLabels(
            subtotal_ht="AL-MAJMOU' AL-FER'I",
            excl_tax_note="(Bidoun Dariba)",
            discount="TAKHFID",
            tax_details="TAFASIL AD-DARIBA:",
            tax_included="moudamana",
            additional_taxes="Daraib idafiya",
            total="AL-MAJMOU'",
            received="AL-MABLAGH AL-MUSTASLAM",
            change="AL-BAAQI",
            served_by="Khidma min:",
            thank_you="Choukran li thiqatikum!",
            see_you_at="Ila al-liqa' fi",
            item_discount="Takhfid:",
        ),
        Language.WO: ReceiptLabels(
            subtotal_ht="TOLLU NJEG",
            excl_tax_note="(Bu Amul Cero)",
            discount="WANAAGU NJEG",
            tax_details="CERON YI:",
            tax_included="ci biir",
            additional_taxes="Cero yu nyul",
            total="TOLLU",
            received="XAALIS BU JOTNA",
            change="CENNGE",
            served_by="Liggeykat bi:",
            thank_you="Jere jef ci sanu confiance!",
            see_you_at="Ba beneen yoon ci",
            item_discount="Wanaag:",
        ),
    }
)

DEFAULT_LANGUAGE: Final[Language] = Language.FR
