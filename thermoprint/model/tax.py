"""Tax line value type attached to a receipt."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

__all__ = ["TaxEntry"]


@dataclass(frozen=True)
class TaxEntry:
    """
    A single tax line.

    Attributes:
        label: Display label, e.g. "TVA 18%" or "Taxe Municipale 2%".
        amount: Tax amount in the local currency unit.
        included: True when the tax is already in the item prices (shown for
            information only), False when it is added on top of the subtotal.

    Entries with amount <= 0 are inert: the builder skips them.
    """

    label: str
    amount: Decimal
    included: bool = False

    @property
    def is_inert(self) -> bool:
        return self.amount <= 0
