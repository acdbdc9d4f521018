"""
money.py

Exact decimal amounts for receipts.

Amounts travel as decimal.Decimal end to end. Strings are parsed strictly
(no exponents, NaN or Infinity) and rounding to whole currency units happens
only when an amount is formatted for display.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from typing import Final, Union

from thermoprint.errors import InvalidDecimalError

__all__ = ["Amount", "parse_decimal", "to_decimal", "format_money"]

Amount = Union[Decimal, int, str]
"""Anything the builder accepts as a money value."""

_DECIMAL_PATTERN: Final = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)")
_WHOLE_UNIT: Final[Decimal] = Decimal(1)


def parse_decimal(text: str) -> Decimal:
    """
    Parse a plain decimal string such as "15000", "149.99" or "-5".

    Surrounding whitespace is ignored.

    Raises:
        InvalidDecimalError: For blanks, exponents, NaN/Infinity, thousands
            separators or any other non-numeric text.
    """
    candidate = text.strip()
    if not candidate:
        raise InvalidDecimalError(text, "empty value")
    if not _DECIMAL_PATTERN.fullmatch(candidate):
        raise InvalidDecimalError(text, "not a plain decimal number")
    try:
        return Decimal(candidate)
    except InvalidOperation as e:
        raise InvalidDecimalError(text, str(e)) from e


def to_decimal(amount: Amount) -> Decimal:
    """Coerce a builder money argument to Decimal."""
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, bool):
        raise TypeError("Money amount must be Decimal, int or str, not bool")
    if isinstance(amount, int):
        return Decimal(amount)
    if isinstance(amount, str):
        return parse_decimal(amount)
    raise TypeError(
        f"Money amount must be Decimal, int or str, not {type(amount).__name__}"
    )


def format_money(amount: Decimal, currency: str) -> str:
    """
    Round to whole units (half to even) and append the currency symbol.

    Example:
        >>> format_money(Decimal("14999.5"), "FCFA")
        '15000 FCFA'
    """
    rounded = amount.quantize(_WHOLE_UNIT, rounding=ROUND_HALF_EVEN)
    if rounded.is_zero():
        rounded = Decimal(0)
    return f"{rounded} {currency}"
