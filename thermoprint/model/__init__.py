"""Domain model for thermoprint: enums and value types."""

from thermoprint.model.enums import (
    DEFAULT_DITHERING_ALGORITHM,
    DEFAULT_PRINT_WIDTH,
    Align,
    DitheringAlgorithm,
    PrintWidth,
)
from thermoprint.model.tax import TaxEntry

__all__ = [
    "Align",
    "DitheringAlgorithm",
    "PrintWidth",
    "TaxEntry",
    "DEFAULT_DITHERING_ALGORITHM",
    "DEFAULT_PRINT_WIDTH",
]
