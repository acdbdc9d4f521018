"""
Exception hierarchy for thermoprint.

Every error the library raises on well-typed input derives from
ThermoprintError. Template failures additionally derive from TemplateError,
so a caller rendering documents only has to catch one type.

Caller contract breaches (RGBA buffer length mismatch, single-byte
parameters out of 0-255) are plain ValueError subclasses and are not part
of this hierarchy.
"""

from typing import Optional

__all__ = [
    "ThermoprintError",
    "InvalidBarcodeError",
    "InvalidDecimalError",
    "LogoLoadError",
    "BuilderConsumedError",
    "TemplateError",
    "TemplateParseError",
    "TemplateDecimalError",
    "UnknownWidthError",
    "UnknownLanguageError",
    "UnknownAlignError",
    "RasterInputError",
]


class ThermoprintError(Exception):
    """Base class for all thermoprint errors."""


class InvalidBarcodeError(ThermoprintError):
    """Barcode value is empty, too long or malformed for its symbology."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"Invalid barcode value '{value}': {reason}")
        self.value = value
        self.reason = reason


class InvalidDecimalError(ThermoprintError, ValueError):
    """Money string could not be parsed into an exact decimal."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(
            f"Invalid decimal amount '{value}': {reason}. "
            f'Use a numeric string e.g. "15000" or "149.99"'
        )
        self.value = value
        self.reason = reason


class LogoLoadError(ThermoprintError):
    """Image file could not be opened or decoded."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to load logo from '{path}': {reason}")
        self.path = path
        self.reason = reason


class BuilderConsumedError(ThermoprintError, RuntimeError):
    """A receipt builder was used after build() handed its bytes out."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"ReceiptBuilder.{operation}() called after build(); "
            f"create a new builder for the next receipt"
        )
        self.operation = operation


class TemplateError(ThermoprintError):
    """Base class for receipt template failures."""


class TemplateParseError(TemplateError):
    """Template document is not valid JSON or has the wrong structure."""

    def __init__(self, reason: str, index: Optional[int] = None) -> None:
        where = f" (element #{index})" if index is not None else ""
        super().__init__(f"Invalid template{where}: {reason}")
        self.reason = reason
        self.index = index


class TemplateDecimalError(TemplateError, InvalidDecimalError):
    """A money field inside a template is not a valid decimal string."""


class UnknownWidthError(TemplateError, ValueError):
    """Paper width code is not one of 58mm, 80mm or a4."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"Unknown paper width '{value}'. Use '58mm', '80mm', or 'a4'."
        )
        self.value = value


class UnknownLanguageError(TemplateError, ValueError):
    """Language code is not one of the supported label tables."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"Unknown language '{value}'. "
            f"Use 'fr', 'en', 'es', 'pt', 'ar', or 'wo'."
        )
        self.value = value


class UnknownAlignError(TemplateError, ValueError):
    """Alignment value is not left, center or right."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"Unknown alignment '{value}'. Use 'left', 'center', or 'right'."
        )
        self.value = value


class RasterInputError(ValueError):
    """RGBA buffer length does not match width * height * 4."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"RGBA data length mismatch: expected {expected} bytes, got {actual}"
        )
        self.expected = expected
        self.actual = actual
