"""
Barcode and QR code commands for ESC/POS printers.

Contains the barcode configuration setters (module width, height, HRI text),
the CODE128 and EAN-13 symbol commands, and the four-frame QR sequence.

The encoders never validate their input: a malformed value produces bytes the
printer will reject or misprint. Callers who accept untrusted values run them
through check_code128() / check_ean13() first.

Reference: Epson ESC/POS Application Programming Guide, GS k / GS ( k
Compatibility: Epson TM-T20/T88, Xprinter XP-58/80 and clones
"""

import re
from enum import Enum
from typing import Final

from thermoprint.errors import InvalidBarcodeError
from thermoprint.escpos.commands.hardware import GS

__all__ = [
    "BarcodeHRI",
    "HRIFont",
    "set_barcode_width",
    "set_barcode_height",
    "set_hri_position",
    "set_hri_font",
    "code128",
    "ean13",
    "qr_code",
    "check_code128",
    "check_ean13",
    "CODE128_MAX_LEN",
]

# =============================================================================
# BARCODE CONFIGURATION
# =============================================================================


class BarcodeHRI(Enum):
    """
    Human Readable Interpretation (HRI) text position.

    Controls where the barcode data text appears relative to the bars.
    """

    NONE = 0
    """No HRI text printed (barcode only)."""

    ABOVE = 1
    """HRI text printed above the bars."""

    BELOW = 2
    """HRI text printed below the bars (most common on receipts)."""

    BOTH = 3
    """HRI text printed above and below the bars."""


class HRIFont(Enum):
    """Font used for HRI text."""

    FONT_A = 0
    """Font A, 12x24 dots."""

    FONT_B = 1
    """Font B, 9x17 dots."""


def set_barcode_width(width: int) -> bytes:
    """
    Set the barcode module (narrowest bar) width.

    Command: GS w n
    Hex: 1D 77 n

    Args:
        width: Module width in dots. Printers honor 1-6 (2 is the usual
               receipt value); the byte itself accepts 0-255.
    """
    return bytes([GS, ord("w"), width])


def set_barcode_height(height: int) -> bytes:
    """
    Set the barcode height in dots.

    Command: GS h n
    Hex: 1D 68 n
    """
    return bytes([GS, ord("h"), height])


def set_hri_position(position: BarcodeHRI) -> bytes:
    """
    Select the HRI text position.

    Command: GS H n
    Hex: 1D 48 n
    """
    return bytes([GS, ord("H"), position.value])


def set_hri_font(font: HRIFont) -> bytes:
    """
    Select the HRI text font.

    Command: GS f n
    Hex: 1D 66 n
    """
    return bytes([GS, ord("f"), font.value])


# =============================================================================
# 1D SYMBOLS
# =============================================================================

CODE128_MAX_LEN: Final[int] = 255
"""Longest CODE128 payload the 1-byte length prefix can describe."""

_CODE128_SYSTEM: Final[int] = 73
_EAN13_SYSTEM: Final[int] = 2


def code128(value: str) -> bytes:
    """
    Print a CODE128 barcode.

    Command: GS k 73 n d1...dn
    Hex: 1D 6B 49 n data

    Args:
        value: Barcode content. Encoded as UTF-8; ASCII is what printers
               actually support.

    Returns:
        Command bytes: 4-byte prefix followed by the payload.

    Note:
        The length is a single byte. A payload longer than 255 bytes wraps
        the length modulo 256 and the printer misreads the symbol, so
        check_code128() should gate untrusted input.

    Example:
        >>> code128("ORD-001")
        b'\\x1dkI\\x07ORD-001'
    """
    data = value.encode("utf-8")
    return bytes([GS, ord("k"), _CODE128_SYSTEM, len(data) & 0xFF]) + data


def ean13(value: str) -> bytes:
    """
    Print an EAN-13 barcode.

    Command: GS k 2 d1...d12 NUL
    Hex: 1D 6B 02 data 00

    Args:
        value: Exactly 12 digits; the printer computes the 13th check digit.

    Returns:
        Command bytes, NUL-terminated.

    Example:
        >>> ean13("590123412345")[-1]
        0
    """
    return bytes([GS, ord("k"), _EAN13_SYSTEM]) + value.encode("utf-8") + b"\x00"


_EAN13_PATTERN: Final = re.compile(r"[0-9]{12}")


def check_ean13(value: str) -> str:
    """
    Validate an EAN-13 payload (12 ASCII digits, no check digit).

    Returns:
        The value unchanged, so it can be used inline.

    Raises:
        InvalidBarcodeError: If the value is not exactly 12 ASCII digits.
    """
    if len(value) != 12:
        raise InvalidBarcodeError(value, f"EAN-13 needs exactly 12 digits, got {len(value)}")
    if not _EAN13_PATTERN.fullmatch(value):
        raise InvalidBarcodeError(value, "EAN-13 accepts digits 0-9 only")
    return value


def check_code128(value: str) -> str:
    """
    Validate a CODE128 payload (non-empty ASCII, at most 255 bytes).

    Returns:
        The value unchanged.

    Raises:
        InvalidBarcodeError: If the value is empty, non-ASCII or too long.
    """
    if not value:
        raise InvalidBarcodeError(value, "CODE128 value is empty")
    if not value.isascii():
        raise InvalidBarcodeError(value, "CODE128 accepts ASCII characters only")
    if len(value) > CODE128_MAX_LEN:
        raise InvalidBarcodeError(
            value, f"CODE128 value exceeds {CODE128_MAX_LEN} bytes ({len(value)})"
        )
    return value


# =============================================================================
# QR CODE
# =============================================================================

# GS ( k function codes (cn = 49 '1' selects QR)
_QR_STORE: Final[bytes] = bytes([0x31, 0x50, 0x30])
_QR_MODULE_SIZE: Final[bytes] = bytes([0x31, 0x43])
_QR_ERROR_LEVEL_M: Final[bytes] = bytes([0x31, 0x45, 0x31])
_QR_PRINT: Final[bytes] = bytes([0x31, 0x51, 0x30])


def _qr_frame(body: bytes) -> bytes:
    size = len(body)
    return bytes([GS, ord("("), ord("k"), size & 0xFF, (size >> 8) & 0xFF]) + body


def qr_code(data: str, size: int = 4) -> bytes:
    """
    Print a QR code.

    Sends four GS ( k frames in order:
        1. Store data      1D 28 6B pL pH 31 50 30 data   (pL pH = len + 3)
        2. Module size     1D 28 6B 03 00 31 43 n
        3. Error level M   1D 28 6B 03 00 31 45 31
        4. Print symbol    1D 28 6B 03 00 31 51 30

    Args:
        data: Symbol content, encoded as UTF-8.
        size: Module size in dots. Printers honor 1-8; 4 suits receipts.

    Returns:
        The four frames concatenated.

    Note:
        The store length is 16-bit little-endian; payloads beyond 65532
        bytes wrap and are misread.

    Example:
        >>> qr_code("https://example.com", 3).count(b"\\x1d(k")
        4
    """
    payload = data.encode("utf-8")
    return (
        _qr_frame(_QR_STORE + payload)
        + _qr_frame(_QR_MODULE_SIZE + bytes([size]))
        + _qr_frame(_QR_ERROR_LEVEL_M)
        + _qr_frame(_QR_PRINT)
    )
