"""
thermoprint
===========

ESC/POS receipt generation for 58 mm / 80 mm thermal printers and A4.

This package provides:
    - Pure ESC/POS command primitives (thermoprint.escpos.commands)
    - Code page 858 text encoding and fixed-width column layout
    - RGBA -> 1-bit raster conversion with threshold or Floyd-Steinberg
    - A fluent ReceiptBuilder with line items, taxes and totals
    - JSON receipt templates rendered through the same builder
    - Receipt labels in French, English, Spanish, Portuguese, Arabic, Wolof

Sending the bytes to a device (USB, serial, network) is left to the caller.

Example:
    >>> from thermoprint import PrintWidth, ReceiptBuilder, TaxEntry
    >>> from decimal import Decimal
    >>>
    >>> receipt = (
    ...     ReceiptBuilder(PrintWidth.MM80)
    ...     .init()
    ...     .shop_header("MA BOUTIQUE", "+221 77 000 00 00", "Dakar")
    ...     .item("T-shirt", 2, "15000")
    ...     .item("Jean", 1, "25000", discount="5000")
    ...     .subtotal("50000")
    ...     .taxes([TaxEntry("TVA 18%", Decimal("9000"))])
    ...     .total("59000")
    ...     .thank_you("MA BOUTIQUE")
    ...     .feed(3)
    ...     .cut()
    ...     .build()
    ... )

Logging:
    Messages go to the "thermoprint" logger. Console output (stderr) shows
    WARNING and above; set THERMOPRINT_LOG_LEVEL to change the package
    level and THERMOPRINT_LOG_FILE to add a rotating log file.
"""

import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# =============================================================================
# PACKAGE METADATA
# =============================================================================

__version__ = "0.1.0"
__description__ = "ESC/POS receipt builder for thermal printers"
__license__ = "MIT"
__python_requires__ = ">=3.11"

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

if sys.version_info < (3, 11):
    raise RuntimeError(
        f"thermoprint requires Python 3.11 or newer. "
        f"Current version: {sys.version_info.major}."
        f"{sys.version_info.minor}.{sys.version_info.micro}"
    )

# =============================================================================
# LOGGING
# =============================================================================

_PACKAGE_LOGGER = "thermoprint"

_LOG_LEVELS: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _setup_logging() -> None:
    """
    Configure the package logger once.

    - Console handler (stderr) for WARNING and above
    - Optional rotating file handler (10 MB x 5) when THERMOPRINT_LOG_FILE
      names a path
    - Package level from THERMOPRINT_LOG_LEVEL (default INFO)

    Idempotent: a logger that already has handlers is left alone.
    """
    level_name = os.environ.get("THERMOPRINT_LOG_LEVEL", "INFO").upper()
    log_level = _LOG_LEVELS.get(level_name, logging.INFO)

    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    if package_logger.handlers:
        return

    package_logger.setLevel(log_level)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(levelname)-8s [%(name)s.%(funcName)s:%(lineno)d] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    log_file = os.environ.get("THERMOPRINT_LOG_FILE")
    if log_file:
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_path,
                maxBytes=10 * 1024 * 1024,  # 10 MB
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
        except OSError as e:
            package_logger.warning(
                "Could not open log file %s: %s. Logging to console only.", log_file, e
            )

    package_logger.propagate = False


def get_logger(module_name: str) -> logging.Logger:
    """
    Return a logger inside the "thermoprint" namespace.

    Example:
        >>> get_logger("pos.checkout").name
        'thermoprint.pos.checkout'
    """
    if module_name == _PACKAGE_LOGGER or module_name.startswith(_PACKAGE_LOGGER + "."):
        return logging.getLogger(module_name)
    if module_name == "__main__":
        return logging.getLogger(f"{_PACKAGE_LOGGER}.main")
    return logging.getLogger(f"{_PACKAGE_LOGGER}.{module_name.lstrip('.')}")


# =============================================================================
# CONFIGURATION
# =============================================================================

CONFIG_FILENAME = "thermoprint.json"

_DEFAULT_CONFIG: Dict[str, Any] = {
    "default_width": "80mm",
    "default_currency": "FCFA",
    "default_language": "fr",
    "dither_method": "floyd_steinberg",
    "log_level": "INFO",
}


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings from thermoprint.json, falling back to defaults.

    Keys:
        - default_width: str - "58mm", "80mm" or "a4"
        - default_currency: str - symbol appended to amounts
        - default_language: str - label language code
        - dither_method: str - "threshold" or "floyd_steinberg"
        - log_level: str - informational; the active level comes from
          THERMOPRINT_LOG_LEVEL at import time

    Args:
        config_path: File to read. Defaults to ./thermoprint.json.

    Returns:
        The defaults overlaid with the file's keys. A missing, unreadable or
        malformed file is logged and the defaults are returned; this function
        never raises.

    Example:
        >>> config = load_config()
        >>> builder = ReceiptBuilder.from_config(config)
    """
    logger = get_logger(__name__)

    if config_path is None:
        config_path = Path(CONFIG_FILENAME)

    config = _DEFAULT_CONFIG.copy()

    if not config_path.exists():
        logger.info("Config file %s not found, using defaults", config_path)
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            user_config = json.load(f)
        if not isinstance(user_config, dict):
            raise ValueError(
                f"config file must contain a JSON object, got {type(user_config).__name__}"
            )
        config.update(user_config)
        logger.info("Config loaded from %s", config_path)
        logger.debug("Config: %s", config)
    except json.JSONDecodeError as e:
        logger.warning(
            "Could not parse %s: invalid JSON at line %d, column %d. Using defaults.",
            config_path,
            e.lineno,
            e.colno,
        )
    except OSError as e:
        logger.warning("Could not read %s: %s. Using defaults.", config_path, e)
    except ValueError as e:
        logger.warning("Invalid config format: %s. Using defaults.", e)

    return config


_setup_logging()

# =============================================================================
# PUBLIC API
# =============================================================================

from thermoprint.builder import ReceiptBuilder  # noqa: E402
from thermoprint.errors import (  # noqa: E402
    BuilderConsumedError,
    InvalidBarcodeError,
    InvalidDecimalError,
    LogoLoadError,
    RasterInputError,
    TemplateDecimalError,
    TemplateError,
    TemplateParseError,
    ThermoprintError,
    UnknownAlignError,
    UnknownLanguageError,
    UnknownWidthError,
)
from thermoprint.i18n import Language, ReceiptLabels  # noqa: E402
from thermoprint.imaging import (  # noqa: E402
    RasterImage,
    dither_rgba,
    floyd_steinberg_rgba,
    rasterize_rgba,
    threshold_rgba,
)
from thermoprint.model import Align, DitheringAlgorithm, PrintWidth, TaxEntry  # noqa: E402
from thermoprint.money import format_money, parse_decimal  # noqa: E402
from thermoprint.template import ReceiptTemplate, render_json  # noqa: E402

__all__ = [
    # Metadata
    "__version__",
    # Logging and config
    "get_logger",
    "load_config",
    # Builder
    "ReceiptBuilder",
    "PrintWidth",
    "Align",
    "TaxEntry",
    "Language",
    "ReceiptLabels",
    "parse_decimal",
    "format_money",
    # Raster
    "DitheringAlgorithm",
    "RasterImage",
    "dither_rgba",
    "threshold_rgba",
    "floyd_steinberg_rgba",
    "rasterize_rgba",
    # Templates
    "ReceiptTemplate",
    "render_json",
    # Errors
    "ThermoprintError",
    "InvalidBarcodeError",
    "InvalidDecimalError",
    "LogoLoadError",
    "BuilderConsumedError",
    "RasterInputError",
    "TemplateError",
    "TemplateParseError",
    "TemplateDecimalError",
    "UnknownWidthError",
    "UnknownLanguageError",
    "UnknownAlignError",
]

get_logger(__name__).debug("thermoprint v%s initialized", __version__)
