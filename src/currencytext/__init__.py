"""currencytext - Parse and format messy currency text.

Turns human-entered or display currency strings into floats without being
told the locale, and renders floats back into locale-shaped strings with
configurable separators, rounding, prefix and sign presentation.

Public API:
    parse_currency_string - Currency text -> float (0.0 when unreadable)
    format_currency - Number or currency text -> display string
    extract_digits - Every digit of a value read as an int
    classify_separators - Canonical form of a cleaned digit string
    FormatOptions - Options for format_currency
    NegativeFormat, NegativeStyle, RoundingMode - Option value types

Exceptions:
    CurrencyTextError - Base exception class
    CurrencyTypeError - Caller contract violation (also a TypeError)

Submodules:
    currencytext.parsing - Parser, separator classifier, type guards
    currencytext.formatting - Formatter and option resolution
    currencytext.diagnostics - Diagnostic codes, templates and formatting
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import CurrencyTextError, CurrencyTypeError
from .formatting import (
    FormatOptions,
    NegativeFormat,
    NegativeStyle,
    RoundingMode,
    format_currency,
)
from .parsing import classify_separators, extract_digits, parse_currency_string

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("currencytext")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CurrencyTextError",
    "CurrencyTypeError",
    "FormatOptions",
    "NegativeFormat",
    "NegativeStyle",
    "RoundingMode",
    "__version__",
    "classify_separators",
    "extract_digits",
    "format_currency",
    "parse_currency_string",
]
