"""Currency text parsing: display or user-entered strings -> float.

- Functions NEVER raise exceptions for str / None input
- Unreadable text becomes 0.0 (never NaN or infinity)

This module provides the inverse operation to currencytext.formatting:
- Formatting: float -> display string
- Parsing: display string -> float

Public API:
    Parsing Functions:
        parse_currency_string - Returns float (0.0 when unreadable)
        extract_digits - Returns int built from every digit in the text
        classify_separators - Canonical form of a cleaned digit string
        classify - Canonical form plus the separator rule that fired

    Type Guards:
        is_valid_amount - TypeIs guard for finite float
        is_currency_like - Whether text or a number reads as an amount

Example:
    >>> from currencytext.parsing import parse_currency_string
    >>> parse_currency_string("1.234,56")
    1234.56
    >>> parse_currency_string("1,234.56")
    1234.56

Python 3.13+. Zero external dependencies.
"""

from .currency import extract_digits, parse_currency_string
from .guards import is_currency_like, is_valid_amount
from .separators import Classification, SeparatorRule, classify, classify_separators

__all__ = [
    "Classification",
    "SeparatorRule",
    "classify",
    "classify_separators",
    "extract_digits",
    "is_currency_like",
    "is_valid_amount",
    "parse_currency_string",
]
