"""Currency text parsing without locale hints.

API: parse_currency_string() returns float. Never raises, never returns
NaN or infinity: text that cannot be read as an amount becomes 0.0.

Accepts human-entered or display text in any common shape:
    - "Rp 15.000,21"     Indonesian / continental European
    - "$12,345.60"       US
    - "CHF 12'345.60"    Swiss
    - "1 234,56"         French (plain or non-breaking spaces)
    - "12,34,567.89"     Indian
    - "(1.234,56)"       accounting negative

Currency symbols and codes are discarded; re-apply them when formatting.
The decimal mark is decided by the rules in currencytext.parsing.separators.

Thread-safe. Pure functions, no shared state.

Python 3.13+. Zero external dependencies.
"""

import logging
import math
import re
from decimal import Decimal

from .separators import classify

__all__ = ["extract_digits", "parse_currency_string"]

logger = logging.getLogger(__name__)

# Whitespace variants that survive as grouping marks in pasted amounts.
_NBSP_CHARS: tuple[str, ...] = ("\u00a0", "\u202f")

_BRACKETED_RE = re.compile(r"^\(.*\)$")
_LEADING_NOISE_RE = re.compile(r"^[-\s]+")
_TRAILING_NOISE_RE = re.compile(r"[\s.,-]+$")
_LEADING_SIGN_RE = re.compile(r"^[^0-9]*-")
_DISALLOWED_RE = re.compile(r"[^0-9.,'\s]")
_GROUPING_MARKS_RE = re.compile(r"[\s']")
_FLOAT_PREFIX_RE = re.compile(r"[0-9]*(?:\.[0-9]*)?")
_NON_DIGIT_RE = re.compile(r"[^0-9]")


def _collapse_leading_noise(match: re.Match[str]) -> str:
    return "-" if "-" in match.group() else ""


def _read_float_prefix(canonical: str) -> float:
    """Read the longest leading float literal; 0.0 when there is none."""
    literal = _FLOAT_PREFIX_RE.match(canonical)
    if literal is None or not any(ch.isdigit() for ch in literal.group()):
        return 0.0
    amount = float(literal.group())
    # Hundreds of digits overflow to inf
    return amount if math.isfinite(amount) else 0.0


def parse_currency_string(value: str | None) -> float:
    """Parse messy currency text into a float.

    Steps:
        1. Empty / whitespace-only / non-str input -> 0.0
        2. Drop non-breaking spaces
        3. "(...)" marks an accounting negative
        4. Trim sign and punctuation noise; any '-' before the first digit
           marks a negative
        5. Keep only digits, '.', ',', apostrophes and spaces
        6. Drop apostrophes and spaces (Swiss / French grouping)
        7. Classify separators (see currencytext.parsing.separators)
        8. Read the leading float literal
        9. Apply the sign

    Args:
        value: Currency text; None and non-str values read as 0.0

    Returns:
        Finite float. Negative zero is returned as 0.0.

    Examples:
        >>> parse_currency_string("Rp 15.000,21")
        15000.21
        >>> parse_currency_string("$1,234.56")
        1234.56
        >>> parse_currency_string("(1.234,56)")
        -1234.56
        >>> parse_currency_string("CHF 12'345.60")
        12345.6
        >>> parse_currency_string("12,34,567.89")
        1234567.89
        >>> parse_currency_string("abc")
        0.0

    Thread Safety:
        Thread-safe. No shared state.
    """
    if not isinstance(value, str) or not value.strip():
        return 0.0

    text = value.strip()
    for nbsp in _NBSP_CHARS:
        text = text.replace(nbsp, "")

    negative = False
    if _BRACKETED_RE.match(text):
        negative = True
        text = text[1:-1].strip()

    text = _LEADING_NOISE_RE.sub(_collapse_leading_noise, text)
    text = _TRAILING_NOISE_RE.sub("", text)
    negative = negative or bool(_LEADING_SIGN_RE.match(text))

    cleaned = _GROUPING_MARKS_RE.sub("", _DISALLOWED_RE.sub("", text))
    classification = classify(cleaned)
    amount = _read_float_prefix(classification.canonical)

    if amount == 0.0:
        if not classification.canonical:
            logger.debug("No digits in currency text %r, reading as 0", value)
        return 0.0
    return -amount if negative else amount


def extract_digits(value: str | int | float | None) -> int:
    """Concatenate every ASCII digit of a value into an int.

    Unlike parse_currency_string(), separators are not interpreted: all
    punctuation, signs and letters are simply dropped.

    Args:
        value: str or number; anything else (including bool) reads as 0.
            Floats are read in positional notation, never with an exponent

    Returns:
        Non-negative int, 0 when no digit is present

    Examples:
        >>> extract_digits("Rp 15.000,21")
        1500021
        >>> extract_digits("+62 812-3456")
        628123456
        >>> extract_digits(-12.5)
        125
        >>> extract_digits(1e16)
        10000000000000000
        >>> extract_digits(None)
        0
    """
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return 0

    # str() switches floats to exponent form ("1e+16"); repr via Decimal does not
    text = format(Decimal(repr(value)), "f") if isinstance(value, float) else str(value)
    digits = _NON_DIGIT_RE.sub("", text)
    return int(digits) if digits else 0
