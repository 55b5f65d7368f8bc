"""Predicates for parsed amounts and currency text.

Provides a TypeIs-based guard so mypy can narrow values that come from
parse_currency_string() or from caller code mixing parsed and raw input,
plus a plain predicate for validating user input before parsing.

Python 3.13+ with TypeIs support (PEP 742).

Example:
    >>> from currencytext.parsing import parse_currency_string, is_valid_amount
    >>> amount = parse_currency_string("Rp 15.000,21")
    >>> if is_valid_amount(amount):
    ...     total = amount * 1.11
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import TypeIs

from .currency import parse_currency_string

__all__ = ["is_currency_like", "is_valid_amount"]


def is_valid_amount(value: object) -> TypeIs[float]:
    """Type guard: Check that value is a finite float.

    parse_currency_string() always satisfies this guard. Returns False for
    None, bool, int, NaN and infinity.

    Args:
        value: Any value

    Returns:
        True if value is a finite float, False otherwise
    """
    return isinstance(value, float) and math.isfinite(value)


def is_currency_like(value: object) -> bool:
    """Check whether a value reads as a currency amount.

    Text counts when parse_currency_string() gets a non-zero amount out of
    it, or when it is literally "0" (the parser's fallback is also zero, so
    other zero spellings such as "0,00" or "Rp 0" do not count). Finite
    numbers always count.

    Args:
        value: Any value; bool and non-str / non-number values are rejected

    Returns:
        True if value looks like an amount, False otherwise

    Examples:
        >>> is_currency_like("Rp 15.000,10")
        True
        >>> is_currency_like("(15'000.10)")
        True
        >>> is_currency_like("0")
        True
        >>> is_currency_like("abc")
        False
        >>> is_currency_like(15300.95)
        True
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return math.isfinite(value)
    if not isinstance(value, str):
        return False
    return parse_currency_string(value) != 0.0 or value.strip() == "0"
