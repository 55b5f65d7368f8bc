"""Currency formatting with configurable separators.

API: format_currency() returns str. Accepts numbers or currency text in any
shape parse_currency_string() understands, so already-formatted strings
can be re-rendered in another style.

Pipeline:
    value -> float (parsing str input) -> rounded Decimal magnitude
          -> grouped integer digits -> fraction -> prefix -> sign

Rounding runs in Decimal built from the float's shortest repr, so values
such as 1.005 round the way they read. Digit grouping is rendered by
Babel number patterns ("#,##0" or "#,##,##0") with neutral symbols, after
which the group mark is swapped for the configured separator.

Thread-safe. Uses Babel for digit grouping (no global locale state).

Python 3.13+.
"""

import logging
import math
from collections.abc import Mapping
from decimal import ROUND_CEILING, ROUND_DOWN, ROUND_FLOOR, ROUND_HALF_UP, Decimal, localcontext

from babel.numbers import format_decimal

from currencytext.constants import (
    GROUPING_PATTERN_INDIAN,
    GROUPING_PATTERN_STANDARD,
    NEUTRAL_GROUP_SYMBOL,
    NEUTRAL_LOCALE,
)
from currencytext.diagnostics import CurrencyTypeError, ErrorTemplate
from currencytext.parsing import parse_currency_string

from .options import FormatOptions, NegativeFormat, NegativeStyle, RoundingMode, resolve_options

__all__ = ["format_currency"]

logger = logging.getLogger(__name__)

_DECIMAL_ROUNDING: dict[RoundingMode, str] = {
    RoundingMode.ROUND: ROUND_HALF_UP,
    RoundingMode.CEIL: ROUND_CEILING,
    RoundingMode.FLOOR: ROUND_FLOOR,
    RoundingMode.TRUNCATE: ROUND_DOWN,
}

# Digits of headroom above the value's own width for Decimal contexts.
_PRECISION_HEADROOM = 2


def _coerce_amount(value: object) -> int | float:
    """Turn format_currency input into a finite number."""
    if isinstance(value, str):
        return parse_currency_string(value)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise CurrencyTypeError(ErrorTemplate.value_type_invalid(value))
    if isinstance(value, float) and not math.isfinite(value):
        raise CurrencyTypeError(ErrorTemplate.value_not_finite(value))
    return value


def _round_magnitude(magnitude: int | float, places: int, mode: RoundingMode) -> Decimal:
    """Round a non-negative number to a fixed number of fractional digits."""
    # repr() is the shortest string that round-trips the float
    exact = Decimal(magnitude) if isinstance(magnitude, int) else Decimal(repr(magnitude))
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + places + _PRECISION_HEADROOM)
        return exact.quantize(quantum, rounding=_DECIMAL_ROUNDING[mode])


def _split_digits(rounded: Decimal, places: int) -> tuple[str, str]:
    """Split a quantized Decimal into integer and fraction digit strings."""
    whole, _, fraction = f"{rounded:f}".partition(".")
    return whole, fraction.ljust(places, "0")[:places]


def _group_integer(whole: str, separator: str, indian_format: bool) -> str:
    """Insert thousands separators into a string of integer digits.

    Examples:
        >>> _group_integer("1234567", ".", False)
        '1.234.567'
        >>> _group_integer("1234567", ",", True)
        '12,34,567'
    """
    pattern = GROUPING_PATTERN_INDIAN if indian_format else GROUPING_PATTERN_STANDARD
    # Babel normalizes and quantizes in the active context; keep every digit
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(whole) + _PRECISION_HEADROOM)
        grouped = format_decimal(Decimal(whole), format=pattern, locale=NEUTRAL_LOCALE)
    return grouped.replace(NEUTRAL_GROUP_SYMBOL, separator)


def _apply_negative(text: str, negative: NegativeFormat) -> str:
    if negative.custom is not None:
        result = negative.custom(text)
        if not isinstance(result, str):
            raise CurrencyTypeError(ErrorTemplate.negative_custom_invalid(result))
        return result

    match negative.style:
        case NegativeStyle.DASH:
            return ("- " if negative.space else "-") + text
        case NegativeStyle.BRACKETS:
            return f"( {text} )" if negative.space else f"({text})"
        case NegativeStyle.ABS:
            return text


def format_currency(
    value: str | int | float,
    options: FormatOptions | Mapping[str, object] | None = None,
) -> str:
    """Format a number or currency text as a display string.

    Args:
        value: Number, or currency text parsed with parse_currency_string()
            (text without digits formats as zero)
        options: FormatOptions, a mapping with snake_case or camelCase keys,
            or None for defaults ("." grouping, no fraction, dash negatives)

    Returns:
        Formatted string. Non-negative values never carry a sign marker.

    Raises:
        CurrencyTypeError: If value is not str / int / float, is NaN or
            infinite, or options are malformed

    Examples:
        >>> format_currency(1234567.89, {"decimal": True})
        '1.234.567,89'
        >>> format_currency(1234567.89, {"decimal": True, "indianFormat": True})
        '12,34,567.89'
        >>> format_currency(-1234.56, {"decimal": True, "negativeFormat": "brackets"})
        '(1.234,56)'
        >>> format_currency("$12,345.60", FormatOptions(decimal=True, suffix_currency="Rp "))
        'Rp 12.345,60'
        >>> format_currency(
        ...     "1.121.234,00",
        ...     {"decimal": True, "totalDecimal": 0, "suffixCurrency": "Rp ",
        ...      "roundedDecimal": "ceil"},
        ... )
        'Rp 1.121.234'

    Thread Safety:
        Thread-safe. Decimal contexts are thread-local; Babel keeps no
        mutable global state.
    """
    amount = _coerce_amount(value)
    fmt = resolve_options(options)

    rounded = _round_magnitude(abs(amount), fmt.total_decimal, fmt.rounding)
    whole, fraction = _split_digits(rounded, fmt.total_decimal)

    text = _group_integer(whole, fmt.separator, fmt.indian_format)
    if fmt.show_fraction:
        text += fmt.separator_decimals + fraction
        if fmt.end_decimal:
            text += fmt.suffix_decimal

    # Blank prefixes such as " " are dropped
    if fmt.suffix_currency.strip():
        text = fmt.suffix_currency + text

    if amount < 0:
        text = _apply_negative(text, fmt.negative)

    logger.debug("Formatted %r as %r", value, text)
    return text
