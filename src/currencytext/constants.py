"""Shared constants for currencytext.

This module provides centralized configuration constants used by the
parsing and formatting packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Format defaults: Values used when FormatOptions leaves a field unset
- Separator defaults: Standard and Indian separator pairs
- Grouping patterns: Babel number patterns used for digit grouping

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Format defaults
    "DEFAULT_TOTAL_DECIMAL",
    "MAX_TOTAL_DECIMAL",
    # Separator defaults
    "STANDARD_SEPARATORS",
    "INDIAN_SEPARATORS",
    # Grouping patterns
    "GROUPING_PATTERN_STANDARD",
    "GROUPING_PATTERN_INDIAN",
    "NEUTRAL_LOCALE",
    "NEUTRAL_GROUP_SYMBOL",
]

# ============================================================================
# FORMAT DEFAULTS
# ============================================================================

# Fractional digits rendered when total_decimal is not given.
DEFAULT_TOTAL_DECIMAL: int = 2

# Upper bound for total_decimal.
# A float carries at most 17 significant digits; anything past this only
# pads zeros. 100 keeps Decimal contexts small while never rejecting a
# realistic request.
MAX_TOTAL_DECIMAL: int = 100

# ============================================================================
# SEPARATOR DEFAULTS
# ============================================================================

# (thousands separator, decimal separator)
STANDARD_SEPARATORS: tuple[str, str] = (".", ",")
INDIAN_SEPARATORS: tuple[str, str] = (",", ".")

# ============================================================================
# GROUPING PATTERNS
# ============================================================================

# CLDR number patterns. Babel derives grouping sizes from comma positions:
# "#,##0" -> (3, 3), "#,##,##0" -> (3, 2).
GROUPING_PATTERN_STANDARD: str = "#,##0"
GROUPING_PATTERN_INDIAN: str = "#,##,##0"

# Locale whose symbols Babel uses while grouping. Only its group mark is
# read, and it is replaced by the configured separator afterwards.
NEUTRAL_LOCALE: str = "en"
NEUTRAL_GROUP_SYMBOL: str = ","
