"""Currency formatting: numbers or currency text -> display string.

Public API:
    format_currency - Render a value with grouping, rounding, prefix and sign
    FormatOptions - Caller-facing option record
    NegativeFormat - Normalized negative presentation
    NegativeStyle - DASH / BRACKETS / ABS
    RoundingMode - ROUND / CEIL / FLOOR / TRUNCATE
    resolve_options - Validate options and apply defaults

Python 3.13+. Uses Babel for digit grouping.
"""

from .currency import format_currency
from .options import (
    FormatOptions,
    NegativeFormat,
    NegativeStyle,
    ResolvedFormat,
    RoundingMode,
    resolve_options,
)

__all__ = [
    "FormatOptions",
    "NegativeFormat",
    "NegativeStyle",
    "ResolvedFormat",
    "RoundingMode",
    "format_currency",
    "resolve_options",
]
