"""Format options and their resolution.

FormatOptions is what callers write; ResolvedFormat is what the formatter
reads. resolve_options() is the only bridge between the two and the only
place option values are validated.

Resolution runs in two explicit stages:
    1. Locale defaults: indian_format picks the default separator pair
       (standard "." / ",", Indian "," / ".")
    2. Explicit overrides: separator / separator_decimals replace those
       defaults whenever they are set, whatever indian_format says

negative_format accepts a style name, a NegativeFormat or a mapping; all
three collapse into one NegativeFormat carrying a NegativeStyle enum, so
rendering only ever switches on that enum.

Options may be given as FormatOptions or as a plain mapping. Mapping keys
may be snake_case (total_decimal) or camelCase (totalDecimal).

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields
from enum import StrEnum

from currencytext.constants import (
    DEFAULT_TOTAL_DECIMAL,
    INDIAN_SEPARATORS,
    MAX_TOTAL_DECIMAL,
    STANDARD_SEPARATORS,
)
from currencytext.diagnostics import CurrencyTypeError, ErrorTemplate

__all__ = [
    "FormatOptions",
    "NegativeFormat",
    "NegativeStyle",
    "ResolvedFormat",
    "RoundingMode",
    "resolve_options",
]

logger = logging.getLogger(__name__)


class RoundingMode(StrEnum):
    """Rounding applied at total_decimal precision.

    Modes act on the absolute value, so CEIL grows the magnitude and FLOOR
    shrinks it for negative amounts too.
    """

    ROUND = "round"  # Nearest, half up
    CEIL = "ceil"
    FLOOR = "floor"
    TRUNCATE = "truncate"  # Cut extra digits


class NegativeStyle(StrEnum):
    """Sign presentation for negative amounts."""

    DASH = "dash"  # -1.234
    BRACKETS = "brackets"  # (1.234)
    ABS = "abs"  # 1.234


@dataclass(frozen=True, slots=True)
class NegativeFormat:
    """Normalized negative presentation.

    Attributes:
        style: Sign presentation
        space: Pad the sign ("- 1.234", "( 1.234 )")
        custom: Callable receiving the unsigned text and returning the final
            text; when set, style and space are ignored
    """

    style: NegativeStyle = NegativeStyle.DASH
    space: bool = False
    custom: Callable[[str], str] | None = None


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Caller-facing format options.

    Unset separators (None) fall back to the defaults picked by
    indian_format; see resolve_options().

    Attributes:
        decimal: Render the fractional part
        total_decimal: Fractional digits; 0 never renders a fraction
        rounded_decimal: Rounding mode at total_decimal precision; False
            means TRUNCATE
        separator: Thousands separator
        separator_decimals: Decimal separator
        indian_format: Group 3 then 2 digits (12,34,567)
        negative_format: Style name, NegativeFormat or mapping with
            style / space / custom keys
        suffix_currency: Text placed before the number, inside the sign
        suffix_decimal: Text placed after the fraction
        end_decimal: Whether suffix_decimal is appended
    """

    decimal: bool = False
    total_decimal: int = DEFAULT_TOTAL_DECIMAL
    rounded_decimal: RoundingMode | str | bool = RoundingMode.ROUND
    separator: str | None = None
    separator_decimals: str | None = None
    indian_format: bool = False
    negative_format: NegativeFormat | NegativeStyle | str | Mapping[str, object] = (
        NegativeStyle.DASH
    )
    suffix_currency: str = ""
    suffix_decimal: str = ""
    end_decimal: bool = True

    @classmethod
    def from_mapping(cls, values: Mapping[str, object]) -> "FormatOptions":
        """Build options from a mapping with snake_case or camelCase keys.

        Raises:
            CurrencyTypeError: On an unknown key

        Examples:
            >>> FormatOptions.from_mapping({"decimal": True, "totalDecimal": 0}).total_decimal
            0
        """
        kwargs: dict[str, object] = {}
        for key, value in values.items():
            name = _OPTION_NAMES.get(key) if isinstance(key, str) else None
            if name is None:
                raise CurrencyTypeError(ErrorTemplate.option_unknown(str(key)))
            kwargs[name] = value
        return cls(**kwargs)  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class ResolvedFormat:
    """Validated options with every default applied."""

    decimal: bool
    total_decimal: int
    rounding: RoundingMode
    separator: str
    separator_decimals: str
    indian_format: bool
    negative: NegativeFormat
    suffix_currency: str
    suffix_decimal: str
    end_decimal: bool

    @property
    def show_fraction(self) -> bool:
        """True when a decimal separator and fraction are rendered."""
        return self.decimal and self.total_decimal > 0


def _to_camel_case(snake_case: str) -> str:
    """Convert snake_case option name to camelCase.

    Examples:
        >>> _to_camel_case("separator_decimals")
        'separatorDecimals'
        >>> _to_camel_case("decimal")
        'decimal'
    """
    components = snake_case.split("_")
    return components[0] + "".join(comp.capitalize() for comp in components[1:])


# Accepted mapping key -> FormatOptions field
_OPTION_NAMES: dict[str, str] = {}
for _field in fields(FormatOptions):
    _OPTION_NAMES[_field.name] = _field.name
    _OPTION_NAMES[_to_camel_case(_field.name)] = _field.name
del _field

_NEGATIVE_FORMAT_KEYS: frozenset[str] = frozenset({"style", "space", "custom"})


def _require_bool(name: str, value: object) -> bool:
    if not isinstance(value, bool):
        raise CurrencyTypeError(ErrorTemplate.option_type_invalid(name, "bool", value))
    return value


def _require_str(name: str, value: object) -> str:
    if not isinstance(value, str):
        raise CurrencyTypeError(ErrorTemplate.option_type_invalid(name, "str", value))
    return value


def _resolve_total_decimal(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise CurrencyTypeError(
            ErrorTemplate.option_type_invalid("total_decimal", "int", value)
        )
    if not 0 <= value <= MAX_TOTAL_DECIMAL:
        raise CurrencyTypeError(
            ErrorTemplate.option_value_invalid(
                "total_decimal", value, f"between 0 and {MAX_TOTAL_DECIMAL}"
            )
        )
    return value


def _resolve_rounding(value: object) -> RoundingMode:
    # False means "do not round"
    if value is False:
        return RoundingMode.TRUNCATE
    if isinstance(value, str):
        try:
            return RoundingMode(value)
        except ValueError:
            pass
    allowed = ", ".join(repr(mode.value) for mode in RoundingMode) + " or False"
    raise CurrencyTypeError(
        ErrorTemplate.option_value_invalid("rounded_decimal", value, allowed)
    )


def _resolve_style(name: str, value: object) -> NegativeStyle:
    if isinstance(value, str):
        try:
            return NegativeStyle(value)
        except ValueError:
            pass
    allowed = ", ".join(repr(style.value) for style in NegativeStyle)
    raise CurrencyTypeError(ErrorTemplate.option_value_invalid(name, value, allowed))


def _resolve_negative(value: object) -> NegativeFormat:
    """Collapse every negative_format spelling into one NegativeFormat."""
    if isinstance(value, NegativeFormat):
        style: object = value.style
        space: object = value.space
        custom: object = value.custom
    elif isinstance(value, str):
        return NegativeFormat(style=_resolve_style("negative_format", value))
    elif isinstance(value, Mapping):
        for key in value:
            if key not in _NEGATIVE_FORMAT_KEYS:
                raise CurrencyTypeError(
                    ErrorTemplate.option_unknown(f"negative_format.{key}")
                )
        style = value.get("style", NegativeStyle.DASH)
        space = value.get("space", False)
        custom = value.get("custom")
    else:
        raise CurrencyTypeError(
            ErrorTemplate.option_type_invalid(
                "negative_format", "str, NegativeFormat or mapping", value
            )
        )

    if custom is not None and not callable(custom):
        raise CurrencyTypeError(
            ErrorTemplate.option_type_invalid("negative_format.custom", "callable", custom)
        )
    return NegativeFormat(
        style=_resolve_style("negative_format.style", style),
        space=_require_bool("negative_format.space", space),
        custom=custom,  # type: ignore[arg-type]
    )


def _resolve_separators(
    indian_format: bool, separator: object, separator_decimals: object
) -> tuple[str, str]:
    # Stage 1: locale defaults
    default_group, default_decimal = INDIAN_SEPARATORS if indian_format else STANDARD_SEPARATORS
    # Stage 2: explicit overrides
    group = default_group if separator is None else _require_str("separator", separator)
    decimal = (
        default_decimal
        if separator_decimals is None
        else _require_str("separator_decimals", separator_decimals)
    )
    return group, decimal


def resolve_options(options: FormatOptions | Mapping[str, object] | None = None) -> ResolvedFormat:
    """Validate options and apply defaults.

    Args:
        options: FormatOptions, a mapping of option values, or None for all
            defaults

    Returns:
        ResolvedFormat ready for rendering

    Raises:
        CurrencyTypeError: If options or any option value is malformed

    Examples:
        >>> resolve_options({"indianFormat": True}).separator
        ','
        >>> resolve_options({"indianFormat": True, "separator": "'"}).separator
        "'"
        >>> resolve_options({"negativeFormat": {"style": "brackets"}}).negative.style
        <NegativeStyle.BRACKETS: 'brackets'>
    """
    if options is None:
        options = FormatOptions()
    elif isinstance(options, Mapping):
        options = FormatOptions.from_mapping(options)
    elif not isinstance(options, FormatOptions):
        raise CurrencyTypeError(ErrorTemplate.options_type_invalid(options))

    indian_format = _require_bool("indian_format", options.indian_format)
    separator, separator_decimals = _resolve_separators(
        indian_format, options.separator, options.separator_decimals
    )

    resolved = ResolvedFormat(
        decimal=_require_bool("decimal", options.decimal),
        total_decimal=_resolve_total_decimal(options.total_decimal),
        rounding=_resolve_rounding(options.rounded_decimal),
        separator=separator,
        separator_decimals=separator_decimals,
        indian_format=indian_format,
        negative=_resolve_negative(options.negative_format),
        suffix_currency=_require_str("suffix_currency", options.suffix_currency),
        suffix_decimal=_require_str("suffix_decimal", options.suffix_decimal),
        end_decimal=_require_bool("end_decimal", options.end_decimal),
    )
    logger.debug("Resolved format options: %s", resolved)
    return resolved
