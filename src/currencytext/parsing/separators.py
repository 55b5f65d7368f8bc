"""Separator classification for cleaned currency digit strings.

Decides which punctuation mark in a digit string is the decimal separator
and which marks are thousands groupings. Input is a CleanedDigitString:
ASCII digits plus '.' and ',' only (sign, brackets, apostrophes and spaces
already removed by the caller).

Rules are tried in a fixed order and the first one that applies wins:

    1. INDIAN_GROUPING  two or more ",dd" groups ("12,34,567.89")
                        -> every comma is grouping
    2. DOT_GROUPING     several dots, no comma ("1.121.234")
                        -> every dot is grouping
    3. COMMA_GROUPING   several commas, no dot ("1,121,234")
                        -> every comma is grouping
    4. LAST_SEPARATOR   the later of last ',' / last '.' is the decimal mark
                        ("1.234,56", "1,234.56", "1,234" -> 1.234)
    5. PLAIN_INTEGER    no separator at all

Output is canonical: digits with at most one '.' as decimal point, except
for the remainder left by INDIAN_GROUPING when the input held more than
one dot (callers read the leading float literal).

Thread-safe. Pure functions, no shared state.

Python 3.13+. Zero external dependencies.
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

__all__ = [
    "Classification",
    "SeparatorRule",
    "classify",
    "classify_separators",
]

logger = logging.getLogger(__name__)

# Non-overlapping comma + two digits. ASCII digits only: str patterns would
# otherwise accept any Unicode Nd character for \d.
_INDIAN_GROUP_RE = re.compile(r",[0-9]{2}")
_DIGIT_RE = re.compile(r"[0-9]")

# Two ",dd" groups are needed; one could just as well be a decimal comma.
_INDIAN_GROUP_MIN_MATCHES = 2


class SeparatorRule(StrEnum):
    """Classification rule that produced a canonical digit string."""

    NO_DIGITS = "no_digits"
    INDIAN_GROUPING = "indian_grouping"
    DOT_GROUPING = "dot_grouping"
    COMMA_GROUPING = "comma_grouping"
    LAST_SEPARATOR = "last_separator"
    PLAIN_INTEGER = "plain_integer"


@dataclass(frozen=True, slots=True)
class Classification:
    """Result of separator classification.

    Attributes:
        rule: Rule that matched
        canonical: Digit string with '.' as the only decimal mark
    """

    rule: SeparatorRule
    canonical: str


def _indian_grouping(text: str) -> str | None:
    if len(_INDIAN_GROUP_RE.findall(text)) < _INDIAN_GROUP_MIN_MATCHES:
        return None
    return text.replace(",", "")


def _dot_grouping(text: str) -> str | None:
    if text.count(".") > 1 and "," not in text:
        return text.replace(".", "")
    return None


def _comma_grouping(text: str) -> str | None:
    if text.count(",") > 1 and "." not in text:
        return text.replace(",", "")
    return None


def _last_separator(text: str) -> str | None:
    decimal_at = max(text.rfind(","), text.rfind("."))
    if decimal_at == -1:
        return None
    head = text[:decimal_at].replace(",", "").replace(".", "")
    return f"{head}.{text[decimal_at + 1:]}"


# Precedence order matters: see module docstring.
# PLAIN_INTEGER is the fallthrough once every rule has declined.
_RULES: tuple[tuple[SeparatorRule, Callable[[str], str | None]], ...] = (
    (SeparatorRule.INDIAN_GROUPING, _indian_grouping),
    (SeparatorRule.DOT_GROUPING, _dot_grouping),
    (SeparatorRule.COMMA_GROUPING, _comma_grouping),
    (SeparatorRule.LAST_SEPARATOR, _last_separator),
)


def classify(cleaned: str) -> Classification:
    """Classify separators in a cleaned digit string.

    Args:
        cleaned: Digits, '.' and ',' only

    Returns:
        Classification naming the matched rule and the canonical string.
        Strings without any digit yield rule NO_DIGITS and an empty string.

    Examples:
        >>> classify("1.234,56")
        Classification(rule=<SeparatorRule.LAST_SEPARATOR: 'last_separator'>, canonical='1234.56')
        >>> classify("12,34,567.89").canonical
        '1234567.89'
        >>> classify("1.121.234").rule
        <SeparatorRule.DOT_GROUPING: 'dot_grouping'>
    """
    if not _DIGIT_RE.search(cleaned):
        return Classification(SeparatorRule.NO_DIGITS, "")

    for rule, apply_rule in _RULES:
        canonical = apply_rule(cleaned)
        if canonical is not None:
            logger.debug("Separator rule %s: %r -> %r", rule, cleaned, canonical)
            return Classification(rule, canonical)

    return Classification(SeparatorRule.PLAIN_INTEGER, cleaned)


def classify_separators(cleaned: str) -> str:
    """Return the canonical form of a cleaned digit string.

    Convenience wrapper around classify() for callers that only need the
    normalized text. Never raises for str input.

    Examples:
        >>> classify_separators("1,234.56")
        '1234.56'
        >>> classify_separators("15300000,2121")
        '15300000.2121'
        >>> classify_separators("")
        ''
    """
    return classify(cleaned).canonical
