"""Tests for diagnostic codes, templates, rendering and exceptions."""

import pytest

from currencytext import CurrencyTextError, CurrencyTypeError, format_currency
from currencytext.diagnostics import Diagnostic, DiagnosticCode, ErrorTemplate


class TestDiagnosticCodes:
    """Code numbering."""

    def test_codes_unique(self) -> None:
        """Every code has its own number."""
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    def test_ranges(self) -> None:
        """Value errors are 1xxx, option errors 2xxx."""
        assert DiagnosticCode.VALUE_TYPE_INVALID.value // 1000 == 1
        assert DiagnosticCode.VALUE_NOT_FINITE.value // 1000 == 1
        assert DiagnosticCode.OPTION_UNKNOWN.value // 1000 == 2
        assert DiagnosticCode.NEGATIVE_CUSTOM_INVALID.value // 1000 == 2


class TestErrorTemplates:
    """Template messages and metadata."""

    def test_value_type_invalid(self) -> None:
        """Received type is named."""
        diagnostic = ErrorTemplate.value_type_invalid([1])
        assert diagnostic.code is DiagnosticCode.VALUE_TYPE_INVALID
        assert diagnostic.received_type == "list"
        assert diagnostic.function_name == "format_currency"
        assert "list" in diagnostic.message

    def test_value_not_finite(self) -> None:
        """The offending value is shown."""
        diagnostic = ErrorTemplate.value_not_finite(float("inf"))
        assert diagnostic.code is DiagnosticCode.VALUE_NOT_FINITE
        assert "inf" in diagnostic.message

    def test_option_unknown(self) -> None:
        """The unknown key is quoted."""
        diagnostic = ErrorTemplate.option_unknown("scale")
        assert diagnostic.message == "Unknown format option 'scale'"
        assert diagnostic.argument_name == "scale"
        assert diagnostic.hint is not None

    def test_option_type_invalid(self) -> None:
        """Expected and received types are both recorded."""
        diagnostic = ErrorTemplate.option_type_invalid("decimal", "bool", "yes")
        assert diagnostic.message == "Option 'decimal' must be bool, got str"
        assert diagnostic.expected_type == "bool"
        assert diagnostic.received_type == "str"

    def test_option_value_invalid(self) -> None:
        """The rejected value is shown with repr()."""
        diagnostic = ErrorTemplate.option_value_invalid("rounded_decimal", "up", "'round'")
        assert diagnostic.message == "Option 'rounded_decimal' must be 'round', got 'up'"

    def test_str_is_message(self) -> None:
        """str(Diagnostic) is the bare message."""
        diagnostic = ErrorTemplate.option_unknown("scale")
        assert str(diagnostic) == diagnostic.message


class TestFormatError:
    """Rust-style rendering used as the exception text."""

    def test_all_fields(self) -> None:
        """Every populated field gets its own line, in a fixed order."""
        diagnostic = ErrorTemplate.negative_custom_invalid(5)
        assert diagnostic.format_error().splitlines() == [
            "error[NEGATIVE_CUSTOM_INVALID]: negative_format.custom must return str, got int",
            "  = function: format_currency",
            "  = argument: negative_format.custom",
            "  = expected: str",
            "  = received: int",
            "  = help: The callable receives the unsigned text and returns the final text",
        ]

    def test_without_hint(self) -> None:
        """Missing fields are left out."""
        diagnostic = ErrorTemplate.option_type_invalid("decimal", "bool", "yes")
        lines = diagnostic.format_error().splitlines()
        assert lines[0] == "error[OPTION_TYPE_INVALID]: Option 'decimal' must be bool, got str"
        assert not any(line.startswith("  = help:") for line in lines)

    def test_message_only(self) -> None:
        """A bare diagnostic renders as a single header line."""
        diagnostic = Diagnostic(DiagnosticCode.OPTION_UNKNOWN, "msg")
        assert diagnostic.format_error() == "error[OPTION_UNKNOWN]: msg"


class TestExceptions:
    """Exception hierarchy and diagnostic attachment."""

    def test_hierarchy(self) -> None:
        """CurrencyTypeError is both a CurrencyTextError and a TypeError."""
        assert issubclass(CurrencyTypeError, CurrencyTextError)
        assert issubclass(CurrencyTypeError, TypeError)

    def test_plain_message(self) -> None:
        """A str message carries no diagnostic."""
        error = CurrencyTextError("boom")
        assert error.diagnostic is None
        assert str(error) == "boom"

    def test_diagnostic_message(self) -> None:
        """A Diagnostic renders in Rust style as the exception text."""
        diagnostic = ErrorTemplate.option_unknown("scale")
        error = CurrencyTypeError(diagnostic)
        assert error.diagnostic is diagnostic
        assert str(error).startswith("error[OPTION_UNKNOWN]: Unknown format option 'scale'")

    def test_raised_from_format_currency(self) -> None:
        """format_currency() errors carry the matching diagnostic."""
        with pytest.raises(CurrencyTypeError, match=r"error\[OPTION_UNKNOWN\]") as exc_info:
            format_currency(1, {"scale": 2})
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.argument_name == "scale"
