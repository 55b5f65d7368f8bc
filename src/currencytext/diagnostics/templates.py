"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]

_FORMAT_CURRENCY = "format_currency"


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and documents every caller-contract violation
    format_currency() can report.
    """

    @staticmethod
    def value_type_invalid(received: object) -> Diagnostic:
        """Value passed to format_currency is neither str nor a real number.

        Args:
            received: The rejected value

        Returns:
            Diagnostic for VALUE_TYPE_INVALID
        """
        received_type = type(received).__name__
        msg = f"Value must be str, int or float, got {received_type}"
        return Diagnostic(
            code=DiagnosticCode.VALUE_TYPE_INVALID,
            message=msg,
            hint="Convert the value to a number or a currency string first",
            function_name=_FORMAT_CURRENCY,
            argument_name="value",
            expected_type="str | int | float",
            received_type=received_type,
        )

    @staticmethod
    def value_not_finite(value: float) -> Diagnostic:
        """Numeric value is NaN or infinite.

        Args:
            value: The rejected float

        Returns:
            Diagnostic for VALUE_NOT_FINITE
        """
        msg = f"Value must be a finite number, got {value!r}"
        return Diagnostic(
            code=DiagnosticCode.VALUE_NOT_FINITE,
            message=msg,
            hint="NaN and infinity have no currency representation",
            function_name=_FORMAT_CURRENCY,
            argument_name="value",
        )

    @staticmethod
    def options_type_invalid(received: object) -> Diagnostic:
        """Options argument is not FormatOptions, a mapping or None."""
        received_type = type(received).__name__
        msg = f"Options must be FormatOptions or a mapping, got {received_type}"
        return Diagnostic(
            code=DiagnosticCode.OPTIONS_TYPE_INVALID,
            message=msg,
            hint="Pass FormatOptions(...) or a dict such as {'decimal': True}",
            function_name=_FORMAT_CURRENCY,
            argument_name="options",
            expected_type="FormatOptions | Mapping[str, object] | None",
            received_type=received_type,
        )

    @staticmethod
    def option_unknown(name: str) -> Diagnostic:
        """Mapping carries a key that is not a format option.

        Args:
            name: The unrecognized key

        Returns:
            Diagnostic for OPTION_UNKNOWN
        """
        msg = f"Unknown format option '{name}'"
        return Diagnostic(
            code=DiagnosticCode.OPTION_UNKNOWN,
            message=msg,
            hint="Option keys may be snake_case (total_decimal) or camelCase (totalDecimal)",
            function_name=_FORMAT_CURRENCY,
            argument_name=name,
        )

    @staticmethod
    def option_type_invalid(name: str, expected: str, received: object) -> Diagnostic:
        """Option value has the wrong type.

        Args:
            name: Option name
            expected: Human-readable expected type
            received: The rejected value

        Returns:
            Diagnostic for OPTION_TYPE_INVALID
        """
        received_type = type(received).__name__
        msg = f"Option '{name}' must be {expected}, got {received_type}"
        return Diagnostic(
            code=DiagnosticCode.OPTION_TYPE_INVALID,
            message=msg,
            function_name=_FORMAT_CURRENCY,
            argument_name=name,
            expected_type=expected,
            received_type=received_type,
        )

    @staticmethod
    def option_value_invalid(name: str, value: object, allowed: str) -> Diagnostic:
        """Option value has the right type but is out of range.

        Args:
            name: Option name
            value: The rejected value
            allowed: Description of accepted values

        Returns:
            Diagnostic for OPTION_VALUE_INVALID
        """
        msg = f"Option '{name}' must be {allowed}, got {value!r}"
        return Diagnostic(
            code=DiagnosticCode.OPTION_VALUE_INVALID,
            message=msg,
            function_name=_FORMAT_CURRENCY,
            argument_name=name,
        )

    @staticmethod
    def negative_custom_invalid(received: object) -> Diagnostic:
        """Custom negative formatter returned something other than str."""
        received_type = type(received).__name__
        msg = f"negative_format.custom must return str, got {received_type}"
        return Diagnostic(
            code=DiagnosticCode.NEGATIVE_CUSTOM_INVALID,
            message=msg,
            hint="The callable receives the unsigned text and returns the final text",
            function_name=_FORMAT_CURRENCY,
            argument_name="negative_format.custom",
            expected_type="str",
            received_type=received_type,
        )
