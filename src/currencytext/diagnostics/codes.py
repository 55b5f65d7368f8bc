"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages, and renders diagnostics as
the text of CurrencyTextError.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Value errors (unsupported input to format_currency)
        2000-2999: Option errors (malformed FormatOptions)
    """

    # Value errors (1000-1999)
    VALUE_TYPE_INVALID = 1001
    VALUE_NOT_FINITE = 1002

    # Option errors (2000-2999)
    OPTIONS_TYPE_INVALID = 2001
    OPTION_UNKNOWN = 2002
    OPTION_TYPE_INVALID = 2003
    OPTION_VALUE_INVALID = 2004
    NEGATIVE_CUSTOM_INVALID = 2005


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        function_name: Function name where error occurred
        argument_name: Argument or option name that caused the error
        expected_type: Expected type for argument
        received_type: Actual type received
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    function_name: str | None = None
    argument_name: str | None = None
    expected_type: str | None = None
    received_type: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[OPTION_TYPE_INVALID]: Option 'decimal' must be bool, got str
              = function: format_currency
              = argument: decimal
              = expected: bool
              = received: str

        Only populated fields get a line.

        Returns:
            Formatted error message
        """
        details = (
            ("function", self.function_name),
            ("argument", self.argument_name),
            ("expected", self.expected_type),
            ("received", self.received_type),
            ("help", self.hint),
        )
        lines = [f"error[{self.code.name}]: {self.message}"]
        lines.extend(f"  = {label}: {value}" for label, value in details if value)
        return "\n".join(lines)
