"""currencytext exception hierarchy with structured diagnostics.

All exceptions can carry Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class CurrencyTextError(Exception):
    """Base exception for all currencytext errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CurrencyTextError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class CurrencyTypeError(CurrencyTextError, TypeError):
    """Caller contract violation in format_currency().

    Raised for unsupported value types, non-finite numbers and malformed
    options. Subclasses TypeError so callers catching the builtin keep working.

    Parsing never raises this: unreadable currency text becomes 0.
    """
