"""Diagnostic system for currencytext errors.

Provides structured error diagnostics with codes, hints and type details.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import CurrencyTextError, CurrencyTypeError
from .templates import ErrorTemplate

__all__ = [
    "CurrencyTextError",
    "CurrencyTypeError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
]
