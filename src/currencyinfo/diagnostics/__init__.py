"""Diagnostic system for CurrencyInfo errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CurrencyInfoError,
    FormattingError,
    InvalidLocaleError,
    UnsupportedCurrencyError,
    UnsupportedRuntimeError,
)
from .formatter import DiagnosticFormatter
from .templates import ErrorTemplate

__all__ = [
    "CurrencyInfoError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "FormattingError",
    "InvalidLocaleError",
    "UnsupportedCurrencyError",
    "UnsupportedRuntimeError",
]
