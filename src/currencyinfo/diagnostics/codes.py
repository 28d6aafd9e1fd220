"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Construction errors (runtime, currency, locale validation)
        2000-2999: Formatting errors (formatting service failures)
    """

    # Construction errors (1000-1999)
    UNSUPPORTED_RUNTIME = 1001
    UNSUPPORTED_CURRENCY = 1002
    INVALID_LOCALE = 1003

    # Formatting errors (2000-2999)
    FORMATTING_FAILED = 2001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Provides rich error information for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        currency: Currency code involved in the error (if any)
        locale: Locale tag involved in the error (if any)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    currency: str | None = None
    locale: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping.

        Example output:
            error[UNSUPPORTED_CURRENCY]: Currency value XYZ is not supported
              = currency: XYZ
              = help: Use an ISO 4217 code known to CLDR, such as USD or EUR

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
