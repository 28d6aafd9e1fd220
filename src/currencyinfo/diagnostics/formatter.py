"""Diagnostic formatting service.

Renders diagnostics in compiler style with control-character escaping.
Python 3.13+. Zero external dependencies.
"""

import unicodedata
from dataclasses import dataclass

from .codes import Diagnostic

__all__ = ["DiagnosticFormatter"]


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.unsupported_currency("XYZ")
        >>> print(formatter.format(diagnostic))
        error[UNSUPPORTED_CURRENCY]: Currency value XYZ is not supported
          = currency: XYZ
          = help: Use an ISO 4217 code known to CLDR, such as USD or EUR
    """

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        lines = [
            f"{diagnostic.severity}[{diagnostic.code.name}]: {_escape(diagnostic.message)}"
        ]
        if diagnostic.currency is not None:
            lines.append(f"  = currency: {_escape(diagnostic.currency)}")
        if diagnostic.locale is not None:
            lines.append(f"  = locale: {_escape(diagnostic.locale)}")
        if diagnostic.hint:
            lines.append(f"  = help: {diagnostic.hint}")
        return "\n".join(lines)


def _escape(text: str) -> str:
    """Escape control characters so user input cannot break the layout."""
    return "".join(
        repr(char)[1:-1] if unicodedata.category(char) == "Cc" else char for char in text
    )
