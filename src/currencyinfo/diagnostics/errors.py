"""CurrencyInfo exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Construction errors double as standard library exception types so callers
can catch them generically (TypeError for currencies, ValueError for locales).

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic
from .templates import ErrorTemplate


class CurrencyInfoError(Exception):
    """Base exception for all CurrencyInfo errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CurrencyInfoError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class UnsupportedRuntimeError(CurrencyInfoError):
    """The locale-aware formatting backend (Babel) is unavailable."""

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring the backend
        """
        super().__init__(ErrorTemplate.unsupported_runtime(feature))
        self.feature = feature


class UnsupportedCurrencyError(CurrencyInfoError, TypeError):
    """Currency code is not in the formatting service's supported set.

    Attributes:
        currency: The rejected currency value
    """

    def __init__(self, currency: str) -> None:
        """Initialize UnsupportedCurrencyError.

        Args:
            currency: The rejected currency value
        """
        super().__init__(ErrorTemplate.unsupported_currency(currency))
        self.currency = currency


class InvalidLocaleError(CurrencyInfoError, ValueError):
    """Locale tag cannot be canonicalized.

    Attributes:
        locale: The rejected locale tag
    """

    def __init__(self, locale: str, reason: str = "unknown locale") -> None:
        """Initialize InvalidLocaleError.

        Args:
            locale: The rejected locale tag
            reason: Why canonicalization failed
        """
        super().__init__(ErrorTemplate.invalid_locale(locale, reason))
        self.locale = locale


class FormattingError(CurrencyInfoError):
    """Raised when the formatting service fails to render an amount."""
