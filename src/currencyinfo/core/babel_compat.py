"""Babel compatibility layer for lazy import handling.

Provides centralized, lazy import infrastructure for Babel to ensure consistent
error messaging and import behavior across all Babel-dependent modules.

Design Rationale:
    Babel loads CLDR data on import. Modules that only need types (profiles,
    diagnostics, detection scoring) must import without touching Babel, and
    the formatting service reports a missing Babel as UnsupportedRuntimeError
    instead of a bare ImportError deep inside a call stack.

Usage Pattern:
    # At module top-level (for type hints only):
    from typing import TYPE_CHECKING
    if TYPE_CHECKING:
        from babel import Locale

    # At function call site (for runtime use):
    from currencyinfo.core.babel_compat import require_babel

    def my_function(locale_code: str) -> None:
        require_babel("my_function")  # Raises BabelImportError if Babel missing
        from babel import Locale  # Safe to import Babel now
        ...

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache
from typing import TYPE_CHECKING, Literal, Protocol

from currencyinfo.diagnostics import UnsupportedRuntimeError

if TYPE_CHECKING:
    from babel import Locale
    from babel.core import UnknownLocaleError as UnknownLocaleErrorType


# pylint: disable=redefined-builtin,unnecessary-ellipsis
# Reason: Protocol definitions mirror Babel's API which uses 'format' parameter name
# Ellipsis (...) is the standard Protocol method body per PEP 544
class BabelNumbersProtocol(Protocol):
    """Protocol for Babel numbers module interface.

    Defines the subset of babel.numbers API actually used by CurrencyInfo.
    Provides type safety without requiring full Babel type stubs.
    """

    def format_currency(
        self,
        number: int | float | Decimal,
        currency: str,
        format: str | None = None,
        locale: Locale | str | None = None,
        currency_digits: bool = True,
        format_type: Literal["standard", "accounting", "name"] = "standard",
    ) -> str:
        """Format currency with locale-specific formatting."""
        ...

    def get_currency_symbol(self, currency: str, locale: Locale | str | None = None) -> str:
        """Return the locale's symbol for a currency code."""
        ...

    def get_group_symbol(self, locale: Locale | str | None = None) -> str:
        """Return the locale's grouping separator."""
        ...

    def get_decimal_symbol(self, locale: Locale | str | None = None) -> str:
        """Return the locale's decimal separator."""
        ...

    def get_minus_sign_symbol(self, locale: Locale | str | None = None) -> str:
        """Return the locale's minus sign."""
        ...

    def get_plus_sign_symbol(self, locale: Locale | str | None = None) -> str:
        """Return the locale's plus sign."""
        ...

    def list_currencies(self, locale: Locale | str | None = None) -> set[str]:
        """Return the set of currency codes known to CLDR."""
        ...
# pylint: enable=redefined-builtin,unnecessary-ellipsis


__all__ = [
    "BabelImportError",
    "BabelNumbersProtocol",
    "get_babel_numbers",
    "get_locale_class",
    "get_unknown_locale_error",
    "is_babel_available",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(UnsupportedRuntimeError, ImportError):
    """Raised when Babel is required but not importable.

    Subclasses UnsupportedRuntimeError so runtime validation can return it
    as a construction error, and ImportError for callers catching import
    problems generically.
    """


def is_babel_available() -> bool:
    """Check if Babel is installed.

    Uses cached result to avoid repeated import attempts.

    Returns:
        True if Babel is installed and importable, False otherwise.
    """
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Use at the entry point of functions/methods that require Babel.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_locale_class() -> type[Locale]:
    """Get the Babel Locale class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_locale_class")
    from babel import Locale  # noqa: PLC0415

    return Locale


def get_unknown_locale_error() -> type[UnknownLocaleErrorType]:
    """Get the Babel UnknownLocaleError exception class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_unknown_locale_error")
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    return UnknownLocaleError


def get_babel_numbers() -> BabelNumbersProtocol:
    """Get the Babel numbers module.

    Returns:
        The babel.numbers module (typed via BabelNumbersProtocol)

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_babel_numbers")
    from babel import numbers  # noqa: PLC0415

    return numbers
