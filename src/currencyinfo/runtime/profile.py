"""Locale-currency profiles: derivation, formatting and stripping.

A CurrencyProfile captures everything needed to move between a number and
its localized currency string for one (currency, locale) pair: grouping
separator, decimal separator, currency symbol and where that symbol sits.

Architecture:
    - derive_profile(): Result-returning construction primitive. Validates
      input, renders a reference amount once and reads the markers off the
      typed parts. Never raises for bad input; returns the error instead.
    - CurrencyProfile: Immutable value with strip()/format()/locate_symbol().
    - validate_*(): Individual input checks, each returning True or the error.

Profiles are normally obtained through ProfileRegistry, which caches them so
that equal (currency, locale) requests share one instance.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
import unicodedata
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Literal

from currencyinfo.constants import (
    CANONICAL_DECIMAL_POINT,
    FALLBACK_CURRENCY_SYMBOL,
    FALLBACK_DECIMAL_SEPARATOR,
    FALLBACK_GROUP_SEPARATOR,
    REFERENCE_AMOUNT,
)
from currencyinfo.core.babel_compat import BabelImportError, is_babel_available
from currencyinfo.core.numbers import parse_plain_decimal
from currencyinfo.diagnostics import (
    CurrencyInfoError,
    FormattingError,
    InvalidLocaleError,
    UnsupportedCurrencyError,
    UnsupportedRuntimeError,
)
from currencyinfo.enums import PartType, SymbolPosition

from .locator import locate_symbol
from .service import BabelFormattingService, FormattingService, NumberPart

__all__ = [
    "CurrencyProfile",
    "check_for_input_errors",
    "derive_profile",
    "validate_currency",
    "validate_locale",
    "validate_runtime",
]

logger = logging.getLogger(__name__)


def _marker_variants(marker: str) -> tuple[str, ...]:
    """The marker itself plus its NFKC form, if different.

    CLDR uses no-break spaces (U+00A0, U+202F) as grouping separators;
    hand-typed input uses an ordinary space. NFKC maps the former to the latter.
    """
    return tuple(dict.fromkeys((marker, unicodedata.normalize("NFKC", marker))))


def _character_class(marker: str) -> str:
    return "[" + "".join(re.escape(variant) for variant in _marker_variants(marker)) + "]"


@dataclass(frozen=True, slots=True)
class CurrencyProfile:
    """Immutable formatting facts for one (currency, locale) pair.

    Use ProfileRegistry.get() / get_profile() to obtain instances; direct
    construction bypasses validation and caching.

    Attributes:
        currency: ISO 4217 currency code (e.g., "USD")
        locale: Canonical BCP-47 tag (e.g., "en-US")
        group_separator: Thousands grouping marker (e.g., "," or a no-break space)
        decimal_separator: Fraction marker (e.g., "." or ",")
        currency_symbol: Rendered currency symbol (e.g., "$", "£", "US$")
        symbol_position: Symbol placement in this profile's own renderings
        parts: Typed parts of the reference rendering

    Examples:
        >>> usd = get_profile("USD", "en-US")
        >>> usd.format(1234.56)
        '$1,234.56'
        >>> usd.strip("$1,234.56")
        Decimal('1234.56')
        >>> usd.locate_symbol("$100")
        <SymbolPosition.LEADING: 'leading'>
    """

    currency: str
    locale: str
    group_separator: str
    decimal_separator: str
    currency_symbol: str
    symbol_position: SymbolPosition
    parts: tuple[NumberPart, ...] = field(repr=False)
    service: FormattingService = field(repr=False, compare=False)

    # Patterns are built per call and never stored on the profile.

    def group_pattern(self) -> re.Pattern[str]:
        """Pattern matching this profile's grouping separator."""
        return re.compile(_character_class(self.group_separator))

    def decimal_pattern(self) -> re.Pattern[str]:
        """Pattern matching this profile's decimal separator."""
        return re.compile(_character_class(self.decimal_separator))

    def symbol_pattern(self) -> re.Pattern[str]:
        """Pattern matching this profile's currency symbol.

        Single-character symbols become a character class; longer symbols are
        matched as a literal substring. Matching is case-sensitive.
        """
        if len(self.currency_symbol) < 2:
            return re.compile(_character_class(self.currency_symbol))
        alternatives = sorted(_marker_variants(self.currency_symbol), key=len, reverse=True)
        return re.compile("|".join(re.escape(variant) for variant in alternatives))

    def strip(self, value: object) -> Decimal:
        """Remove this profile's localized formatting and parse the number.

        Numbers (int, float, Decimal) are already plain and are converted
        directly. Everything else is converted with str(), then grouping
        separators are removed, the decimal separator becomes ".", currency
        symbols are removed and the remainder is parsed.

        Args:
            value: Formatted string or plain number

        Returns:
            The amount, or Decimal("NaN") if this profile does not explain
            the input. Never raises.

        Examples:
            >>> get_profile("CAD", "fr-CA").strip("1 234,56 $")
            Decimal('1234.56')
            >>> get_profile("USD", "en-US").strip("1 234,56 $")
            Decimal('NaN')
        """
        if isinstance(value, Decimal):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return Decimal(str(value))

        text = str(value)
        text = self.group_pattern().sub("", text)
        text = self.decimal_pattern().sub(CANONICAL_DECIMAL_POINT, text)
        text = self.symbol_pattern().sub("", text)
        return parse_plain_decimal(text)

    def format(self, value: object) -> str:
        """Strip a value, then render it with this profile's currency and locale.

        Args:
            value: Formatted string or plain number

        Returns:
            Localized currency string. A value this profile cannot strip
            renders as "NaN".

        Raises:
            FormattingError: If the formatting service fails to render

        Example:
            >>> get_profile("CAD", "fr-CA").format(123456789.123)
            '123 456 789,12 $'
        """
        return self.service.render(self.locale, self.currency, self.strip(value))

    def locate_symbol(self, target: object) -> SymbolPosition:
        """Classify where this profile's currency symbol sits in a string or parts sequence.

        See currencyinfo.runtime.locator.locate_symbol for the rules.
        """
        return locate_symbol(target, self.currency_symbol)


# ============================================================================
# VALIDATION
# ============================================================================


def validate_runtime(
    service: FormattingService | None = None,
) -> Literal[True] | UnsupportedRuntimeError:
    """Check that the formatting backend is usable.

    Only the Babel-backed service has an importable dependency to check;
    injected services are trusted.

    Returns:
        True, or a BabelImportError if Babel cannot be imported
    """
    uses_babel = service is None or isinstance(service, BabelFormattingService)
    if uses_babel and not is_babel_available():
        return BabelImportError("CurrencyProfile")
    return True


def validate_currency(
    currency: object, service: FormattingService
) -> Literal[True] | UnsupportedCurrencyError:
    """Check a currency code against the service's supported set."""
    if not isinstance(currency, str) or currency not in service.supported_currencies():
        return UnsupportedCurrencyError(str(currency))
    return True


def validate_locale(
    locale: object, service: FormattingService
) -> Literal[True] | InvalidLocaleError:
    """Check that a locale tag canonicalizes."""
    try:
        service.canonicalize(str(locale))
    except InvalidLocaleError as e:
        return e
    return True


def check_for_input_errors(
    currency: object, locale: object, service: FormattingService
) -> list[CurrencyInfoError]:
    """Run runtime, currency and locale validation in that order.

    A runtime failure short-circuits: without a backend the other checks
    cannot run.

    Returns:
        List of errors (empty if the input is valid)
    """
    runtime = validate_runtime(service)
    if runtime is not True:
        return [runtime]
    checks = (validate_currency(currency, service), validate_locale(locale, service))
    return [check for check in checks if check is not True]


# ============================================================================
# DERIVATION
# ============================================================================


def _first_part_value(parts: tuple[NumberPart, ...], part_type: PartType, fallback: str) -> str:
    return next((part.value for part in parts if part.type == part_type), fallback)


def derive_profile(
    currency: str,
    locale: str,
    service: FormattingService,
) -> tuple[CurrencyProfile | None, CurrencyInfoError | None]:
    """Build a CurrencyProfile for one (currency, locale) pair.

    Renders REFERENCE_AMOUNT once as typed parts and reads the first group,
    decimal and currency parts (falling back to ",", "." and "$" when a part
    is absent).

    Args:
        currency: ISO 4217 currency code
        locale: BCP-47 locale tag
        service: Formatting service used for validation and rendering

    Returns:
        Tuple of (profile, error) - exactly one is None
    """
    errors = check_for_input_errors(currency, locale, service)
    if errors:
        logger.debug("Rejected profile %s|%s: %s", currency, locale, errors[0])
        return (None, errors[0])

    canonical = service.canonicalize(locale)
    try:
        parts = tuple(service.render_to_parts(canonical, currency, REFERENCE_AMOUNT))
    except FormattingError as e:
        return (None, e)

    profile = CurrencyProfile(
        currency=currency,
        locale=canonical,
        group_separator=_first_part_value(parts, PartType.GROUP, FALLBACK_GROUP_SEPARATOR),
        decimal_separator=_first_part_value(parts, PartType.DECIMAL, FALLBACK_DECIMAL_SEPARATOR),
        currency_symbol=_first_part_value(parts, PartType.CURRENCY, FALLBACK_CURRENCY_SYMBOL),
        symbol_position=locate_symbol(parts, FALLBACK_CURRENCY_SYMBOL),
        parts=parts,
        service=service,
    )
    logger.debug(
        "Derived profile %s|%s: group=%r decimal=%r symbol=%r position=%s",
        currency,
        canonical,
        profile.group_separator,
        profile.decimal_separator,
        profile.currency_symbol,
        profile.symbol_position,
    )
    return (profile, None)

