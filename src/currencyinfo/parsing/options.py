"""Detection configuration.

DetectionOptions is the per-call configuration object for detect(): which
currencies, languages and countries to try and what to fall back to when
nothing matches.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace

from currencyinfo.constants import DEFAULT_COUNTRIES, DEFAULT_CURRENCIES, DEFAULT_LANGUAGES

__all__ = ["Assumption", "DetectionOptions", "assumed_pair"]


@dataclass(frozen=True, slots=True)
class Assumption:
    """Fallback (locale, currency) pair used when detection finds no match.

    Attributes:
        locale: BCP-47 locale tag (e.g., "en-US")
        currency: ISO 4217 currency code (e.g., "USD")
    """

    locale: str
    currency: str


def assumed_pair(assume: object) -> tuple[str, str] | None:
    """Read (locale, currency) from an assumption-like value.

    Accepts an Assumption, a mapping with "locale" and "currency" keys, or any
    object carrying those attributes (a CurrencyProfile, for instance).

    Returns:
        (locale, currency) when both are present and truthy, else None
    """
    if assume is None:
        return None
    if isinstance(assume, Mapping):
        locale, currency = assume.get("locale"), assume.get("currency")
    else:
        locale = getattr(assume, "locale", None)
        currency = getattr(assume, "currency", None)
    if not locale or not currency:
        return None
    return (str(locale), str(currency))


def _as_tags(name: str, value: object) -> tuple[str, ...]:
    if isinstance(value, str) or not isinstance(value, Sequence):
        msg = f"{name} must be a sequence of strings, not {type(value).__name__}"
        raise TypeError(msg)
    if not all(isinstance(item, str) for item in value):
        msg = f"{name} must contain only strings"
        raise TypeError(msg)
    return tuple(value)


@dataclass(frozen=True, slots=True)
class DetectionOptions:
    """Immutable configuration for currency detection.

    Constructing ``DetectionOptions()`` with no arguments tries USD and CAD
    for English, Spanish and French in the United States and Canada.

    Attributes:
        currencies: ISO 4217 codes to try, in priority order
        languages: Language subtags to combine with each country
        countries: Region subtags; candidate locales are built country by
            country ("en-US", "es-US", "fr-US", "en-CA", ...)
        assume: Fallback when nothing matches (Assumption, mapping with
            locale/currency, or a CurrencyProfile). None disables fallback.

    Example:
        >>> options = DetectionOptions(currencies=["GBP"], languages=["en"], countries=["GB"])
        >>> options.locales
        ('en-GB',)
    """

    currencies: Sequence[str] = DEFAULT_CURRENCIES
    languages: Sequence[str] = DEFAULT_LANGUAGES
    countries: Sequence[str] = DEFAULT_COUNTRIES
    assume: object = None

    def __post_init__(self) -> None:
        """Normalize candidate lists to tuples.

        Raises:
            TypeError: If a candidate list is a bare string or holds
                non-string items
        """
        for name in ("currencies", "languages", "countries"):
            object.__setattr__(self, name, _as_tags(name, getattr(self, name)))

    @property
    def locales(self) -> tuple[str, ...]:
        """Candidate locale tags in country-major order."""
        return tuple(
            f"{language}-{country}" for country in self.countries for language in self.languages
        )

    @property
    def assumption(self) -> tuple[str, str] | None:
        """The (locale, currency) fallback pair, if fully specified."""
        return assumed_pair(self.assume)

    def with_overrides(self, **overrides: object) -> DetectionOptions:
        """Return a copy with some fields replaced.

        Raises:
            TypeError: If an override names an unknown field or has a bad value
        """
        if not overrides:
            return self
        return replace(self, **overrides)  # type: ignore[arg-type]
