"""Preset profiles for the common North American currency pairs.

Each preset is a factory returning the registry's shared profile, so
repeated calls return the same instance.

Example:
    >>> from currencyinfo.presets import cad, fr_cad, usd
    >>> usd().format(1234.5)
    '$1,234.50'
    >>> cad() is fr_cad()
    True
"""

from __future__ import annotations

from currencyinfo.runtime.profile import CurrencyProfile
from currencyinfo.runtime.registry import ProfileRegistry, get_profile

__all__ = ["cad", "en_cad", "fr_cad", "usd"]


def usd(registry: ProfileRegistry | None = None) -> CurrencyProfile:
    """US dollars as written in the United States (USD, en-US)."""
    return get_profile("USD", "en-US", registry=registry)


def cad(registry: ProfileRegistry | None = None) -> CurrencyProfile:
    """Canadian dollars in French Canadian form (CAD, fr-CA)."""
    return get_profile("CAD", "fr-CA", registry=registry)


def en_cad(registry: ProfileRegistry | None = None) -> CurrencyProfile:
    """Canadian dollars in English Canadian form (CAD, en-CA)."""
    return get_profile("CAD", "en-CA", registry=registry)


def fr_cad(registry: ProfileRegistry | None = None) -> CurrencyProfile:
    """Canadian dollars in French Canadian form (CAD, fr-CA); same as cad()."""
    return get_profile("CAD", "fr-CA", registry=registry)
