"""Profile registry: get-or-create cache of CurrencyProfile instances.

Architecture:
    - ProfileRegistry: Explicitly constructed, injectable cache. Owns a
      FormattingService and an unbounded mapping from "currency|locale"
      keys to profiles.
    - get_default_registry(): Lazily created shared registry for callers
      that do not inject one.
    - get_profile() / evict_profile(): Module-level conveniences over the
      default (or a supplied) registry.

Identity:
    Within one registry, every request for an equal (currency, locale) key
    returns the same profile object once it has been derived. Requests that
    spell the same locale differently ("en-us", "en-US") also share the
    instance: a derived profile is stored under its requested key and its
    canonical key.

Thread Safety:
    Lookups and inserts are guarded by an RLock with the double-check
    pattern: derivation runs outside the lock, and if another thread stored
    the same key meanwhile, its profile wins and is returned to both callers.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from typing import Literal, overload

from currencyinfo.constants import DEFAULT_LOCALE
from currencyinfo.diagnostics import CurrencyInfoError

from .profile import CurrencyProfile, derive_profile
from .service import BabelFormattingService, FormattingService

__all__ = [
    "ProfileRegistry",
    "evict_profile",
    "get_default_registry",
    "get_profile",
]

logger = logging.getLogger(__name__)


def _cache_key(currency: object, locale: object) -> str:
    return f"{currency}|{locale}"


class ProfileRegistry:
    """Thread-safe get-or-create store of CurrencyProfile instances.

    No expiry and no size bound: the key space is limited to the currency and
    locale combinations callers actually request.

    Attributes:
        service: Formatting service used to derive profiles

    Examples:
        >>> registry = ProfileRegistry()
        >>> usd = registry.get("USD", "en-US")
        >>> registry.get("USD", "en-US") is usd
        True
        >>> profile, error = registry.try_get("XYZ", "en-US")
        >>> profile is None, type(error).__name__
        (True, 'UnsupportedCurrencyError')
        >>> registry.evict("USD", "en-US")
        True
    """

    __slots__ = ("_lock", "_profiles", "service")

    def __init__(self, service: FormattingService | None = None) -> None:
        """Create an empty registry.

        Args:
            service: Formatting service to derive profiles with
                (default: BabelFormattingService)
        """
        self.service: FormattingService = (
            service if service is not None else BabelFormattingService()
        )
        self._profiles: dict[str, CurrencyProfile] = {}
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(service={self.service!r}, size={len(self)})"

    def __len__(self) -> int:
        """Number of distinct cached profiles."""
        with self._lock:
            return len({id(profile) for profile in self._profiles.values()})

    def __contains__(self, key: object) -> bool:
        """Check a (currency, locale) pair or a "currency|locale" key."""
        if isinstance(key, tuple) and len(key) == 2:
            key = _cache_key(*key)
        with self._lock:
            return key in self._profiles

    def try_get(
        self, currency: str, locale: str = DEFAULT_LOCALE
    ) -> tuple[CurrencyProfile | None, CurrencyInfoError | None]:
        """Return the cached profile or derive, cache and return a new one.

        Result-returning primitive: invalid input is reported, never raised.
        Errors are not cached.

        Args:
            currency: ISO 4217 currency code (e.g., "CAD")
            locale: BCP-47 tag (default: "en-US")

        Returns:
            Tuple of (profile, error) - exactly one is None
        """
        key = _cache_key(currency, locale)
        with self._lock:
            cached = self._profiles.get(key)
        if cached is not None:
            return (cached, None)

        profile, error = derive_profile(currency, locale, self.service)
        if profile is None:
            return (None, error)

        canonical_key = _cache_key(profile.currency, profile.locale)
        with self._lock:
            # Double-check: another thread may have stored either key meanwhile
            existing = self._profiles.get(key) or self._profiles.get(canonical_key)
            if existing is not None:
                profile = existing
            self._profiles[canonical_key] = profile
            self._profiles[key] = profile
        return (profile, None)

    def get(self, currency: str, locale: str = DEFAULT_LOCALE) -> CurrencyProfile:
        """Return the cached profile or derive one, raising on invalid input.

        Raises:
            UnsupportedRuntimeError: If Babel is unavailable
            UnsupportedCurrencyError: If the currency is not supported
            InvalidLocaleError: If the locale cannot be canonicalized
        """
        profile, error = self.try_get(currency, locale)
        if error is not None:
            raise error
        assert profile is not None  # Type narrowing: try_get returns exactly one
        return profile

    def evict(self, currency: str, locale: str = DEFAULT_LOCALE) -> bool:
        """Remove a profile so that the next request derives it again.

        Every key aliasing the evicted profile is removed with it.

        Returns:
            True if a profile was removed, False if none was cached
        """
        key = _cache_key(currency, locale)
        with self._lock:
            profile = self._profiles.pop(key, None)
            if profile is None:
                return False
            aliases = [k for k, cached in self._profiles.items() if cached is profile]
            for alias in aliases:
                del self._profiles[alias]
        logger.debug("Evicted profile %s (%d alias keys)", key, len(aliases))
        return True

    def clear(self) -> None:
        """Remove every cached profile."""
        with self._lock:
            self._profiles.clear()

    def cache_info(self) -> dict[str, int | tuple[str, ...]]:
        """Get cache statistics.

        Returns:
            Dictionary with:
            - size: Number of distinct cached profiles
            - keys: Tuple of cached keys (insertion order, aliases included)
        """
        with self._lock:
            return {
                "size": len({id(profile) for profile in self._profiles.values()}),
                "keys": tuple(self._profiles),
            }


_default_registry: ProfileRegistry | None = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> ProfileRegistry:
    """Return the shared registry, creating it on first use (thread-safe)."""
    global _default_registry  # noqa: PLW0603  # pylint: disable=global-statement
    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                _default_registry = ProfileRegistry()
    return _default_registry


@overload
def get_profile(
    currency: str,
    locale: str = ...,
    *,
    raise_on_error: Literal[True] = ...,
    registry: ProfileRegistry | None = ...,
) -> CurrencyProfile: ...


@overload
def get_profile(
    currency: str,
    locale: str = ...,
    *,
    raise_on_error: Literal[False],
    registry: ProfileRegistry | None = ...,
) -> CurrencyProfile | CurrencyInfoError: ...


def get_profile(
    currency: str,
    locale: str = DEFAULT_LOCALE,
    *,
    raise_on_error: bool = True,
    registry: ProfileRegistry | None = None,
) -> CurrencyProfile | CurrencyInfoError:
    """Get a cached or newly derived profile.

    Args:
        currency: ISO 4217 currency code (e.g., "USD")
        locale: BCP-47 tag (default: "en-US")
        raise_on_error: If True (default), invalid input raises. If False, the
            error instance is returned in place of the profile.
        registry: Registry to use (default: get_default_registry())

    Returns:
        The profile, or (raise_on_error=False only) the construction error

    Raises:
        CurrencyInfoError: On invalid input when raise_on_error is True

    Examples:
        >>> get_profile("USD", "en-US").currency_symbol
        '$'
        >>> isinstance(get_profile("INVALID", raise_on_error=False), CurrencyInfoError)
        True
    """
    if registry is None:
        registry = get_default_registry()
    if raise_on_error:
        return registry.get(currency, locale)
    profile, error = registry.try_get(currency, locale)
    return profile if profile is not None else error  # type: ignore[return-value]


def evict_profile(
    currency: str,
    locale: str = DEFAULT_LOCALE,
    *,
    registry: ProfileRegistry | None = None,
) -> bool:
    """Evict a profile from a registry (default: the shared registry)."""
    if registry is None:
        registry = get_default_registry()
    return registry.evict(currency, locale)
