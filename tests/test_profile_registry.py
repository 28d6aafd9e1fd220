"""Tests for ProfileRegistry caching, identity and thread safety."""

import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from decimal import Decimal

import pytest

from currencyinfo.diagnostics import (
    CurrencyInfoError,
    InvalidLocaleError,
    UnsupportedCurrencyError,
)
from currencyinfo.enums import PartType, SymbolPosition
from currencyinfo.runtime import (
    BabelFormattingService,
    CurrencyProfile,
    NumberPart,
    ProfileRegistry,
    evict_profile,
    get_default_registry,
    get_profile,
)


class CountingService:
    """Deterministic FormattingService that counts derivations."""

    def __init__(self) -> None:
        self.derivations = 0
        self._lock = threading.Lock()

    def canonicalize(self, locale_tag: str) -> str:
        if locale_tag.lower() != "xx-yy":
            raise InvalidLocaleError(locale_tag)
        return "xx-YY"

    def supported_currencies(self) -> frozenset[str]:
        return frozenset({"ABC"})

    def render(self, locale_tag: str, currency: str, number: Decimal) -> str:
        return f"{number}¤"

    def render_to_parts(
        self, locale_tag: str, currency: str, number: Decimal
    ) -> tuple[NumberPart, ...]:
        with self._lock:
            self.derivations += 1
        return (
            NumberPart(PartType.INTEGER, "123"),
            NumberPart(PartType.GROUP, "'"),
            NumberPart(PartType.INTEGER, "456"),
            NumberPart(PartType.CURRENCY, "¤"),
        )


class TestInjectedService:
    """Registry behavior with a non-Babel service."""

    def test_profile_read_from_service_parts(self) -> None:
        """Markers come from the service; missing decimal falls back to '.'."""
        registry = ProfileRegistry(CountingService())
        profile = registry.get("ABC", "xx-YY")
        assert profile.locale == "xx-YY"
        assert profile.group_separator == "'"
        assert profile.decimal_separator == "."
        assert profile.currency_symbol == "¤"
        assert profile.symbol_position is SymbolPosition.TRAILING

    def test_cached_key_skips_service(self) -> None:
        service = CountingService()
        registry = ProfileRegistry(service)
        first = registry.get("ABC", "xx-YY")
        second = registry.get("ABC", "xx-YY")
        assert first is second
        assert service.derivations == 1

    def test_locale_spellings_share_one_profile(self) -> None:
        """Different spellings of one locale map to one instance."""
        service = CountingService()
        registry = ProfileRegistry(service)
        canonical = registry.get("ABC", "xx-YY")
        assert registry.get("ABC", "XX-yy") is canonical
        assert len(registry) == 1

    def test_errors_are_not_cached(self) -> None:
        registry = ProfileRegistry(CountingService())
        profile, error = registry.try_get("USD", "xx-YY")
        assert profile is None
        assert isinstance(error, UnsupportedCurrencyError)
        assert ("USD", "xx-YY") not in registry
        assert len(registry) == 0


class TestRegistryWithBabel:
    """Registry behavior with the default Babel service."""

    def test_default_service(self) -> None:
        assert isinstance(ProfileRegistry().service, BabelFormattingService)

    def test_identity(self, registry: ProfileRegistry) -> None:
        """Repeated gets return the same object."""
        assert registry.get("USD", "en-US") is registry.get("USD", "en-US")

    def test_default_locale_is_en_us(self, registry: ProfileRegistry) -> None:
        assert registry.get("USD").locale == "en-US"

    def test_try_get_returns_error(self, registry: ProfileRegistry) -> None:
        profile, error = registry.try_get("XYZ", "en-US")
        assert profile is None
        assert isinstance(error, UnsupportedCurrencyError)

    def test_get_raises(self, registry: ProfileRegistry) -> None:
        with pytest.raises(UnsupportedCurrencyError, match="Currency value XYZ is not supported"):
            registry.get("XYZ")
        with pytest.raises(InvalidLocaleError):
            registry.get("USD", "en_US")

    def test_contains(self, registry: ProfileRegistry) -> None:
        registry.get("CAD", "fr-CA")
        assert ("CAD", "fr-CA") in registry
        assert "CAD|fr-CA" in registry
        assert ("CAD", "en-CA") not in registry

    def test_evict_forces_new_instance(self, registry: ProfileRegistry) -> None:
        first = registry.get("USD", "en-US")
        assert registry.evict("USD", "en-US") is True
        assert ("USD", "en-US") not in registry
        second = registry.get("USD", "en-US")
        assert second is not first
        assert second == first

    def test_evict_removes_aliases(self, registry: ProfileRegistry) -> None:
        registry.get("USD", "en-us")
        assert "USD|en-US" in registry
        assert registry.evict("USD", "en-US") is True
        assert "USD|en-us" not in registry

    def test_evict_missing_returns_false(self, registry: ProfileRegistry) -> None:
        assert registry.evict("USD", "en-US") is False

    def test_clear(self, registry: ProfileRegistry) -> None:
        registry.get("USD", "en-US")
        registry.get("CAD", "fr-CA")
        assert len(registry) == 2
        registry.clear()
        assert len(registry) == 0

    def test_cache_info(self, registry: ProfileRegistry) -> None:
        registry.get("USD", "en-US")
        info = registry.cache_info()
        assert info["size"] == 1
        assert info["keys"] == ("USD|en-US",)

    def test_registries_are_independent(self) -> None:
        first, second = ProfileRegistry(), ProfileRegistry()
        assert first.get("USD") is not second.get("USD")


class TestModuleLevelAccess:
    """Test get_profile / evict_profile conveniences."""

    def test_default_registry_is_shared(self) -> None:
        assert get_default_registry() is get_default_registry()

    def test_get_profile_uses_default_registry(self) -> None:
        profile = get_profile("USD", "en-US")
        assert get_default_registry().get("USD", "en-US") is profile

    def test_get_profile_with_empty_registry(self, registry: ProfileRegistry) -> None:
        """An empty injected registry is used, not replaced by the default."""
        profile = get_profile("GBP", "en-GB", registry=registry)
        assert registry.get("GBP", "en-GB") is profile

    def test_get_profile_without_raising(self) -> None:
        result = get_profile("XYZ", raise_on_error=False)
        assert isinstance(result, CurrencyInfoError)
        assert isinstance(get_profile("USD", raise_on_error=False), CurrencyProfile)

    def test_evict_profile(self, registry: ProfileRegistry) -> None:
        get_profile("CAD", "en-CA", registry=registry)
        assert evict_profile("CAD", "en-CA", registry=registry) is True
        assert evict_profile("CAD", "en-CA", registry=registry) is False


class TestRegistryConcurrency:
    """Test registry thread safety."""

    def test_concurrent_first_requests_share_one_profile(self) -> None:
        """Threads racing on an uncached key all observe the same profile."""
        registry = ProfileRegistry()
        barrier = threading.Barrier(16)

        def fetch() -> CurrencyProfile:
            barrier.wait()
            return registry.get("CAD", "fr-CA")

        with ThreadPoolExecutor(max_workers=16) as executor:
            futures = [executor.submit(fetch) for _ in range(16)]
            results = [future.result() for future in as_completed(futures)]

        assert all(result is results[0] for result in results)
        assert len(registry) == 1

    def test_concurrent_get_and_evict(self) -> None:
        """Interleaved gets and evictions never raise."""
        registry = ProfileRegistry(CountingService())
        errors: list[Exception] = []

        def churn() -> None:
            try:
                for _ in range(50):
                    registry.get("ABC", "xx-YY")
                    registry.evict("ABC", "xx-YY")
            except Exception as e:  # pylint: disable=broad-exception-caught
                errors.append(e)

        threads = [threading.Thread(target=churn) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
