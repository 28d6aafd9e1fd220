"""Tests for locale_utils: BCP-47 canonicalization and Babel locale lookup."""

import pytest

from currencyinfo.diagnostics import DiagnosticCode, InvalidLocaleError
from currencyinfo.locale_utils import canonicalize_locale, get_babel_locale, normalize_locale


class TestNormalizeLocale:
    """Test BCP-47 to POSIX conversion."""

    def test_hyphen_becomes_underscore(self) -> None:
        """Hyphenated tags convert to Babel identifiers."""
        assert normalize_locale("en-US") == "en_US"

    def test_bare_language_unchanged(self) -> None:
        """Tags without subtags pass through."""
        assert normalize_locale("fr") == "fr"


class TestCanonicalizeLocale:
    """Test canonical tag construction."""

    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            ("en-US", "en-US"),
            ("en-us", "en-US"),
            ("EN-us", "en-US"),
            ("fr-CA", "fr-CA"),
            ("en", "en"),
            ("zh-hant-tw", "zh-Hant-TW"),
        ],
    )
    def test_canonical_case(self, tag: str, expected: str) -> None:
        """Language is lowercased, region uppercased, script title-cased."""
        assert canonicalize_locale(tag) == expected

    def test_region_without_cldr_data_is_accepted(self) -> None:
        """fr-US has no CLDR locale of its own but its language exists."""
        assert canonicalize_locale("fr-US") == "fr-US"
        assert canonicalize_locale("es-CA") == "es-CA"

    @pytest.mark.parametrize("tag", ["en_US", "", "123", "xx-YY", "en-US-"])
    def test_invalid_tags_raise(self, tag: str) -> None:
        """Malformed tags and unknown languages raise InvalidLocaleError."""
        with pytest.raises(InvalidLocaleError) as exc_info:
            canonicalize_locale(tag)
        assert exc_info.value.locale == tag

    def test_invalid_locale_error_is_value_error(self) -> None:
        """InvalidLocaleError can be caught as ValueError."""
        with pytest.raises(ValueError, match="Incorrect locale information provided"):
            canonicalize_locale("en_US")

    def test_invalid_locale_error_carries_diagnostic(self) -> None:
        """The error exposes a structured diagnostic."""
        with pytest.raises(InvalidLocaleError) as exc_info:
            canonicalize_locale("xx-YY")
        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code == DiagnosticCode.INVALID_LOCALE
        assert diagnostic.locale == "xx-YY"


class TestGetBabelLocale:
    """Test Babel Locale resolution with language fallback."""

    def test_exact_locale(self) -> None:
        """Locales with CLDR data resolve directly."""
        locale = get_babel_locale("en-CA")
        assert locale.language == "en"
        assert locale.territory == "CA"

    def test_falls_back_to_language_data(self) -> None:
        """Regions without CLDR data still resolve to the language."""
        assert get_babel_locale("fr-US").language == "fr"
        assert get_babel_locale("es-CA").language == "es"

    def test_is_cached(self) -> None:
        """Repeated lookups return the same Locale object."""
        assert get_babel_locale("en-GB") is get_babel_locale("en-GB")

    def test_unknown_language_raises(self) -> None:
        """Unknown languages raise InvalidLocaleError."""
        with pytest.raises(InvalidLocaleError):
            get_babel_locale("qq-ZZ")
