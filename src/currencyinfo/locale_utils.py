"""Locale utilities for BCP-47 canonicalization and Babel lookups.

Centralizes locale format handling used throughout the codebase.
Profiles and detection results carry hyphenated BCP-47 tags ("en-US");
Babel wants POSIX identifiers ("en_US"). Conversion happens here and
nowhere else.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from currencyinfo.constants import MAX_LOCALE_CACHE_SIZE
from currencyinfo.core.babel_compat import get_locale_class, get_unknown_locale_error
from currencyinfo.diagnostics import InvalidLocaleError

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "canonicalize_locale",
    "get_babel_locale",
    "normalize_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


def _split_tag(locale_tag: str) -> tuple[str, str | None, str | None, str | None]:
    """Split a hyphenated tag into (language, territory, script, variant).

    Raises:
        InvalidLocaleError: If the tag is not a well-formed BCP-47 tag
    """
    from babel.core import parse_locale  # noqa: PLC0415

    try:
        parts = parse_locale(locale_tag, sep="-")
    except ValueError as e:
        raise InvalidLocaleError(locale_tag, str(e)) from None
    language, territory, script, variant = parts[:4]
    return language, territory, script, variant


def canonicalize_locale(locale_tag: str) -> str:
    """Return the canonical hyphenated form of a BCP-47 locale tag.

    The tag must be hyphen separated (underscore identifiers such as "en_US"
    are rejected, as in BCP-47) and its language must be known to CLDR.
    The territory does not need CLDR data of its own: "fr-US" is canonical
    and renders with "fr" data.

    Args:
        locale_tag: Locale tag in any letter case (e.g., "en-us", "EN-US")

    Returns:
        Canonical tag (e.g., "en-US", "zh-Hant-TW")

    Raises:
        InvalidLocaleError: If the tag is malformed or its language is unknown

    Example:
        >>> canonicalize_locale("en-us")
        'en-US'
        >>> canonicalize_locale("en_US")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
            ...
        InvalidLocaleError: Incorrect locale information provided: 'en_US'
    """
    from babel.core import get_locale_identifier  # noqa: PLC0415

    locale_tag = str(locale_tag)
    language, territory, script, variant = _split_tag(locale_tag)
    canonical = get_locale_identifier((language, territory, script, variant), sep="-")

    # Resolving proves the language exists in CLDR
    get_babel_locale(canonical)
    return canonical


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_tag: str) -> Locale:
    """Get the most specific Babel Locale available for a tag, with caching.

    Tries the full identifier first (Babel resolves likely subtags, so
    "zh-TW" finds Traditional Chinese data), then the bare language.
    This mirrors how ECMAScript Intl falls back for territories that have
    no CLDR locale of their own.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_tag: Hyphenated BCP-47 tag (e.g., "fr-US")

    Returns:
        Babel Locale object used for rendering

    Raises:
        InvalidLocaleError: If neither the tag nor its language is known to CLDR

    Example:
        >>> get_babel_locale("fr-US").language
        'fr'
    """
    locale_class = get_locale_class()
    unknown_locale_error = get_unknown_locale_error()

    language = _split_tag(locale_tag)[0]
    try:
        return locale_class.parse(normalize_locale(locale_tag))
    except (unknown_locale_error, ValueError):
        logger.debug("No CLDR data for '%s', falling back to language '%s'", locale_tag, language)

    try:
        return locale_class.parse(language)
    except (unknown_locale_error, ValueError) as e:
        raise InvalidLocaleError(locale_tag, str(e)) from None
