"""Shared constants for CurrencyInfo.

This module provides centralized configuration constants used across
runtime and parsing packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Profile derivation: Reference amount and fallback markers
- Detection defaults: Candidate currencies, languages and countries
- Scoring: Raw score bounds used for normalization
- Rendering limits: Largest renderable amount and decimal precision margin
- Cache limits: Memory bounds for Babel locale lookups

Python 3.13+. Zero external dependencies.
"""

from decimal import Decimal

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Profile derivation
    "REFERENCE_AMOUNT",
    "DEFAULT_LOCALE",
    "FALLBACK_GROUP_SEPARATOR",
    "FALLBACK_DECIMAL_SEPARATOR",
    "FALLBACK_CURRENCY_SYMBOL",
    "CANONICAL_DECIMAL_POINT",
    # Detection defaults
    "DEFAULT_CURRENCIES",
    "DEFAULT_LANGUAGES",
    "DEFAULT_COUNTRIES",
    # Scoring
    "MIN_RAW_SCORE",
    "MAX_RAW_SCORE",
    "PERFECT_SCORE",
    # Rendering limits
    "MAX_RENDER_INTEGER_DIGITS",
    "RENDER_PRECISION_MARGIN",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# PROFILE DERIVATION
# ============================================================================

# Rendered once per profile to discover separators and symbol placement.
# Needs at least two grouping boundaries and a fractional part so that every
# marker a locale uses shows up in the typed parts.
REFERENCE_AMOUNT: Decimal = Decimal("123456789.123")

# Locale used when a caller asks for a profile without naming one.
DEFAULT_LOCALE: str = "en-US"

# Markers used when the reference rendering lacks the corresponding part.
FALLBACK_GROUP_SEPARATOR: str = ","
FALLBACK_DECIMAL_SEPARATOR: str = "."
FALLBACK_CURRENCY_SYMBOL: str = "$"

# Decimal point understood by Decimal() after localized markers are stripped.
CANONICAL_DECIMAL_POINT: str = "."

# ============================================================================
# DETECTION DEFAULTS
# ============================================================================

DEFAULT_CURRENCIES: tuple[str, ...] = ("USD", "CAD")
DEFAULT_LANGUAGES: tuple[str, ...] = ("en", "es", "fr")
DEFAULT_COUNTRIES: tuple[str, ...] = ("US", "CA")

# ============================================================================
# SCORING
# ============================================================================

# Raw scores are clamped to this range, then divided by MAX_RAW_SCORE.
# Breakdown of the maximum: two points for grouping separators, two for a
# single decimal separator, two for a correctly placed currency symbol.
MIN_RAW_SCORE: int = 0
MAX_RAW_SCORE: int = 6

# Score reported when re-rendering reproduces the input exactly.
PERFECT_SCORE: float = 1.0

# ============================================================================
# RENDERING LIMITS
# ============================================================================

# Largest amount rendered, in integer digits. The largest finite IEEE 754
# double has 309, so every float converts and renders.
MAX_RENDER_INTEGER_DIGITS: int = 309

# Extra decimal precision beyond the integer digits for fraction digits and
# rounding during rendering.
RENDER_PRECISION_MARGIN: int = 8

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached Babel Locale lookups.
# Profiles themselves are never evicted automatically (see ProfileRegistry).
MAX_LOCALE_CACHE_SIZE: int = 128
