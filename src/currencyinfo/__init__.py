"""CurrencyInfo - locale-aware currency formatting, stripping and detection.

Derives, per (currency, locale) pair, the grouping separator, decimal
separator, currency symbol and symbol placement from CLDR data, then uses
them to format numbers, strip formatted strings back to numbers and guess
which locale and currency produced an unfamiliar amount.

Public API:
    get_profile - Cached CurrencyProfile for a (currency, locale) pair
    evict_profile - Drop a cached profile
    ProfileRegistry - Injectable profile cache
    CurrencyProfile - format() / strip() / locate_symbol()
    detect - Heuristic locale and currency detection
    DetectionOptions, Assumption, DetectionResult - Detection configuration/outcome
    usd, cad, en_cad, fr_cad - Preset profiles
    is_valid_amount - Type guard for stripped amounts

Exceptions:
    CurrencyInfoError - Base exception class
    UnsupportedRuntimeError - Babel unavailable
    UnsupportedCurrencyError - Unknown ISO 4217 code (also a TypeError)
    InvalidLocaleError - Malformed or unknown locale (also a ValueError)

Submodules:
    currencyinfo.runtime - Formatting service, profiles, locator, registry
    currencyinfo.parsing - Detection
    currencyinfo.diagnostics - Error types, codes and formatting
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    CurrencyInfoError,
    InvalidLocaleError,
    UnsupportedCurrencyError,
    UnsupportedRuntimeError,
)
from .enums import PartType, SymbolPosition
from .parsing import Assumption, DetectionOptions, DetectionResult, detect, is_valid_amount
from .presets import cad, en_cad, fr_cad, usd
from .runtime import CurrencyProfile, NumberPart, ProfileRegistry, evict_profile, get_profile

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("currencyinfo")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Assumption",
    "CurrencyInfoError",
    "CurrencyProfile",
    "DetectionOptions",
    "DetectionResult",
    "InvalidLocaleError",
    "NumberPart",
    "PartType",
    "ProfileRegistry",
    "SymbolPosition",
    "UnsupportedCurrencyError",
    "UnsupportedRuntimeError",
    "__version__",
    "cad",
    "detect",
    "en_cad",
    "evict_profile",
    "fr_cad",
    "get_profile",
    "is_valid_amount",
    "usd",
]
