"""Currency runtime package.

Provides the formatting service, profile derivation, symbol location and the
profile registry. Depends on Babel for CLDR data.

Python 3.13+.
"""

from .locator import classify_index, locate_symbol
from .profile import (
    CurrencyProfile,
    check_for_input_errors,
    derive_profile,
    validate_currency,
    validate_locale,
    validate_runtime,
)
from .registry import ProfileRegistry, evict_profile, get_default_registry, get_profile
from .service import BabelFormattingService, FormattingService, NumberPart

__all__ = [
    "BabelFormattingService",
    "CurrencyProfile",
    "FormattingService",
    "NumberPart",
    "ProfileRegistry",
    "check_for_input_errors",
    "classify_index",
    "derive_profile",
    "evict_profile",
    "get_default_registry",
    "get_profile",
    "locate_symbol",
    "validate_currency",
    "validate_locale",
    "validate_runtime",
]
