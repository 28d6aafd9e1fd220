"""Currency detection: recover the locale and currency behind a formatted amount.

This module provides the inverse of CurrencyProfile.format():
- Formatting: number + known profile -> localized string
- Detection: localized string -> best-matching profile + number

Detection never raises for unrecognizable input; it returns None (or a
zero-score assumed result).

Public API:
    detect - Returns DetectionResult | None
    DetectionOptions - Candidate currencies, languages, countries, fallback
    Assumption - Fallback (locale, currency) pair
    DetectionResult - Matching profile, amount and confidence score

    Type Guards:
        is_valid_amount - TypeIs guard for finite Decimal

Example:
    >>> from currencyinfo.parsing import detect, is_valid_amount
    >>> result = detect("1 234,56 $")
    >>> if result is not None and is_valid_amount(result.amount):
    ...     total = result.amount.quantize(Decimal("0.01"))

Python 3.13+.
"""

from .detection import DetectionResult, detect, score_candidate
from .guards import is_valid_amount
from .options import Assumption, DetectionOptions, assumed_pair

__all__ = [
    "Assumption",
    "DetectionOptions",
    "DetectionResult",
    "assumed_pair",
    "detect",
    "is_valid_amount",
    "score_candidate",
]
