"""Hypothesis strategies for CurrencyInfo property-based testing.

Usage:
    from tests.strategies import currency_amounts, profile_keys

Event-Emitting Strategies (HypoFuzz-Optimized):
    - currency_amounts
    - profile_keys
    - noise_text
"""

from .currency import (
    ROUND_TRIP_PROFILE_KEYS,
    currency_amounts,
    noise_text,
    profile_keys,
)

__all__ = [
    "ROUND_TRIP_PROFILE_KEYS",
    "currency_amounts",
    "noise_text",
    "profile_keys",
]
