"""Enumerations for CurrencyInfo type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class SymbolPosition(StrEnum):
    """Where a currency symbol sits relative to the numeric text.

    StrEnum provides automatic string conversion: str(SymbolPosition.LEADING) == "leading"
    """

    LEADING = "leading"
    """Symbol is the first element: $1.50"""

    TRAILING = "trailing"
    """Symbol is the last element: 1,50 $"""

    WITHIN = "within"
    """Symbol is present but neither first nor last: 1$50"""

    MISSING = "missing"
    """Symbol is not present at all: 1.50"""


class PartType(StrEnum):
    """Type of a rendered number part.

    Values mirror the part types of ECMAScript Intl.NumberFormat.formatToParts()
    so that parts produced by other formatting services compare equal.
    """

    INTEGER = "integer"
    GROUP = "group"
    DECIMAL = "decimal"
    FRACTION = "fraction"
    CURRENCY = "currency"
    LITERAL = "literal"
    MINUS_SIGN = "minusSign"
    PLUS_SIGN = "plusSign"


__all__ = [
    "PartType",
    "SymbolPosition",
]
