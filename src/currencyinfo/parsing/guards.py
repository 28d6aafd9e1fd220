"""Type guard functions for stripped amounts.

Profile.strip() and detection results report "no usable number" as
Decimal("NaN"). Type guards let callers narrow that for mypy.

Python 3.13+ with TypeIs support (PEP 742).

Note: All guards accept None and return False.

Example:
    >>> from currencyinfo.parsing.guards import is_valid_amount
    >>> amount = profile.strip("$1,234.56")
    >>> if is_valid_amount(amount):
    ...     # mypy knows amount is a finite Decimal
    ...     total = amount.quantize(Decimal("0.01"))
"""

from decimal import Decimal
from typing import TypeIs

__all__ = ["is_valid_amount"]


def is_valid_amount(value: Decimal | None) -> TypeIs[Decimal]:
    """Type guard: Check if a stripped amount is usable (not None/NaN/Infinity).

    Args:
        value: Decimal from CurrencyProfile.strip() or DetectionResult.amount

    Returns:
        True if value is a finite Decimal, False otherwise
    """
    return value is not None and value.is_finite()
