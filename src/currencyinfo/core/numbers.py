"""Plain decimal parsing shared by profiles and detection.

After a profile removes its grouping separators and currency symbol and
rewrites its decimal separator to ".", what remains must be a plain decimal
literal. Anything else means the profile does not explain the input, which
is reported as Decimal("NaN") rather than an exception.

Accepted grammar (surrounding whitespace ignored):
    [+-] digits [. digits] [(e|E) [+-] digits]
    [+-] . digits [(e|E) [+-] digits]

Deliberately rejected even though Decimal() accepts them: empty strings,
"Infinity"/"NaN" spellings and underscore digit separators.

Thread-safe. Python 3.13+. Zero external dependencies.
"""

import re
from decimal import Decimal, InvalidOperation

__all__ = ["NOT_A_NUMBER", "parse_plain_decimal"]

NOT_A_NUMBER: Decimal = Decimal("NaN")

_PLAIN_DECIMAL_PATTERN: re.Pattern[str] = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)


def parse_plain_decimal(text: str) -> Decimal:
    """Parse a plain decimal literal, returning NaN on failure.

    Args:
        text: Candidate literal (e.g., "1234.56", " -12 ", "1e3")

    Returns:
        Parsed Decimal, or Decimal("NaN") if text is not a plain literal

    Examples:
        >>> parse_plain_decimal("1234.56")
        Decimal('1234.56')
        >>> parse_plain_decimal("1 234.56")
        Decimal('NaN')
        >>> parse_plain_decimal("")
        Decimal('NaN')
    """
    candidate = text.strip()
    if not _PLAIN_DECIMAL_PATTERN.fullmatch(candidate):
        return NOT_A_NUMBER
    try:
        return Decimal(candidate)
    except InvalidOperation:
        return NOT_A_NUMBER
