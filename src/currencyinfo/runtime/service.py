"""Locale-aware formatting service.

Defines the FormattingService protocol consumed by profile derivation and
its CLDR-backed implementation on top of Babel.

Architecture:
    - NumberPart: One typed fragment of a rendered amount
    - FormattingService: Protocol (canonicalize, supported_currencies,
      render, render_to_parts)
    - BabelFormattingService: Babel implementation. Babel renders strings
      only, so typed parts are recovered by tokenizing the rendered string
      against the locale's CLDR number symbols.

Design Principles:
    - Stateless (all locale data cached inside Babel / locale_utils)
    - Thread-safe (no shared mutable state)
    - CLDR-compliant (matches Intl.NumberFormat semantics closely enough
      for separator and symbol discovery)

Python 3.13+. Uses Babel for i18n.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, localcontext
from typing import Protocol, runtime_checkable

from currencyinfo.constants import MAX_RENDER_INTEGER_DIGITS, RENDER_PRECISION_MARGIN
from currencyinfo.core.babel_compat import get_babel_numbers, require_babel
from currencyinfo.diagnostics import ErrorTemplate, FormattingError
from currencyinfo.enums import PartType
from currencyinfo.locale_utils import canonicalize_locale, get_babel_locale

__all__ = [
    "BabelFormattingService",
    "FormattingService",
    "NumberPart",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NumberPart:
    """One typed fragment of a rendered currency amount.

    Attributes:
        type: Part type (integer, group, decimal, fraction, currency, ...)
        value: Rendered text of the part
    """

    type: PartType
    value: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, str]) -> NumberPart:
        """Build a part from an Intl-style {"type": ..., "value": ...} mapping."""
        return cls(type=PartType(data["type"]), value=data["value"])


@runtime_checkable
class FormattingService(Protocol):
    """Locale-aware currency rendering collaborator.

    Implementations must be deterministic: the same (locale, currency, number)
    always renders the same output. Profiles rely on this to be cacheable.
    """

    def canonicalize(self, locale_tag: str) -> str:
        """Return the canonical form of a locale tag.

        Raises:
            InvalidLocaleError: If the tag cannot be canonicalized
        """
        ...

    def supported_currencies(self) -> frozenset[str]:
        """Return the set of supported ISO 4217 currency codes."""
        ...

    def render(self, locale_tag: str, currency: str, number: Decimal) -> str:
        """Render a number as a currency string."""
        ...

    def render_to_parts(
        self, locale_tag: str, currency: str, number: Decimal
    ) -> tuple[NumberPart, ...]:
        """Render a number as an ordered sequence of typed parts."""
        ...


@functools.cache
def _cldr_currencies() -> frozenset[str]:
    """All currency codes known to CLDR (computed once per process)."""
    return frozenset(get_babel_numbers().list_currencies())


class BabelFormattingService:
    """FormattingService backed by Babel's CLDR data.

    Uses the locale's standard currency pattern with symbol display and the
    currency's CLDR fraction digits, i.e. the equivalent of
    ``new Intl.NumberFormat(locale, {style: "currency", currency})``.

    Thread Safety:
        Stateless; safe to share between threads and registries.

    Examples:
        >>> service = BabelFormattingService()
        >>> service.render("en-US", "USD", Decimal("1234.56"))
        '$1,234.56'
        >>> [part.type.value for part in service.render_to_parts("en-US", "USD", Decimal("1.5"))]
        ['currency', 'integer', 'decimal', 'fraction']
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def canonicalize(self, locale_tag: str) -> str:
        """Canonicalize a hyphenated BCP-47 tag (see locale_utils.canonicalize_locale)."""
        require_babel("BabelFormattingService.canonicalize")
        return canonicalize_locale(locale_tag)

    def supported_currencies(self) -> frozenset[str]:
        """Currency codes known to CLDR."""
        require_babel("BabelFormattingService.supported_currencies")
        return _cldr_currencies()

    def render(self, locale_tag: str, currency: str, number: Decimal) -> str:
        """Render an amount with the locale's standard currency pattern.

        Non-finite amounts (NaN) render as their Decimal string form, since
        CLDR patterns cannot place digits that do not exist.
        Amounts with more than MAX_RENDER_INTEGER_DIGITS integer digits are
        rejected.

        Raises:
            FormattingError: If the amount is too large or Babel rejects it
        """
        if not number.is_finite():
            return str(number)

        integer_digits = number.adjusted() + 1
        if integer_digits > MAX_RENDER_INTEGER_DIGITS:
            reason = f"{integer_digits} integer digits exceed {MAX_RENDER_INTEGER_DIGITS}"
            raise FormattingError(ErrorTemplate.formatting_failed(currency, locale_tag, reason))

        babel_numbers = get_babel_numbers()
        try:
            # Babel quantizes under the active context; 28 digits is not enough
            # for amounts above ~10**26.
            with localcontext() as context:
                context.prec = max(context.prec, integer_digits + RENDER_PRECISION_MARGIN)
                return str(
                    babel_numbers.format_currency(
                        number,
                        currency,
                        locale=get_babel_locale(locale_tag),
                        currency_digits=True,
                        format_type="standard",
                    )
                )
        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            logger.debug("Babel failed to render %s %s in %s: %s", currency, number, locale_tag, e)
            diagnostic = ErrorTemplate.formatting_failed(currency, locale_tag, str(e))
            raise FormattingError(diagnostic) from e

    def render_to_parts(
        self, locale_tag: str, currency: str, number: Decimal
    ) -> tuple[NumberPart, ...]:
        """Render an amount and split it into typed parts.

        Example (CAD, fr-CA, 123456789.123):
            integer '123', group ' ', integer '456', group ' ', integer '789',
            decimal ',', fraction '12', literal ' ', currency '$'
        """
        babel_numbers = get_babel_numbers()
        babel_locale = get_babel_locale(locale_tag)
        rendered = self.render(locale_tag, currency, number)

        return _tokenize(
            rendered,
            currency_symbol=babel_numbers.get_currency_symbol(currency, locale=babel_locale),
            group_symbol=babel_numbers.get_group_symbol(locale=babel_locale),
            decimal_symbol=babel_numbers.get_decimal_symbol(locale=babel_locale),
            minus_symbol=babel_numbers.get_minus_sign_symbol(locale=babel_locale),
            plus_symbol=babel_numbers.get_plus_sign_symbol(locale=babel_locale),
        )


def _tokenize(
    rendered: str,
    *,
    currency_symbol: str,
    group_symbol: str,
    decimal_symbol: str,
    minus_symbol: str,
    plus_symbol: str,
) -> tuple[NumberPart, ...]:
    """Split a rendered amount into typed parts.

    Digits before the decimal separator are integer parts, after it fraction
    parts. A group symbol only counts as a group part between integer digits;
    anything unrecognized accumulates into literal parts.
    """
    parts: list[NumberPart] = []
    literal: list[str] = []
    seen_decimal = False
    seen_digits = False
    pos = 0
    length = len(rendered)

    def flush_literal() -> None:
        if literal:
            parts.append(NumberPart(PartType.LITERAL, "".join(literal)))
            literal.clear()

    def emit(part_type: PartType, value: str) -> None:
        flush_literal()
        parts.append(NumberPart(part_type, value))

    while pos < length:
        char = rendered[pos]
        previous = parts[-1].type if parts and not literal else None

        if currency_symbol and rendered.startswith(currency_symbol, pos):
            emit(PartType.CURRENCY, currency_symbol)
            pos += len(currency_symbol)
        elif char.isdigit():
            end = pos
            while end < length and rendered[end].isdigit():
                end += 1
            emit(PartType.FRACTION if seen_decimal else PartType.INTEGER, rendered[pos:end])
            seen_digits = True
            pos = end
        elif (
            not seen_decimal
            and previous is PartType.INTEGER
            and rendered.startswith(decimal_symbol, pos)
        ):
            emit(PartType.DECIMAL, decimal_symbol)
            seen_decimal = True
            pos += len(decimal_symbol)
        elif (
            not seen_decimal
            and previous is PartType.INTEGER
            and rendered.startswith(group_symbol, pos)
            and pos + len(group_symbol) < length
            and rendered[pos + len(group_symbol)].isdigit()
        ):
            emit(PartType.GROUP, group_symbol)
            pos += len(group_symbol)
        elif minus_symbol and rendered.startswith(minus_symbol, pos) and not seen_digits:
            emit(PartType.MINUS_SIGN, minus_symbol)
            pos += len(minus_symbol)
        elif plus_symbol and rendered.startswith(plus_symbol, pos) and not seen_digits:
            emit(PartType.PLUS_SIGN, plus_symbol)
            pos += len(plus_symbol)
        else:
            literal.append(char)
            pos += 1

    flush_literal()
    return tuple(parts)
