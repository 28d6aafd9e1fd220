"""Heuristic currency detection.

Given a formatted amount of unknown origin, detect() tries every configured
(currency, locale) profile, keeps the ones that can strip the input to a
number and scores how well each explains it.

Scoring (raw points, clamped to 0..6 then divided by 6):
    - Re-rendering the stripped amount reproduces the input exactly:
      immediate result with score 1.0
    - Grouping separators present: +1, more than one: +1
    - Exactly one decimal separator: +2 (more than one disqualifies)
    - Currency symbol present: +1, then +1 if it sits where the profile
      would put it, -1 if not

Candidates are visited currency by currency, and within a currency locale by
locale in country-major order ("en-US", "es-US", "fr-US", "en-CA", ...).
A candidate whose re-rendering fails (amounts beyond the renderable range)
is skipped. Each locale keeps its best candidate; a later candidate replaces
it only with a strictly greater score. The winner is the highest score above zero,
earliest on ties.

Thread-safe: the scoreboard is local to each call; profiles come from a
thread-safe ProfileRegistry.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from currencyinfo.constants import MAX_RAW_SCORE, MIN_RAW_SCORE, PERFECT_SCORE
from currencyinfo.diagnostics import FormattingError
from currencyinfo.runtime.profile import CurrencyProfile
from currencyinfo.runtime.registry import ProfileRegistry, get_default_registry

from .options import DetectionOptions

__all__ = ["DetectionResult", "detect", "score_candidate"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DetectionResult:
    """Outcome of a successful detection.

    Attributes:
        locale: Canonical locale tag of the matching profile
        amount: Stripped amount (Decimal("NaN") for an assumed fallback that
            cannot read the input)
        formatted: The amount re-rendered by the matching profile
        original: The input, as a string
        profile: The matching CurrencyProfile
        score: Confidence from 0.0 (assumed) to 1.0 (exact re-render)
    """

    locale: str
    amount: Decimal
    formatted: str
    original: str
    profile: CurrencyProfile
    score: float

    @property
    def currency(self) -> str:
        """ISO 4217 code of the matching profile."""
        return self.profile.currency

    @classmethod
    def from_profile(cls, profile: CurrencyProfile, original: str, score: float) -> DetectionResult:
        """Strip and re-render the input through a profile."""
        amount = profile.strip(original)
        return cls(
            locale=profile.locale,
            amount=amount,
            formatted=profile.format(amount),
            original=original,
            profile=profile,
            score=score,
        )


def score_candidate(profile: CurrencyProfile, formatted: str, reformatted: str) -> int | None:
    """Compute the raw (unclamped) score of one candidate profile.

    Args:
        profile: Candidate profile
        formatted: Input string
        reformatted: The input stripped and re-rendered by the profile

    Returns:
        Raw score (-1..6), or None if the input has more than one of the
        profile's decimal separators
    """
    decimals = len(profile.decimal_pattern().findall(formatted))
    if decimals > 1:
        return None
    groups = len(profile.group_pattern().findall(formatted))
    symbols = len(profile.symbol_pattern().findall(formatted))

    score = 0
    if groups:
        score += 1
        if groups > 1:
            score += 1
    if decimals:
        score += 2
    if symbols:
        score += 1
        if profile.locate_symbol(formatted) == profile.locate_symbol(reformatted):
            score += 1
        else:
            score -= 1
    return score


@dataclass(frozen=True, slots=True)
class _Candidate:
    """Best scoring profile seen so far for one locale."""

    score: int
    profile: CurrencyProfile
    amount: Decimal
    reformatted: str


def _clamp(raw: int) -> int:
    return max(MIN_RAW_SCORE, min(MAX_RAW_SCORE, raw))


def detect(
    formatted: object,
    options: DetectionOptions | None = None,
    *,
    registry: ProfileRegistry | None = None,
    **overrides: object,
) -> DetectionResult | None:
    """Detect the currency and locale of a formatted amount.

    Args:
        formatted: Formatted amount; any value is converted with str()
        options: Detection configuration (default: DetectionOptions())
        registry: Profile registry (default: get_default_registry())
        **overrides: Replace individual option fields (currencies,
            languages, countries, assume)

    Returns:
        Best-scoring DetectionResult, a zero-score result built from the
        assumption when nothing matches, or None. Never raises for
        unrecognizable input.

    Raises:
        TypeError: If options or overrides are malformed

    Examples:
        >>> detect("$1,234.56").locale
        'en-US'
        >>> detect("1 234,56 $").locale
        'fr-CA'
        >>> detect("abc") is None
        True
        >>> detect(123, assume={"locale": "en-US", "currency": "USD"}).score
        0.0
    """
    original = str(formatted)
    options = (options if options is not None else DetectionOptions()).with_overrides(**overrides)
    if registry is None:
        registry = get_default_registry()
    locales = options.locales

    scoreboard: dict[str, _Candidate] = {}
    for currency in options.currencies:
        for locale in locales:
            profile, error = registry.try_get(currency, locale)
            if profile is None:
                logger.debug("Skipping %s|%s: %s", currency, locale, error)
                continue

            amount = profile.strip(original)
            if amount.is_nan():
                continue

            try:
                reformatted = profile.format(amount)
            except FormattingError as e:
                logger.debug("Skipping %s|%s: %s", currency, profile.locale, e)
                continue

            if reformatted == original:
                logger.debug("Exact match for %r: %s|%s", original, currency, profile.locale)
                return DetectionResult(
                    locale=profile.locale,
                    amount=amount,
                    formatted=reformatted,
                    original=original,
                    profile=profile,
                    score=PERFECT_SCORE,
                )

            raw = score_candidate(profile, original, reformatted)
            logger.debug("Scored %r as %s|%s: %s", original, currency, profile.locale, raw)
            if raw is None:
                continue

            score = _clamp(raw)
            best = scoreboard.get(profile.locale)
            if best is None or score > best.score:
                scoreboard[profile.locale] = _Candidate(score, profile, amount, reformatted)

    winner: _Candidate | None = None
    for candidate in scoreboard.values():
        if candidate.score > (winner.score if winner else 0):
            winner = candidate
    if winner is not None:
        return DetectionResult(
            locale=winner.profile.locale,
            amount=winner.amount,
            formatted=winner.reformatted,
            original=original,
            profile=winner.profile,
            score=winner.score / MAX_RAW_SCORE,
        )

    assumption = options.assumption
    if assumption is not None:
        locale, currency = assumption
        profile, error = registry.try_get(currency, locale)
        if profile is None:
            logger.debug("Assumed profile %s|%s unavailable: %s", currency, locale, error)
            return None
        try:
            result = DetectionResult.from_profile(profile, original, 0.0)
        except FormattingError as e:
            logger.debug(
                "Assumed profile %s|%s cannot render %r: %s", currency, locale, original, e
            )
            return None
        logger.debug("No match for %r, assuming %s|%s", original, currency, locale)
        return result

    return None
