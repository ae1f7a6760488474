"""Resolve locale numeral conventions from CLDR data (via Babel)."""
from __future__ import annotations

from functools import lru_cache

import structlog
from babel import Locale, UnknownLocaleError
from babel.numbers import (
    get_currency_precision,
    get_currency_symbol,
    get_decimal_symbol,
    get_group_symbol,
    get_territory_currencies,
    list_currencies,
)

from ..config import Settings, get_settings
from ..models.numeral import WHITESPACE_SEPARATORS, NumeralProfile, RoundingMode

logger = structlog.get_logger(__name__)

# Babel reports "no grouping" as a group size of 1000
_NO_GROUPING = 1000


def normalize_locale_id(locale: str | Locale) -> str:
    """Accept ``de-DE``, ``de_DE`` or a Babel ``Locale`` and return ``de_DE``."""
    if isinstance(locale, Locale):
        return str(locale)
    return (locale or "").strip().replace("-", "_")


def resolve_profile(
    locale: str | Locale,
    currency_code: str | None = None,
    rounding_mode: RoundingMode | str | None = None,
    settings: Settings | None = None,
) -> NumeralProfile:
    """Return the numeral profile for *locale*.

    Fraction digits follow *currency_code* when given, otherwise the
    current currency of the locale's territory. Unknown locales resolve to
    the default Western profile; this function never raises for bad input.
    """
    settings = settings or get_settings()
    mode = RoundingMode(rounding_mode) if rounding_mode else settings.rounding_mode
    return _resolve(
        normalize_locale_id(locale),
        (currency_code or "").upper() or None,
        mode,
        settings.default_fraction_digits,
    )


@lru_cache(maxsize=256)
def _resolve(
    locale_id: str,
    currency_code: str | None,
    rounding_mode: RoundingMode,
    default_fraction_digits: int,
) -> NumeralProfile:
    try:
        parsed = Locale.parse(locale_id)
    except (UnknownLocaleError, ValueError, TypeError) as e:
        logger.info("locale_profile_fallback", locale=locale_id, error=str(e))
        return NumeralProfile(
            locale=locale_id or "und",
            currency_fraction_digits=_fraction_digits(currency_code, None, default_fraction_digits),
            rounding_mode=rounding_mode,
        )

    decimal_separator = get_decimal_symbol(parsed)
    group_separator = get_group_symbol(parsed)
    fraction_digits = _fraction_digits(currency_code, parsed.territory, default_fraction_digits)

    if len(decimal_separator) != 1 or len(group_separator) != 1 or decimal_separator == group_separator:
        logger.info(
            "locale_profile_fallback",
            locale=locale_id,
            decimal_separator=decimal_separator,
            group_separator=group_separator,
        )
        return NumeralProfile(
            locale=locale_id,
            currency_fraction_digits=fraction_digits,
            rounding_mode=rounding_mode,
        )

    if group_separator in WHITESPACE_SEPARATORS:
        group_separators = WHITESPACE_SEPARATORS
    else:
        group_separators = frozenset({group_separator})

    return NumeralProfile(
        locale=str(parsed),
        decimal_separator=decimal_separator,
        group_separator=group_separator,
        group_separators=group_separators,
        group_lengths=_group_lengths(parsed),
        currency_fraction_digits=fraction_digits,
        rounding_mode=rounding_mode,
    )


def _group_lengths(locale: Locale) -> tuple[int, ...]:
    """Group sizes of the locale's standard decimal pattern.

    ``#,##,##0.###`` gives ``(3, 2)``; ``#,##0.###`` gives ``(3,)``.
    """
    pattern = locale.decimal_formats.get(None)
    if pattern is None:
        return (3,)
    primary, secondary = pattern.grouping
    if primary >= _NO_GROUPING:
        return ()
    if secondary == primary or secondary >= _NO_GROUPING:
        return (primary,)
    return (primary, secondary)


def _fraction_digits(currency_code: str | None, territory: str | None, default: int) -> int:
    if currency_code:
        return get_currency_precision(currency_code)
    if territory:
        currencies = get_territory_currencies(territory)
        if currencies:
            return get_currency_precision(currencies[0])
    return default


def currency_symbol(currency_code: str, locale: str | Locale) -> str:
    """Display symbol for *currency_code* in *locale* (``€``, ``$``, ...).

    Falls back to the code itself when the locale is unknown.
    """
    try:
        return get_currency_symbol(currency_code, locale=Locale.parse(normalize_locale_id(locale)))
    except (UnknownLocaleError, ValueError, TypeError):
        return currency_code


def available_currency_codes() -> list[str]:
    """All ISO-4217 codes known to CLDR, sorted."""
    return sorted(list_currencies())


def clear_profile_cache() -> None:
    _resolve.cache_clear()
