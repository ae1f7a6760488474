"""Locale-aware parsing of a single numeral into an exact decimal."""
from __future__ import annotations

import re
from decimal import Decimal
from functools import lru_cache

from ..exceptions import ParseFailure
from ..models.numeral import NumeralProfile


@lru_cache(maxsize=128)
def _numeral_patterns(profile: NumeralProfile) -> tuple[re.Pattern, re.Pattern]:
    groups = re.escape("".join(sorted(profile.group_separators)))
    decimal = re.escape(profile.decimal_separator)
    numeral = re.compile(rf"([-+]?)([0-9]+(?:[{groups}][0-9]+)*)(?:{decimal}([0-9]+))?")
    return numeral, re.compile(rf"[{groups}]")


def parse_numeral(raw_string: str, profile: NumeralProfile) -> Decimal:
    """Parse one numeral written with *profile*'s separators.

    Handles:
    - Grouped: "123.456,79" (de) → 123456.79, "1,23,456.789" (hi) → 123456.789
    - Ungrouped: "123456,789" (de) → 123456.789
    - Whitespace grouping: "123 456,789" or "123\\u00a0456,789" (pl)
    - Sign: "-123,456", "+5"

    Group lengths are not enforced. Empty groups ("5..214,12"), a trailing
    or leading separator, or separators after the decimal separator are
    rejected with ``ParseFailure``.
    """
    cleaned = raw_string.strip()
    if not cleaned:
        raise ParseFailure("Empty numeral")

    numeral, group_separator = _numeral_patterns(profile)
    match = numeral.fullmatch(cleaned)
    if not match:
        raise ParseFailure(
            f"Not a numeral in {profile.locale}: {raw_string!r}",
            details={"locale": profile.locale},
        )

    sign, integer, fraction = match.groups()
    digits = group_separator.sub("", integer)
    if fraction:
        return Decimal(f"{sign}{digits}.{fraction}")
    return Decimal(f"{sign}{digits}")
