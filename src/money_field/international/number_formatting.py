"""Render decimals as locale-correct editable amount text."""
from __future__ import annotations

import re
from decimal import Decimal, localcontext
from typing import Sequence

from ..models.numeral import NumeralProfile

# Some locales render negatives with U+2212 MINUS SIGN
_MINUS_SIGNS = str.maketrans({"\u2212": "-", "\u2012": "-", "\u2013": "-"})


def round_amount(value: Decimal, profile: NumeralProfile) -> Decimal:
    """Quantize *value* to the profile's currency fraction digits."""
    if not value.is_finite():
        raise ValueError(f"Cannot round non-finite amount: {value}")
    quantum = Decimal(1).scaleb(-profile.currency_fraction_digits)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + profile.currency_fraction_digits + 2)
        return value.quantize(quantum, rounding=str(profile.rounding_mode))


def group_digits(digits: str, group_lengths: Sequence[int], separator: str) -> str:
    """Insert *separator* into an integer digit string.

    The group next to the decimal point uses the first length, each group
    further left uses the next one, and the last length repeats:
    ``group_digits("123456", (3, 2), ",") == "1,23,456"``.
    """
    if not group_lengths:
        return digits
    groups: list[str] = []
    end = len(digits)
    index = 0
    while end > 0:
        length = group_lengths[min(index, len(group_lengths) - 1)]
        start = max(0, end - length)
        groups.append(digits[start:end])
        end = start
        index += 1
    return separator.join(reversed(groups))


def strip_adornment(text: str, profile: NumeralProfile) -> str:
    """Keep only digits, sign and the profile's separators.

    Removes currency symbols, ISO codes and bidi marks that a currency
    formatter adds, e.g. ``"1.234,50\\u00a0€"`` → ``"1.234,50"``.
    """
    allowed = re.escape(profile.separators)
    cleaned = re.sub(rf"[^0-9\-{allowed}]", "", text.translate(_MINUS_SIGNS))
    return cleaned.strip()


def format_amount(value: Decimal, profile: NumeralProfile) -> str:
    """Canonical editable text for *value* under *profile*.

    ``format_amount(Decimal("123456.789"), de_profile) == "123.456,79"``.
    Zero is never rendered with a sign.
    """
    rounded = round_amount(value, profile)
    sign = "-" if rounded < 0 else ""
    integer, _, fraction = f"{abs(rounded):f}".partition(".")
    text = sign + group_digits(integer, profile.group_lengths, profile.group_separator)
    if fraction:
        text += profile.decimal_separator + fraction
    return strip_adornment(text, profile)

