"""Locale numeral conventions used to read and render amounts.

A ``NumeralProfile`` is resolved once per locale (and currency) by
``money_field.international.locale_profile`` and is immutable afterwards.
"""

from __future__ import annotations

import decimal
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator

NO_BREAK_SPACE = "\u00a0"
NARROW_NO_BREAK_SPACE = "\u202f"
WHITESPACE_SEPARATORS = frozenset({" ", NO_BREAK_SPACE, NARROW_NO_BREAK_SPACE})


class RoundingMode(StrEnum):
    """Rounding modes, valued as the matching ``decimal`` module constants."""

    HALF_UP = decimal.ROUND_HALF_UP
    HALF_EVEN = decimal.ROUND_HALF_EVEN
    HALF_DOWN = decimal.ROUND_HALF_DOWN
    UP = decimal.ROUND_UP
    DOWN = decimal.ROUND_DOWN
    CEILING = decimal.ROUND_CEILING
    FLOOR = decimal.ROUND_FLOOR


class NumeralProfile(BaseModel):
    """Separators, grouping and currency rounding for one locale.

    ``group_lengths`` lists group sizes starting at the decimal point; the
    last entry repeats for all remaining groups, so ``(3,)`` is Western
    grouping and ``(3, 2)`` is Indian grouping. An empty tuple disables
    grouping on output.
    """

    model_config = ConfigDict(frozen=True)

    locale: str = "en_US"
    decimal_separator: str = Field(default=".", min_length=1, max_length=1)
    group_separator: str = Field(default=",", min_length=1, max_length=1)
    group_separators: frozenset[str] = frozenset({","})
    group_lengths: tuple[int, ...] = (3,)
    currency_fraction_digits: int = Field(default=2, ge=0)
    rounding_mode: RoundingMode = RoundingMode.HALF_EVEN

    @model_validator(mode="after")
    def _check_separators(self) -> NumeralProfile:
        if self.group_separator not in self.group_separators:
            raise ValueError("group_separator must be one of group_separators")
        if self.decimal_separator in self.group_separators:
            raise ValueError("decimal_separator cannot also be a group separator")
        if any(length < 1 for length in self.group_lengths):
            raise ValueError("group lengths must be positive")
        return self

    @property
    def separators(self) -> str:
        """All characters that may appear between digits of one numeral."""
        return self.decimal_separator + "".join(sorted(self.group_separators))

    @property
    def uses_whitespace_grouping(self) -> bool:
        return self.group_separator in WHITESPACE_SEPARATORS
