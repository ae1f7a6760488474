"""Monetary values and the outcome of one field evaluation cycle."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


def to_decimal(number: int | float | str | Decimal) -> Decimal:
    """Convert a plain number to a finite ``Decimal``.

    Floats go through ``str`` so ``987.65`` becomes ``Decimal("987.65")``
    rather than its binary expansion.
    """
    if isinstance(number, float):
        number = str(number)
    try:
        amount = Decimal(number)
    except InvalidOperation as e:
        raise ValueError(f"Not a number: {number!r}") from e
    if not amount.is_finite():
        raise ValueError(f"Amount must be finite: {number!r}")
    return amount


class FieldState(StrEnum):
    EMPTY = "empty"
    VALID = "valid"
    INVALID = "invalid"


class MonetaryValue(BaseModel):
    """An exact decimal amount in an ISO-4217 currency.

    The model never rounds; a field emits the amount exactly as displayed.
    """

    model_config = ConfigDict(frozen=True)

    amount: Decimal
    currency: str = Field(pattern=r"^[A-Z]{3}$")

    @classmethod
    def of(cls, number: int | float | str | Decimal, currency: str) -> MonetaryValue:
        return cls(amount=to_decimal(number), currency=currency)


class FieldResult(BaseModel):
    """What the field shows and emits after one validate/evaluate/format cycle."""

    text: str
    invalid: bool = False
    state: FieldState = FieldState.EMPTY
    value: MonetaryValue | None = None
