"""Amount field controller: one validate → evaluate → format cycle per edit.

``AmountField`` owns the raw text, the selected currency and the locale of
one money input. Each edit runs a single cycle and moves the field between
the EMPTY, VALID and INVALID states. Invalid text is kept verbatim and never
clears the last valid value.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Iterable

import structlog
from babel import Locale

from .config import Settings, get_settings
from .exceptions import ConfigurationError, EvaluationFailure, LexicalInvalid
from .international.locale_profile import (
    available_currency_codes,
    currency_symbol,
    normalize_locale_id,
    resolve_profile,
)
from .international.number_formatting import format_amount, round_amount
from .international.number_parsing import parse_numeral
from .models.money import FieldResult, FieldState, MonetaryValue, to_decimal
from .models.numeral import NumeralProfile
from .parsing.evaluator import evaluate
from .parsing.lexer import is_well_formed

logger = structlog.get_logger(__name__)


class AmountField:
    """Text state and evaluation cycle of a money input.

    Args:
        locale: display/parse locale (``de-DE``, ``de_DE`` or a Babel ``Locale``).
        calculable: accept arithmetic expressions instead of plain amounts.
        initial_value: value presented at construction.
        allowed_currency_codes: currencies offered by the surrounding widget;
            defaults to every ISO-4217 code known to CLDR.
        currency_code: initially selected currency, when there is no
            *initial_value*.
        currency_read_only: show the currency symbol as a prefix instead of
            a selector.
        allow_empty: whether blank text means "no value" (otherwise invalid).
    """

    def __init__(
        self,
        locale: str | Locale | None = None,
        *,
        calculable: bool = False,
        initial_value: MonetaryValue | None = None,
        allowed_currency_codes: Iterable[str] | None = None,
        currency_code: str | None = None,
        currency_read_only: bool = False,
        allow_empty: bool = True,
        settings: Settings | None = None,
    ):
        self._settings = settings or get_settings()
        if allowed_currency_codes is None:
            self._allowed_currency_codes = available_currency_codes()
        else:
            self._allowed_currency_codes = list(allowed_currency_codes)

        if initial_value is not None and initial_value.currency not in self._allowed_currency_codes:
            raise ConfigurationError(
                f"The initial value's currency code '{initial_value.currency}' "
                "is not in the list of currency codes.",
                details={"currency": initial_value.currency},
            )

        self._locale = normalize_locale_id(locale or self._settings.default_locale)
        self._calculable = calculable
        self._allow_empty = allow_empty
        self.currency_read_only = currency_read_only

        self._text = ""
        self._state = FieldState.EMPTY
        self._exact: Decimal | None = None
        self._amount: Decimal | None = None
        self._currency: str | None = currency_code or None
        self._value: MonetaryValue | None = None

        if initial_value is not None:
            self.set_value(initial_value)

    # ── Read-only state ────────────────────────────────────────────────────

    @property
    def text(self) -> str:
        return self._text

    @property
    def state(self) -> FieldState:
        return self._state

    @property
    def invalid(self) -> bool:
        return self._state is FieldState.INVALID

    @property
    def value(self) -> MonetaryValue | None:
        return self._value

    @property
    def currency(self) -> str | None:
        return self._currency

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def calculable(self) -> bool:
        return self._calculable

    @property
    def allowed_currency_codes(self) -> list[str]:
        return list(self._allowed_currency_codes)

    @property
    def profile(self) -> NumeralProfile:
        return resolve_profile(self._locale, self._currency, settings=self._settings)

    @property
    def currency_prefix(self) -> str | None:
        """Currency symbol shown in front of the amount when the currency is read-only."""
        if not self.currency_read_only or not self._currency:
            return None
        return currency_symbol(self._currency, self._locale)

    @property
    def result(self) -> FieldResult:
        return FieldResult(text=self._text, invalid=self.invalid, state=self._state, value=self._value)

    # ── Edits ──────────────────────────────────────────────────────────────

    def set_text(self, text: str) -> FieldResult:
        """Run one cycle on what the user typed."""
        self._text = text
        if not text.strip():
            if self._allow_empty:
                return self._empty()
            return self._mark_invalid("EMPTY_NOT_ALLOWED", "Amount is required")
        return self._evaluate()

    def set_currency(self, currency_code: str | None) -> FieldResult:
        """Select a currency and re-render the current amount for it.

        A valid amount is re-presented from its exact value; invalid text is
        re-evaluated. Clearing the currency (``None``) emits nothing new: the
        last ``MonetaryValue`` stays, with its old currency, until the next
        cycle with a currency or an explicit clear.
        """
        self._currency = currency_code or None
        if not self._currency:
            return self.result
        if self._state is FieldState.VALID and self._exact is not None:
            self._present(self._exact)
            return self.result
        if not self._text.strip():
            return self.result
        return self._evaluate()

    def set_locale(self, locale: str | Locale) -> FieldResult:
        """Switch locale, re-rendering the last valid amount in the new conventions.

        Rendering starts from the exact amount, so a locale with fewer
        fraction digits does not lose precision for a later currency change.
        """
        self._locale = normalize_locale_id(locale)
        if self._state is FieldState.VALID and self._exact is not None:
            self._present(self._exact)
        return self.result

    def set_amount(self, number: int | float | str | Decimal) -> FieldResult:
        """Present a plain number as if it had been typed and accepted."""
        self._present(to_decimal(number))
        return self.result

    def set_value(self, value: MonetaryValue | None) -> FieldResult:
        """Present a model value; ``None`` empties the amount but keeps the currency.

        The emitted value carries the amount as displayed, rounded to the
        currency's fraction digits.
        """
        if value is None:
            self._text = ""
            return self._empty()
        self._currency = value.currency
        self._present(value.amount)
        return self.result

    def clear(self) -> FieldResult:
        """Empty both amount and currency."""
        self._currency = None
        self._text = ""
        return self._empty()

    # ── Cycle ──────────────────────────────────────────────────────────────

    def _evaluate(self) -> FieldResult:
        profile = self.profile
        text = self._text
        try:
            if not is_well_formed(text, profile, self._calculable, allow_empty=False):
                raise LexicalInvalid(
                    f"Not a well-formed amount: {text!r}",
                    details={"locale": profile.locale, "calculable": self._calculable},
                )
            if self._calculable:
                amount = evaluate(text, profile, self._settings)
            else:
                amount = parse_numeral(text, profile)
        except (LexicalInvalid, EvaluationFailure) as e:
            return self._mark_invalid(e.code, str(e))

        self._present(amount)
        logger.debug(
            "amount_evaluated",
            locale=profile.locale,
            amount=self._exact,
            text=self._text,
            currency=self._currency,
        )
        return self.result

    def _present(self, amount: Decimal) -> None:
        profile = self.profile
        self._exact = amount
        self._amount = round_amount(amount, profile)
        self._text = format_amount(self._amount, profile)
        self._state = FieldState.VALID
        if self._currency:
            self._value = MonetaryValue(amount=self._amount, currency=self._currency)

    def _mark_invalid(self, code: str, message: str) -> FieldResult:
        logger.info(
            "amount_invalid",
            code=code,
            error=message,
            locale=self._locale,
            calculable=self._calculable,
        )
        self._state = FieldState.INVALID
        return self.result

    def _empty(self) -> FieldResult:
        self._state = FieldState.EMPTY
        self._exact = None
        self._amount = None
        self._value = None
        return self.result
