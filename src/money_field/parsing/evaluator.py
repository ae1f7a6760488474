"""Recursive-descent evaluator for calculable amounts.

Grammar::

    expression := term (('+' | '-') term)*
    term       := factor (('*' | '/') factor)*
    factor     := ('+' | '-') factor | primary ('^' factor)?
    primary    := NUMBER | '(' expression ')'

All arithmetic is exact ``Decimal`` arithmetic. Quotients are quantized to
the profile's currency fraction digits.
"""
from __future__ import annotations

import math
from decimal import Decimal, DecimalException, DivisionByZero, InvalidOperation, Overflow, localcontext

from ..config import Settings, get_settings
from ..exceptions import ArithmeticFailure, ParseFailure
from ..international.number_parsing import parse_numeral
from ..models.numeral import NumeralProfile
from .lexer import number_chars


class _Parser:
    """Cursor over one expression; lives for a single ``evaluate`` call."""

    def __init__(self, text: str, profile: NumeralProfile, settings: Settings):
        self._text = text
        self._pos = 0
        self._profile = profile
        self._max_exponent = settings.max_integer_exponent
        self._number_chars = frozenset(number_chars(profile))
        self._quantum = Decimal(1).scaleb(-profile.currency_fraction_digits)

    def parse(self) -> Decimal:
        value = self._expression()
        ch = self._peek()
        if ch == ")":
            raise ParseFailure("Unbalanced ')'", self._pos)
        if ch is not None:
            raise ParseFailure(f"Unexpected: {ch!r}", self._pos)
        return value

    def _peek(self) -> str | None:
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1
        return self._text[self._pos] if self._pos < len(self._text) else None

    def _eat(self, ch: str) -> bool:
        if self._peek() == ch:
            self._pos += 1
            return True
        return False

    def _expression(self) -> Decimal:
        x = self._term()
        while True:
            if self._eat("+"):
                x = x + self._term()
            elif self._eat("-"):
                x = x - self._term()
            else:
                return x

    def _term(self) -> Decimal:
        x = self._factor()
        while True:
            if self._eat("*"):
                x = x * self._factor()
            elif self._eat("/"):
                position = self._pos
                x = self._divide(x, self._factor(), position)
            else:
                return x

    def _factor(self) -> Decimal:
        if self._eat("+"):
            return self._factor()
        if self._eat("-"):
            return self._factor().copy_negate()
        x = self._primary()
        if self._eat("^"):
            position = self._pos
            x = self._power(x, self._factor(), position)
        return x

    def _primary(self) -> Decimal:
        ch = self._peek()
        if ch is None:
            raise ParseFailure("Unexpected end of expression", self._pos)
        if self._eat("("):
            x = self._expression()
            if not self._eat(")"):
                raise ParseFailure("Missing ')'", self._pos)
            return x
        if ch in self._number_chars:
            start = self._pos
            while self._pos < len(self._text) and self._text[self._pos] in self._number_chars:
                self._pos += 1
            try:
                return parse_numeral(self._text[start:self._pos], self._profile)
            except ParseFailure as e:
                raise ParseFailure(str(e), start) from e
        raise ParseFailure(f"Unexpected: {ch!r}", self._pos)

    def _divide(self, dividend: Decimal, divisor: Decimal, position: int) -> Decimal:
        if divisor == 0:
            raise ArithmeticFailure("Division by zero", position)
        return (dividend / divisor).quantize(self._quantum, rounding=str(self._profile.rounding_mode))

    def _power(self, base: Decimal, exponent: Decimal, position: int) -> Decimal:
        if exponent == exponent.to_integral_value():
            n = int(exponent)
            if abs(n) > self._max_exponent:
                raise ArithmeticFailure(f"Exponent {n} exceeds {self._max_exponent}", position)
            if n >= 0:
                return _integer_power(base, n)
            if base == 0:
                raise ArithmeticFailure("Division by zero", position)
            return Decimal(1) / _integer_power(base, -n)

        # Fractional exponents go through float, only for bases float holds exactly
        as_float = float(base)
        if Decimal(as_float) != base:
            raise ArithmeticFailure(f"Base {base} is not exactly representable for exponent {exponent}", position)
        try:
            result = math.pow(as_float, float(exponent))
        except (ValueError, OverflowError) as e:
            raise ArithmeticFailure(f"Cannot raise {base} to {exponent}: {e}", position) from e
        return Decimal(repr(result))


def _integer_power(base: Decimal, n: int) -> Decimal:
    result = Decimal(1)
    while n:
        if n & 1:
            result *= base
        n >>= 1
        if n:
            base *= base
    return result


def evaluate(text: str, profile: NumeralProfile, settings: Settings | None = None) -> Decimal:
    """Evaluate *text* as an arithmetic expression over locale numerals.

    Raises ``ParseFailure`` for syntax errors and unparseable numerals and
    ``ArithmeticFailure`` for division by zero, rejected exponents or
    results out of range.
    """
    settings = settings or get_settings()
    with localcontext() as ctx:
        ctx.prec = settings.decimal_precision
        ctx.traps[InvalidOperation] = True
        ctx.traps[DivisionByZero] = True
        ctx.traps[Overflow] = True
        try:
            return _Parser(text, profile, settings).parse()
        except DecimalException as e:
            raise ArithmeticFailure(f"Arithmetic error: {type(e).__name__}") from e
        except RecursionError as e:
            raise ParseFailure("Expression is nested too deeply") from e
