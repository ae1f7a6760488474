"""Lexical check of amount text, for plain amounts and arithmetic expressions.

This layer is deliberately permissive: ``5..214,12`` passes here and is only
rejected when the numeral is parsed. Both layers together decide validity.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from functools import lru_cache

from ..exceptions import LexicalInvalid
from ..models.numeral import NO_BREAK_SPACE, NumeralProfile

OPERATORS = "+-*/^"


class TokenKind(StrEnum):
    NUMBER = "NUMBER"
    OPERATOR = "OPERATOR"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    position: int


def number_chars(profile: NumeralProfile) -> str:
    """Characters that may continue a numeral once it has started."""
    return "0123456789" + profile.separators + NO_BREAK_SPACE


@lru_cache(maxsize=128)
def _plain_pattern(profile: NumeralProfile) -> re.Pattern:
    separators = re.escape(profile.separators)
    return re.compile(rf"\s*[-+]?[0-9](?:[{separators}]*[0-9])*\s*")


@lru_cache(maxsize=128)
def _token_pattern(profile: NumeralProfile) -> re.Pattern:
    continuation = re.escape(number_chars(profile))
    operators = re.escape(OPERATORS)
    return re.compile(
        rf"(?P<NUMBER>[0-9][{continuation}]*)"
        rf"|(?P<OPERATOR>[{operators}])"
        r"|(?P<LPAREN>\()"
        r"|(?P<RPAREN>\))"
        r"|(?P<SKIP>\s+)"
        r"|(?P<MISMATCH>.)",
        re.DOTALL,
    )


def tokenize(text: str, profile: NumeralProfile) -> list[Token]:
    """Split calculable amount text into tokens, dropping whitespace."""
    tokens: list[Token] = []
    for match in _token_pattern(profile).finditer(text):
        kind = match.lastgroup
        if kind == "SKIP":
            continue
        if kind == "MISMATCH":
            raise LexicalInvalid(
                f"Unexpected character {match.group()!r} at {match.start()}",
                details={"position": match.start(), "locale": profile.locale},
            )
        value = match.group()
        if kind == "NUMBER":
            # whitespace-grouping locales let a numeral swallow the space before an operator
            value = value.rstrip()
        tokens.append(Token(TokenKind(kind), value, match.start()))
    return tokens


def _is_well_formed_expression(tokens: list[Token]) -> bool:
    expect_operand = True
    depth = 0
    for token in tokens:
        if expect_operand:
            if token.kind is TokenKind.NUMBER:
                expect_operand = False
            elif token.kind is TokenKind.LPAREN:
                depth += 1
            elif token.kind is TokenKind.OPERATOR and token.text in "+-":
                continue  # unary sign
            else:
                return False
        else:
            if token.kind is TokenKind.OPERATOR:
                expect_operand = True
            elif token.kind is TokenKind.RPAREN:
                depth -= 1
                if depth < 0:
                    return False
            else:
                return False
    return not expect_operand and depth == 0


def is_well_formed(
    text: str,
    profile: NumeralProfile,
    calculable: bool = False,
    allow_empty: bool = True,
) -> bool:
    """Whether *text* is lexically a plain amount (or expression if *calculable*).

    Blank text is well-formed only when *allow_empty* is set; it means
    "no value" rather than an invalid amount.
    """
    if not text.strip():
        return allow_empty
    if not calculable:
        return _plain_pattern(profile).fullmatch(text) is not None
    try:
        tokens = tokenize(text, profile)
    except LexicalInvalid:
        return False
    return _is_well_formed_expression(tokens)
