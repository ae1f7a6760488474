"""
Exception hierarchy for amount interpretation.

Lexical and evaluation failures are recovered inside a single field cycle
and only surface as the ``invalid`` signal. Configuration errors abort field
construction.
"""

from __future__ import annotations


class MoneyFieldError(Exception):
    """Base exception for all money field failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(MoneyFieldError, ValueError):
    """The initial value's currency is not in the allowed currency codes."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("CONFIGURATION_INVALID", message, details)


class LexicalInvalid(MoneyFieldError):
    """The text does not match the plain or calculable amount grammar."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("LEXICAL_INVALID", message, details)


class EvaluationFailure(MoneyFieldError):
    """Well-formed text could not be evaluated to a decimal value."""

    def __init__(self, code: str, message: str, position: int = -1, details: dict | None = None):
        self.position = position
        super().__init__(code, message, {"position": position, **(details or {})})


class ParseFailure(EvaluationFailure):
    """Unexpected character, unbalanced parenthesis or unparseable numeral."""

    def __init__(self, message: str, position: int = -1, details: dict | None = None):
        super().__init__("PARSE_FAILED", message, position, details)


class ArithmeticFailure(EvaluationFailure):
    """Division by zero, a rejected exponent or a result out of range."""

    def __init__(self, message: str, position: int = -1, details: dict | None = None):
        super().__init__("ARITHMETIC_FAILED", message, position, details)
