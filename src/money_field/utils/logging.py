"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
import sys
from decimal import Decimal

import structlog

from ..config import get_settings


def decimals_as_strings(logger, method_name, event_dict):
    """Render ``Decimal`` amounts as plain numerals (``"1234.50"``) instead of reprs."""
    for key, value in event_dict.items():
        if isinstance(value, Decimal):
            event_dict[key] = str(value)
    return event_dict


def setup_logging(log_level: str | None = None, stream=None):
    """Configure structlog with JSON output, one event per line.

    Called by the embedding application; importing the library never
    configures output. The level defaults to ``Settings.log_level`` and the
    stream to stdout.
    """
    log_level = log_level or get_settings().log_level
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            decimals_as_strings,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, log_level.upper())),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stdout),
    )
