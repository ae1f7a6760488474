"""Library configuration via environment variables with MONEY_FIELD_ prefix."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from money_field.models.numeral import RoundingMode


class Settings(BaseSettings):
    """Money field configuration.

    All settings are read from environment variables prefixed with
    ``MONEY_FIELD_``. Every value has a default so the library works without
    any environment at all.
    """

    model_config = SettingsConfigDict(env_prefix="MONEY_FIELD_")

    # ── Locale ────────────────────────────────────────────────────────────
    # Used when a field is created without an explicit locale
    default_locale: str = "en_US"

    # ── Rounding ──────────────────────────────────────────────────────────
    rounding_mode: RoundingMode = RoundingMode.HALF_EVEN
    # Only used when neither a currency nor the locale territory gives one
    default_fraction_digits: int = Field(default=2, ge=0, le=10)

    # ── Evaluation ────────────────────────────────────────────────────────
    decimal_precision: int = Field(default=100, ge=28)
    max_integer_exponent: int = Field(default=1000, ge=1)

    # ── Logging ───────────────────────────────────────────────────────────
    log_level: str = "INFO"


def get_settings() -> Settings:
    return Settings()
