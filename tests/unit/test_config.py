"""Test environment-driven settings."""
import pytest
from pydantic import ValidationError
from money_field.config import Settings, get_settings
from money_field.models.numeral import RoundingMode


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ["DEFAULT_LOCALE", "ROUNDING_MODE", "DECIMAL_PRECISION"]:
            monkeypatch.delenv(f"MONEY_FIELD_{name}", raising=False)
        settings = Settings()
        assert settings.default_locale == "en_US"
        assert settings.rounding_mode is RoundingMode.HALF_EVEN
        assert settings.decimal_precision == 100

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("MONEY_FIELD_ROUNDING_MODE", "ROUND_HALF_UP")
        monkeypatch.setenv("MONEY_FIELD_DEFAULT_LOCALE", "de_DE")
        settings = get_settings()
        assert settings.rounding_mode is RoundingMode.HALF_UP
        assert settings.default_locale == "de_DE"

    def test_precision_floor(self):
        with pytest.raises(ValidationError):
            Settings(decimal_precision=10)

    def test_fraction_digits_bounds(self):
        with pytest.raises(ValidationError):
            Settings(default_fraction_digits=-1)
