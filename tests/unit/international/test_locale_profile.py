"""Test locale numeral profile resolution."""
import pytest
from money_field.international.locale_profile import (
    available_currency_codes, currency_symbol, normalize_locale_id, resolve_profile,
)
from money_field.models.numeral import NO_BREAK_SPACE, WHITESPACE_SEPARATORS, RoundingMode


class TestNormalizeLocaleId:
    def test_hyphen(self):
        assert normalize_locale_id("de-DE") == "de_DE"

    def test_underscore(self):
        assert normalize_locale_id("de_DE") == "de_DE"

    def test_whitespace(self):
        assert normalize_locale_id("  en-US ") == "en_US"

    def test_none(self):
        assert normalize_locale_id(None) == ""


class TestResolveProfile:
    def test_german_swaps_separators(self, de_profile):
        assert de_profile.decimal_separator == ","
        assert de_profile.group_separator == "."
        assert de_profile.group_separators == frozenset({"."})
        assert de_profile.group_lengths == (3,)

    def test_us(self, en_profile):
        assert en_profile.decimal_separator == "."
        assert en_profile.group_separator == ","
        assert en_profile.group_lengths == (3,)

    def test_indian_variable_groups(self, hi_profile):
        assert hi_profile.decimal_separator == "."
        assert hi_profile.group_separator == ","
        assert hi_profile.group_lengths == (3, 2)

    def test_polish_whitespace_family(self, pl_profile):
        assert pl_profile.decimal_separator == ","
        assert pl_profile.group_separator == NO_BREAK_SPACE
        assert pl_profile.group_separators == WHITESPACE_SEPARATORS
        assert " " in pl_profile.group_separators
        assert pl_profile.uses_whitespace_grouping is True

    def test_french_whitespace_grouping(self, settings):
        profile = resolve_profile("fr-FR", settings=settings)
        assert profile.group_separator in WHITESPACE_SEPARATORS
        assert profile.group_separators == WHITESPACE_SEPARATORS

    def test_territory_currency_digits(self, de_profile):
        assert de_profile.currency_fraction_digits == 2  # EUR

    def test_japanese_territory_has_no_minor_unit(self, settings):
        assert resolve_profile("ja-JP", settings=settings).currency_fraction_digits == 0

    def test_explicit_currency_wins(self, settings):
        assert resolve_profile("de-DE", "JPY", settings=settings).currency_fraction_digits == 0
        assert resolve_profile("de-DE", "BHD", settings=settings).currency_fraction_digits == 3

    def test_lowercase_currency(self, settings):
        assert resolve_profile("de-DE", "jpy", settings=settings).currency_fraction_digits == 0

    def test_language_only_uses_default_digits(self, settings):
        profile = resolve_profile("de", settings=settings)
        assert profile.decimal_separator == ","
        assert profile.currency_fraction_digits == settings.default_fraction_digits

    def test_default_rounding(self, de_profile):
        assert de_profile.rounding_mode is RoundingMode.HALF_EVEN

    def test_rounding_override(self, settings):
        profile = resolve_profile("de-DE", rounding_mode=RoundingMode.HALF_UP, settings=settings)
        assert profile.rounding_mode is RoundingMode.HALF_UP

    def test_rounding_override_by_name(self, settings):
        profile = resolve_profile("de-DE", rounding_mode="ROUND_DOWN", settings=settings)
        assert profile.rounding_mode is RoundingMode.DOWN

    def test_cached(self, settings):
        assert resolve_profile("de-DE", settings=settings) is resolve_profile("de_DE", settings=settings)


class TestFallbackProfile:
    @pytest.mark.parametrize("locale", ["xx_YY", "not a locale", "", "12-34"])
    def test_unknown_locale_uses_default(self, locale, settings):
        profile = resolve_profile(locale, settings=settings)
        assert profile.decimal_separator == "."
        assert profile.group_separator == ","
        assert profile.group_lengths == (3,)
        assert profile.currency_fraction_digits == 2

    def test_unknown_locale_keeps_currency_digits(self, settings):
        assert resolve_profile("xx_YY", "JPY", settings=settings).currency_fraction_digits == 0


class TestCurrencyHelpers:
    def test_euro_symbol(self):
        assert currency_symbol("EUR", "de-DE") == "€"

    def test_dollar_symbol(self):
        assert currency_symbol("USD", "en_US") == "$"

    def test_rupee_symbol(self):
        assert currency_symbol("INR", "en_US") == "₹"

    def test_unknown_locale_returns_code(self):
        assert currency_symbol("EUR", "xx_YY") == "EUR"

    def test_available_codes(self):
        codes = available_currency_codes()
        assert "EUR" in codes
        assert "USD" in codes
        assert "INR" in codes
        assert codes == sorted(codes)
