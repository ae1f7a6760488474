"""Test locale-aware numeral parsing."""
from decimal import Decimal

import pytest
from money_field.exceptions import ParseFailure
from money_field.international.number_parsing import parse_numeral
from tests.factories import make_eu_profile, make_indian_profile, make_polish_profile, make_profile


class TestParseNumeral:
    def test_eu_grouped(self, de_profile):
        assert parse_numeral("123.456,79", de_profile) == Decimal("123456.79")

    def test_eu_ungrouped(self, de_profile):
        assert parse_numeral("123456,789", de_profile) == Decimal("123456.789")

    def test_us_grouped(self, en_profile):
        assert parse_numeral("123,456.789", en_profile) == Decimal("123456.789")

    def test_indian_groups(self, hi_profile):
        assert parse_numeral("1,23,456.789", hi_profile) == Decimal("123456.789")

    def test_group_lengths_not_enforced(self):
        assert parse_numeral("1,23,456", make_profile()) == Decimal("123456")

    def test_polish_space(self, pl_profile):
        assert parse_numeral("123 456,789", pl_profile) == Decimal("123456.789")

    def test_polish_no_break_space(self, pl_profile):
        assert parse_numeral("123\u00a0456,789", pl_profile) == Decimal("123456.789")

    def test_negative(self, de_profile):
        assert parse_numeral("-123,456", de_profile) == Decimal("-123.456")

    def test_explicit_plus(self):
        assert parse_numeral("+5", make_profile()) == Decimal("5")

    def test_surrounding_whitespace(self, de_profile):
        assert parse_numeral(" 123.456,79 ", de_profile) == Decimal("123456.79")

    def test_exact_digits_kept(self):
        assert parse_numeral("71000000000000.01", make_profile()) == Decimal("71000000000000.01")

    def test_custom_profiles(self):
        assert parse_numeral("1.234,5", make_eu_profile()) == Decimal("1234.5")
        assert parse_numeral("12,34,567.8", make_indian_profile()) == Decimal("1234567.8")
        assert parse_numeral("1 234,5", make_polish_profile()) == Decimal("1234.5")


class TestParseNumeralRejects:
    @pytest.mark.parametrize("raw", [
        "5..214,12",   # empty group
        "5..214,1234",
        "1,2,3",       # two decimal separators
        "12,",         # dangling decimal separator
        ",5",
        ".123",
        "1.234,5.6",   # group separator after the decimal separator
        "1 234,5",     # space is not a German group separator
        "12a",
        "--1",
    ])
    def test_invalid_german(self, raw, de_profile):
        with pytest.raises(ParseFailure):
            parse_numeral(raw, de_profile)

    def test_empty_raises(self, de_profile):
        with pytest.raises(ParseFailure):
            parse_numeral("   ", de_profile)

    def test_eu_text_in_us_locale(self, en_profile):
        with pytest.raises(ParseFailure):
            parse_numeral("1.234,56", en_profile)

    def test_non_ascii_digits(self, en_profile):
        with pytest.raises(ParseFailure):
            parse_numeral("१२३", en_profile)

    def test_failure_code(self, de_profile):
        with pytest.raises(ParseFailure) as exc_info:
            parse_numeral("5..214", de_profile)
        assert exc_info.value.code == "PARSE_FAILED"
