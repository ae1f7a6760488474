"""Shared test fixtures."""
import pytest
from money_field.config import Settings
from money_field.international.locale_profile import resolve_profile


@pytest.fixture
def settings():
    """Settings with defaults, independent of the environment."""
    return Settings(
        default_locale="en_US",
        rounding_mode="ROUND_HALF_EVEN",
        default_fraction_digits=2,
        decimal_precision=100,
        max_integer_exponent=1000,
    )


@pytest.fixture
def de_profile(settings):
    return resolve_profile("de-DE", settings=settings)


@pytest.fixture
def en_profile(settings):
    return resolve_profile("en-US", settings=settings)


@pytest.fixture
def hi_profile(settings):
    return resolve_profile("hi-IN", settings=settings)


@pytest.fixture
def pl_profile(settings):
    return resolve_profile("pl-PL", settings=settings)
