"""Shared pytest fixtures for hetuguard tests."""

from datetime import date

import pytest

from hetuguard.application.validator import HetuValidator
from hetuguard.domain.models import HetuFields
from hetuguard.infrastructure.clock.fixed import FixedClock

# Fixed "today" so future-date behavior does not drift with the wall clock
TODAY = date(2025, 6, 15)


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock frozen at TODAY."""
    return FixedClock(TODAY)


@pytest.fixture
def validator(fixed_clock: FixedClock) -> HetuValidator:
    """Validator with default options and a fixed clock."""
    return HetuValidator(clock=fixed_clock)


@pytest.fixture
def lenient_validator(fixed_clock: FixedClock) -> HetuValidator:
    """Validator that accepts artificial identities."""
    return HetuValidator({"allow_test_ids": True}, clock=fixed_clock)


@pytest.fixture
def sample_fields() -> HetuFields:
    """Fields of the valid code 131052-308T."""
    return HetuFields(
        day="13",
        month="10",
        year="52",
        separator="-",
        individual="308",
        check_char="T",
    )
