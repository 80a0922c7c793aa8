"""
Birth date guard.

Resolves the century from the separator and checks the date against the
Gregorian calendar and the injected clock.
"""

from datetime import date

from hetuguard.domain.interfaces import ClockInterface, GuardInterface
from hetuguard.domain.models import GuardResult, HetuFields


class BirthDateGuard(GuardInterface):
    """
    Validates that the encoded birth date exists and is not in the future.

    Impossible dates (day 00, day 32, month 13, Feb 29 outside leap years)
    are rejected outright; nothing is rolled over into a neighbouring date.
    A birth date equal to today is accepted.
    """

    def __init__(self, clock: ClockInterface):
        """
        Args:
            clock: Source of the current UTC date, read once per validation
        """
        self.clock = clock

    def validate(self, fields: HetuFields) -> GuardResult:
        """
        Build the full date and compare it with today.

        Returns:
            GuardResult with passed=True if the date is real and not after today
        """
        try:
            birth_date = date(fields.full_year, int(fields.month), int(fields.day))
        except ValueError as e:
            return GuardResult(passed=False, feedback=f"Invalid birth date: {e}")

        if birth_date > self.clock.today():
            return GuardResult(passed=False, feedback="Birth date is in the future")
        return GuardResult(passed=True, feedback="Birth date valid")
