"""
Fixed clock for testing without real time.

Always returns the date it was created with.
"""

from datetime import date

from hetuguard.domain.interfaces import ClockInterface


class FixedClock(ClockInterface):
    """Returns a predefined date and counts how often it was read."""

    def __init__(self, today: date):
        """
        Args:
            today: Date returned by every call to today()
        """
        self._today = today
        self._call_count = 0

    def today(self) -> date:
        self._call_count += 1
        return self._today

    @property
    def call_count(self) -> int:
        """Number of times today() was called."""
        return self._call_count
