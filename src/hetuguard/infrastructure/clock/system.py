"""
System clock adapter.

Reads the wall clock in UTC so that the result does not depend on the
host's local time zone.
"""

from datetime import date, datetime, timezone

from hetuguard.domain.interfaces import ClockInterface


class SystemClock(ClockInterface):
    """Current UTC date, truncated to the day."""

    def today(self) -> date:
        return datetime.now(timezone.utc).date()
