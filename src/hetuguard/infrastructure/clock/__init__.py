"""
Clock adapters.
"""

from hetuguard.infrastructure.clock.fixed import FixedClock
from hetuguard.infrastructure.clock.system import SystemClock

__all__ = ["FixedClock", "SystemClock"]
