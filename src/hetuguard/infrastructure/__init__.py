"""
Infrastructure layer for HETU validation.

Contains adapters for external concerns (the clock).
"""

from hetuguard.infrastructure.clock import FixedClock, SystemClock

__all__ = [
    "FixedClock",
    "SystemClock",
]
