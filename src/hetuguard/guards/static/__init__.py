"""
Static guards - pure field checks with no side effects.

The birth date guard reads the clock it is given; nothing else touches the
environment.
"""

from hetuguard.guards.static.birth_date import BirthDateGuard
from hetuguard.guards.static.checksum import ChecksumGuard
from hetuguard.guards.static.individual import IndividualNumberGuard

__all__ = [
    "BirthDateGuard",
    "ChecksumGuard",
    "IndividualNumberGuard",
]
