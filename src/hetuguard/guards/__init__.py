"""
Guards for HETU validation.

Guards are deterministic validators that pass or fail with feedback.
They are composed with CompositeGuard into the ordered validation chain.

Organization:
- static/: field checks (individual number, birth date, check character)
- composite/: guard composition
"""

from hetuguard.guards.composite import CompositeGuard
from hetuguard.guards.static import (
    BirthDateGuard,
    ChecksumGuard,
    IndividualNumberGuard,
)

__all__ = [
    # Static guards
    "IndividualNumberGuard",
    "BirthDateGuard",
    "ChecksumGuard",
    # Composition
    "CompositeGuard",
]
