"""
hetuguard: Finnish Personal Identity Code (HETU) validation.

A pure, deterministic validator that checks format, calendar validity,
individual number category and checksum of an 11-character code.

Example:
    from hetuguard import validate_finnish_hetu

    validate_finnish_hetu("131052-308T")  # True
    validate_finnish_hetu("010101-900R", {"allow_test_ids": True})  # True
"""

# Application layer
from hetuguard.application import (
    HetuValidator,
    validate_finnish_hetu,
    validate_many,
)

# Domain
from hetuguard.domain.constants import CHECK_CHARS, SEPARATOR_CENTURIES
from hetuguard.domain.exceptions import InvalidOptionsError
from hetuguard.domain.interfaces import ClockInterface, GuardInterface
from hetuguard.domain.models import GuardResult, ValidationOptions

# Guards
from hetuguard.guards import (
    BirthDateGuard,
    ChecksumGuard,
    CompositeGuard,
    IndividualNumberGuard,
)

# Infrastructure
from hetuguard.infrastructure import FixedClock, SystemClock

__version__ = "1.0.0"

__all__ = [
    # Version
    "__version__",
    # Entry points
    "validate_finnish_hetu",
    "validate_many",
    "HetuValidator",
    # Domain
    "CHECK_CHARS",
    "SEPARATOR_CENTURIES",
    "ValidationOptions",
    "GuardResult",
    "ClockInterface",
    "GuardInterface",
    "InvalidOptionsError",
    # Guards
    "IndividualNumberGuard",
    "BirthDateGuard",
    "ChecksumGuard",
    "CompositeGuard",
    # Infrastructure
    "SystemClock",
    "FixedClock",
]
