"""
Domain layer: models, ports, exceptions and the code format.

Has no dependencies on the guards, application or infrastructure layers.
"""

from hetuguard.domain.constants import CHECK_CHARS, SEPARATOR_CENTURIES
from hetuguard.domain.exceptions import InvalidOptionsError
from hetuguard.domain.format import compute_check_char, normalize, tokenize
from hetuguard.domain.interfaces import ClockInterface, GuardInterface
from hetuguard.domain.models import GuardResult, HetuFields, ValidationOptions

__all__ = [
    # Format
    "CHECK_CHARS",
    "SEPARATOR_CENTURIES",
    "compute_check_char",
    "normalize",
    "tokenize",
    # Models
    "GuardResult",
    "HetuFields",
    "ValidationOptions",
    # Ports
    "ClockInterface",
    "GuardInterface",
    # Exceptions
    "InvalidOptionsError",
]
