"""
Application layer: the validator that orchestrates the guard chain.
"""

from hetuguard.application.validator import (
    HetuValidator,
    validate_finnish_hetu,
    validate_many,
)

__all__ = [
    "HetuValidator",
    "validate_finnish_hetu",
    "validate_many",
]
