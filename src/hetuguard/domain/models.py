"""
Domain models for HETU validation.

These are pure data structures: per-call options, the fields of a code and
the outcome of a validation stage.
All models are immutable (frozen dataclasses) so a validator can be shared
freely between callers.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from hetuguard.domain.constants import SEPARATOR_CENTURIES
from hetuguard.domain.exceptions import InvalidOptionsError

# Accepted option spellings -> field name
_OPTION_KEYS = MappingProxyType(
    {
        "allow_test_ids": "allow_test_ids",
        "allowTestIds": "allow_test_ids",
        "trim_input": "trim_input",
        "trimInput": "trim_input",
    }
)

# =============================================================================
# OPTIONS
# =============================================================================


@dataclass(frozen=True)
class ValidationOptions:
    """Leniency flags for a validation call."""

    allow_test_ids: bool = False  # Accept individual numbers 000, 001, 900-999
    trim_input: bool = True  # Strip surrounding whitespace before matching

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "ValidationOptions":
        """
        Build options from a mapping.

        Both snake_case and camelCase keys are accepted. Missing keys keep
        their defaults.

        Raises:
            InvalidOptionsError: On an unknown key or a non-boolean value
        """
        values: dict[str, bool] = {}
        for key, value in mapping.items():
            field_name = _OPTION_KEYS.get(key)
            if field_name is None:
                raise InvalidOptionsError(f"Unknown validation option: {key!r}")
            if not isinstance(value, bool):
                raise InvalidOptionsError(
                    f"Option {key!r} must be a bool, got {type(value).__name__}"
                )
            values[field_name] = value
        return cls(**values)

    @classmethod
    def coerce(
        cls, options: "ValidationOptions | Mapping[str, Any] | None"
    ) -> "ValidationOptions":
        """Accept None, an instance, or a mapping."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, Mapping):
            return cls.from_mapping(options)
        raise InvalidOptionsError(
            f"Options must be ValidationOptions or a mapping, "
            f"got {type(options).__name__}"
        )


# =============================================================================
# CODE FIELDS
# =============================================================================


@dataclass(frozen=True)
class HetuFields:
    """
    The six positional fields of a structurally valid code.

    Only produced by the tokenizer after the full pattern matched, so every
    numeric field holds ASCII digits and the separator is a known one.
    """

    day: str
    month: str
    year: str  # Two-digit year within the century
    separator: str
    individual: str
    check_char: str

    @property
    def individual_number(self) -> int:
        return int(self.individual)

    @property
    def century(self) -> int:
        return SEPARATOR_CENTURIES[self.separator]

    @property
    def full_year(self) -> int:
        return self.century + int(self.year)

    @property
    def checksum_digits(self) -> str:
        """DDMMYYNNN - the separator never takes part in the checksum."""
        return self.day + self.month + self.year + self.individual


# =============================================================================
# GUARD RESULT
# =============================================================================


@dataclass(frozen=True)
class GuardResult:
    """Immutable outcome of one validation stage."""

    passed: bool
    feedback: str = ""
