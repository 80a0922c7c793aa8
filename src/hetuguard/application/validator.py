"""
HETU validator.

Wires normalization, tokenizing and the guard chain into the public
boolean contract. Every failure is reported the same way: False.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from hetuguard.domain.format import normalize, tokenize
from hetuguard.domain.interfaces import ClockInterface
from hetuguard.domain.models import GuardResult, ValidationOptions
from hetuguard.guards import (
    BirthDateGuard,
    ChecksumGuard,
    CompositeGuard,
    IndividualNumberGuard,
)

logger = logging.getLogger("hetuguard.validator")

OptionsLike = ValidationOptions | Mapping[str, Any] | None


def _default_clock() -> ClockInterface:
    from hetuguard.infrastructure.clock import SystemClock

    return SystemClock()


class HetuValidator:
    """
    Validates Finnish personal identity codes (henkilötunnus).

    Stages run in a fixed order and stop at the first failure:
    normalization, structural match, individual number category, birth
    date (calendar and future check), check character.

    Holds only immutable configuration; one instance can be shared between
    threads.

    Example:
        validator = HetuValidator()
        validator.validate("131052-308T")  # True
        validator.validate("010101-900R")  # False (artificial identity)

        lenient = HetuValidator({"allowTestIds": True})
        lenient.validate("010101-900R")  # True
    """

    def __init__(
        self,
        options: OptionsLike = None,
        clock: ClockInterface | None = None,
    ):
        """
        Args:
            options: ValidationOptions, a mapping of option flags, or None
                for the defaults
            clock: Source of today's date; defaults to the system UTC clock

        Raises:
            InvalidOptionsError: If options cannot be interpreted
        """
        self.options = ValidationOptions.coerce(options)
        self.clock = clock if clock is not None else _default_clock()
        self._guard = CompositeGuard(
            IndividualNumberGuard(allow_test_ids=self.options.allow_test_ids),
            BirthDateGuard(self.clock),
            ChecksumGuard(),
        )

    def validate(self, hetu: Any) -> bool:
        """
        Check a candidate code.

        Args:
            hetu: The code to validate. Non-string input is rejected.

        Returns:
            True if format, date, category and checksum are all valid
        """
        result = self._evaluate(hetu)
        if not result.passed:
            logger.debug("HETU rejected: %s", result.feedback)
        return result.passed

    __call__ = validate

    def _evaluate(self, hetu: Any) -> GuardResult:
        if not isinstance(hetu, str):
            return GuardResult(passed=False, feedback="Input is not a string")
        if not hetu:
            return GuardResult(passed=False, feedback="Input is empty")

        fields = tokenize(normalize(hetu, trim=self.options.trim_input))
        if fields is None:
            return GuardResult(passed=False, feedback="Structure mismatch")

        return self._guard.validate(fields)


def validate_finnish_hetu(
    hetu: Any,
    options: OptionsLike = None,
    clock: ClockInterface | None = None,
) -> bool:
    """
    Validate a Finnish Personal Identity Code (HETU).

    Supports the modern format including the separators introduced in
    2023/2024.

    Args:
        hetu: The code to validate
        options: ValidationOptions or a mapping with allow_test_ids /
            trim_input (camelCase spellings are accepted too)
        clock: Source of today's date; defaults to the system UTC clock

    Returns:
        True if the code is valid, False otherwise. Malformed input never
        raises.

    Example:
        validate_finnish_hetu("131052-308T")  # True
        validate_finnish_hetu("010101-900R")  # False
        validate_finnish_hetu("010101-900R", {"allow_test_ids": True})  # True
        validate_finnish_hetu("  131052-308T  ")  # True
        validate_finnish_hetu("  131052-308T  ", {"trim_input": False})  # False
    """
    return HetuValidator(options, clock).validate(hetu)


def validate_many(
    codes: Iterable[Any],
    options: OptionsLike = None,
    clock: ClockInterface | None = None,
) -> list[bool]:
    """Validate several codes with one validator; results keep input order."""
    validator = HetuValidator(options, clock)
    return [validator.validate(code) for code in codes]
