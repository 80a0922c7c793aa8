"""
Check character guard.

Pure guard with no I/O - recomputes the mod 31 check symbol.
"""

from hetuguard.domain.format import compute_check_char
from hetuguard.domain.interfaces import GuardInterface
from hetuguard.domain.models import GuardResult, HetuFields


class ChecksumGuard(GuardInterface):
    """
    Validates the trailing check character.

    The checksum covers DDMMYYNNN only; the separator is not part of it.
    """

    def validate(self, fields: HetuFields) -> GuardResult:
        expected = compute_check_char(fields.checksum_digits)
        if fields.check_char != expected:
            return GuardResult(passed=False, feedback="Check character mismatch")
        return GuardResult(passed=True, feedback="Check character valid")
