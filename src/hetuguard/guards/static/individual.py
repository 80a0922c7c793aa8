"""
Individual number category guard.

Pure guard - checks which range the 3-digit individual number falls in.
"""

from hetuguard.domain.constants import REAL_INDIVIDUAL_MAX, REAL_INDIVIDUAL_MIN
from hetuguard.domain.interfaces import GuardInterface
from hetuguard.domain.models import GuardResult, HetuFields


class IndividualNumberGuard(GuardInterface):
    """
    Rejects artificial identities unless explicitly allowed.

    Numbers 002-899 are issued to real persons. 000, 001 and 900-999 are
    reserved for test identities: they are a separate category, not an
    invalid range, so the partition is not a single threshold.
    """

    def __init__(self, allow_test_ids: bool = False):
        """
        Args:
            allow_test_ids: Accept 000, 001 and 900-999
        """
        self.allow_test_ids = allow_test_ids

    def validate(self, fields: HetuFields) -> GuardResult:
        number = fields.individual_number
        if REAL_INDIVIDUAL_MIN <= number <= REAL_INDIVIDUAL_MAX:
            return GuardResult(passed=True, feedback="Individual number is real")
        if self.allow_test_ids:
            return GuardResult(
                passed=True, feedback="Individual number is artificial (allowed)"
            )
        return GuardResult(
            passed=False, feedback="Artificial individual number not allowed"
        )
