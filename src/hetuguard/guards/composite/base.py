"""
Guard composition.

CompositeGuard chains validation stages in order.
"""

from hetuguard.domain.interfaces import GuardInterface
from hetuguard.domain.models import GuardResult, HetuFields


class CompositeGuard(GuardInterface):
    """
    Logical AND of multiple guards. All must pass.

    Evaluates guards in order, short-circuits on first failure.
    """

    def __init__(self, *guards: GuardInterface):
        """
        Args:
            *guards: Guards to compose (evaluated in order)
        """
        self.guards = guards

    def validate(self, fields: HetuFields) -> GuardResult:
        for guard in self.guards:
            result = guard.validate(fields)
            if not result.passed:
                return result  # Short-circuit on failure
        return GuardResult(passed=True, feedback="All guards passed")
