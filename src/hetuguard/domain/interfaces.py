"""
Domain interfaces (Ports) for HETU validation.

These abstract base classes define the contracts that implementations must satisfy.
They have no external dependencies and represent the core domain boundaries.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hetuguard.domain.models import GuardResult, HetuFields


class GuardInterface(ABC):
    """
    Port for one validation stage.

    Guards are deterministic validators that pass or fail with feedback.
    They only ever see fields of a code that already matched the pattern.
    """

    @abstractmethod
    def validate(self, fields: "HetuFields") -> "GuardResult":
        """
        Validate the fields of a code.

        Args:
            fields: Positional fields of a structurally valid code

        Returns:
            GuardResult with passed=True/False and feedback
        """
        pass


class ClockInterface(ABC):
    """
    Port for the current date.

    The only environmental input of validation. Injected so that future-date
    rejection is testable without waiting for time to pass.
    """

    @abstractmethod
    def today(self) -> date:
        """
        Return the current date in UTC at day granularity.
        """
        pass
