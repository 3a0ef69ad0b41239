"""Protocol for DailyActivity repository."""

from datetime import date
from typing import Protocol

from fluentpath.domain.common.value_objects import UserId
from fluentpath.domain.learning.entities.daily_activity import DailyActivity


class DailyActivityRepositoryProtocol(Protocol):
    def record(self, activity: DailyActivity) -> DailyActivity:
        """
        Atomically insert the day's row or add to its counters.

        Returns:
            The accumulated row for (user, date)
        """
        ...

    def find_since(self, user_id: UserId, start: date) -> list[DailyActivity]:
        """Rows on or after ``start``, newest first."""
        ...
