"""Per-day activity counters that back the streak history."""

from dataclasses import dataclass
from datetime import date

from fluentpath.domain.common.entity import Entity
from fluentpath.domain.common.exceptions import DomainError
from fluentpath.domain.common.value_objects import DailyActivityId, UserId


@dataclass
class DailyActivity(Entity[DailyActivityId]):
    """
    What a learner did on one calendar day.

    There is one record per learner and day. Recording more activity on the
    same day adds to the counters instead of replacing them.
    """

    id: DailyActivityId
    user_id: UserId
    date: date
    activities_completed: int = 0
    points_earned: int = 0

    def __post_init__(self) -> None:
        if self.activities_completed < 0:
            raise DomainError("Activities completed cannot be negative")
        if self.points_earned < 0:
            raise DomainError("Points earned cannot be negative")

    @classmethod
    def create(
        cls, user_id: UserId, day: date, activities_completed: int = 1, points_earned: int = 0
    ) -> "DailyActivity":
        return cls(
            id=DailyActivityId.generate(),
            user_id=user_id,
            date=day,
            activities_completed=activities_completed,
            points_earned=points_earned,
        )
