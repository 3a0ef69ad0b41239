"""Consecutive-day streak calculation."""

from dataclasses import dataclass
from datetime import UTC, date, datetime

from fluentpath.domain.identity.entities.user import User


@dataclass(frozen=True)
class StreakUpdate:
    streak: int
    last_activity_date: datetime


def calendar_day(moment: datetime) -> date:
    """Calendar day of a timestamp in UTC. Naive timestamps are taken as UTC."""
    if moment.tzinfo is not None:
        return moment.astimezone(UTC).date()
    return moment.date()


class StreakService:
    """
    Domain service for learner streaks.

    Days are compared at calendar-day granularity, ignoring time of day:
    - same day: streak unchanged
    - next day: streak + 1
    - two or more days later, or no earlier activity: streak restarts at 1

    Repeated calls on the same day are idempotent.
    """

    def calculate(
        self, current_streak: int, last_activity_date: datetime | None, now: datetime
    ) -> StreakUpdate:
        if last_activity_date is None:
            return StreakUpdate(streak=1, last_activity_date=now)

        days_diff = (calendar_day(now) - calendar_day(last_activity_date)).days
        if days_diff <= 0:
            streak = current_streak
        elif days_diff == 1:
            streak = current_streak + 1
        else:
            streak = 1
        return StreakUpdate(streak=streak, last_activity_date=now)

    def update_streak(self, user: User, now: datetime) -> StreakUpdate:
        """Compute the user's streak after an activity at ``now`` and apply it."""
        update = self.calculate(user.current_streak, user.last_activity_date, now)
        user.apply_streak(update.streak, update.last_activity_date)
        return update
