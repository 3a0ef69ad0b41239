"""Use case recording learner activity: streak, daily counters and earned points."""

from dataclasses import dataclass
from datetime import UTC, datetime

import structlog

from fluentpath.application.identity.protocols.user_repository import UserRepositoryProtocol
from fluentpath.application.learning.protocols.daily_activity_repository import (
    DailyActivityRepositoryProtocol,
)
from fluentpath.domain.common.value_objects import UserId
from fluentpath.domain.identity.entities.user import User
from fluentpath.domain.identity.exceptions import UserNotFoundError
from fluentpath.domain.learning.entities.daily_activity import DailyActivity
from fluentpath.domain.learning.services.streak_service import StreakService, calendar_day
from fluentpath.exceptions import ValidationError

logger = structlog.get_logger(__name__)


@dataclass
class ActivityOutcome:
    """The learner and the day's accumulated activity after recording."""

    user: User
    activity: DailyActivity


class RecordActivityUseCase:
    """
    Records one logical activity event for a learner.

    The user row stays locked from the streak read until the points and
    streak are written back, so concurrent submissions of the same learner
    are applied one after another.
    """

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        daily_activity_repository: DailyActivityRepositoryProtocol,
        streak_service: StreakService,
    ) -> None:
        self.user_repository = user_repository
        self.daily_activity_repository = daily_activity_repository
        self.streak_service = streak_service

    def record_activity(
        self,
        user_id: int,
        activities_completed: int = 1,
        points_earned: int = 0,
        now: datetime | None = None,
        accrue_points: bool = False,
    ) -> ActivityOutcome:
        """
        Update the streak and accumulate today's counters.

        Args:
            user_id: ID of the learner
            activities_completed: Activities to add to today's record
            points_earned: Points to add to today's record
            now: Time of the activity (defaults to the current time)
            accrue_points: Also add the points to the learner's total; only set for
                points computed by the server

        Raises:
            ValidationError: If a counter is negative
            UserNotFoundError: If the learner doesn't exist
        """
        if activities_completed < 0 or points_earned < 0:
            raise ValidationError("Activities and points cannot be negative")

        now = now or datetime.now(UTC)
        user_id_vo = UserId(user_id)

        user = self.user_repository.find_by_id_for_update(user_id_vo)
        if not user:
            raise UserNotFoundError(user_id)

        update = self.streak_service.update_streak(user, now)
        user = self.user_repository.save_activity(
            user_id_vo,
            update.streak,
            update.last_activity_date,
            points_earned if accrue_points else 0,
        )

        activity = self.daily_activity_repository.record(
            DailyActivity.create(
                user_id=user_id_vo,
                day=calendar_day(now),
                activities_completed=activities_completed,
                points_earned=points_earned,
            )
        )

        logger.info(
            "activity_recorded",
            user_id=user_id,
            streak=user.current_streak,
            points_earned=points_earned,
            total_points=user.total_points,
        )
        return ActivityOutcome(user=user, activity=activity)
