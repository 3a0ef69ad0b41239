"""Use case for the progress page."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from fluentpath.application.learning.protocols.achievement_repository import (
    AchievementRepositoryProtocol,
)
from fluentpath.application.learning.protocols.daily_activity_repository import (
    DailyActivityRepositoryProtocol,
)
from fluentpath.application.learning.use_cases.progress.user_stats_use_case import (
    UserStatsUseCase,
)
from fluentpath.domain.common.value_objects import UserId
from fluentpath.domain.learning.entities.achievement import Achievement
from fluentpath.domain.learning.entities.daily_activity import DailyActivity
from fluentpath.domain.learning.services.stats_service import UserStats
from fluentpath.domain.learning.services.streak_service import calendar_day


@dataclass
class ProgressOverview:
    stats: UserStats
    streak_history: list[DailyActivity]
    achievements: list[Achievement]


class ProgressUseCase:
    def __init__(
        self,
        stats_use_case: UserStatsUseCase,
        daily_activity_repository: DailyActivityRepositoryProtocol,
        achievement_repository: AchievementRepositoryProtocol,
        history_days: int = 30,
    ) -> None:
        self.stats_use_case = stats_use_case
        self.daily_activity_repository = daily_activity_repository
        self.achievement_repository = achievement_repository
        self.history_days = history_days

    def get_progress(self, user_id: int, now: datetime | None = None) -> ProgressOverview:
        """Statistics, daily activity of the recent history window and all achievements."""
        now = now or datetime.now(UTC)
        user_id_vo = UserId(user_id)
        start = calendar_day(now) - timedelta(days=self.history_days)

        return ProgressOverview(
            stats=self.stats_use_case.compute_stats(user_id),
            streak_history=self.daily_activity_repository.find_since(user_id_vo, start),
            achievements=self.achievement_repository.find_by_user(user_id_vo),
        )
