"""Use case assembling the learner dashboard."""

from dataclasses import dataclass

from fluentpath.application.identity.protocols.user_repository import UserRepositoryProtocol
from fluentpath.application.learning.protocols.achievement_repository import (
    AchievementRepositoryProtocol,
)
from fluentpath.application.learning.protocols.ai_feedback_repository import (
    AIFeedbackRepositoryProtocol,
)
from fluentpath.application.learning.protocols.test_attempt_repository import (
    TestAttemptRepositoryProtocol,
)
from fluentpath.application.learning.protocols.test_repository import TestRepositoryProtocol
from fluentpath.application.learning.use_cases.progress.leaderboard_use_case import (
    LeaderboardEntry,
    LeaderboardUseCase,
)
from fluentpath.application.learning.use_cases.progress.user_stats_use_case import (
    UserStatsUseCase,
)
from fluentpath.domain.common.value_objects import UserId
from fluentpath.domain.identity.entities.user import User
from fluentpath.domain.identity.exceptions import UserNotFoundError
from fluentpath.domain.learning.entities.achievement import Achievement
from fluentpath.domain.learning.entities.ai_feedback import AIFeedback
from fluentpath.domain.learning.entities.test import Test
from fluentpath.domain.learning.entities.test_attempt import TestAttempt
from fluentpath.domain.learning.services.stats_service import UserStats

RECENT_ATTEMPTS = 5
DASHBOARD_LEADERBOARD_SIZE = 10
DASHBOARD_ACHIEVEMENTS = 3


@dataclass
class AttemptSummary:
    """An attempt with its test and feedback (if any)."""

    attempt: TestAttempt
    test: Test | None
    feedback: AIFeedback | None


@dataclass
class DashboardOverview:
    user: User
    rank: int
    stats: UserStats
    recent_attempts: list[AttemptSummary]
    leaderboard: list[LeaderboardEntry]
    achievements: list[Achievement]


class DashboardUseCase:
    """Fans out to the stats, attempt, leaderboard and achievement queries."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        test_repository: TestRepositoryProtocol,
        attempt_repository: TestAttemptRepositoryProtocol,
        feedback_repository: AIFeedbackRepositoryProtocol,
        achievement_repository: AchievementRepositoryProtocol,
        stats_use_case: UserStatsUseCase,
        leaderboard_use_case: LeaderboardUseCase,
    ) -> None:
        self.user_repository = user_repository
        self.test_repository = test_repository
        self.attempt_repository = attempt_repository
        self.feedback_repository = feedback_repository
        self.achievement_repository = achievement_repository
        self.stats_use_case = stats_use_case
        self.leaderboard_use_case = leaderboard_use_case

    def get_dashboard(self, user_id: int) -> DashboardOverview:
        """
        Build the dashboard of a learner.

        Raises:
            UserNotFoundError: If the learner doesn't exist
        """
        user_id_vo = UserId(user_id)
        user = self.user_repository.find_by_id(user_id_vo)
        if not user:
            raise UserNotFoundError(user_id)

        return DashboardOverview(
            user=user,
            rank=self.user_repository.rank_of(user),
            stats=self.stats_use_case.compute_stats(user_id),
            recent_attempts=self.get_recent_attempts(user_id_vo),
            leaderboard=self.leaderboard_use_case.get_leaderboard(DASHBOARD_LEADERBOARD_SIZE),
            achievements=self.achievement_repository.find_by_user(user_id_vo)[
                :DASHBOARD_ACHIEVEMENTS
            ],
        )

    def get_recent_attempts(self, user_id: UserId) -> list[AttemptSummary]:
        attempts = self.attempt_repository.find_by_user(user_id, limit=RECENT_ATTEMPTS)
        if not attempts:
            return []

        tests = self.test_repository.find_by_ids(list({a.test_id for a in attempts}))
        feedback = self.feedback_repository.find_by_attempts([a.id for a in attempts])
        return [
            AttemptSummary(
                attempt=attempt,
                test=tests.get(attempt.test_id),
                feedback=feedback.get(attempt.id),
            )
            for attempt in attempts
        ]
