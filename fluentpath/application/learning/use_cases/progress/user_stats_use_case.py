"""Use case computing a learner's statistics."""

from fluentpath.application.learning.protocols.ai_feedback_repository import (
    AIFeedbackRepositoryProtocol,
)
from fluentpath.application.learning.protocols.module_repository import ModuleRepositoryProtocol
from fluentpath.application.learning.protocols.test_attempt_repository import (
    TestAttemptRepositoryProtocol,
)
from fluentpath.domain.common.value_objects import UserId
from fluentpath.domain.learning.services.stats_service import StatsService, UserStats


class UserStatsUseCase:
    def __init__(
        self,
        module_repository: ModuleRepositoryProtocol,
        attempt_repository: TestAttemptRepositoryProtocol,
        feedback_repository: AIFeedbackRepositoryProtocol,
        stats_service: StatsService,
    ) -> None:
        self.module_repository = module_repository
        self.attempt_repository = attempt_repository
        self.feedback_repository = feedback_repository
        self.stats_service = stats_service

    def compute_stats(self, user_id: int) -> UserStats:
        user_id_vo = UserId(user_id)
        return self.stats_service.compute_stats(
            completed_lessons=self.module_repository.count_completed(user_id_vo),
            attempts=self.attempt_repository.find_scored_by_user(user_id_vo),
            grammar_scores=self.feedback_repository.find_grammar_scores(user_id_vo),
        )
