"""Use case for reading a learner's attempts and their feedback."""

from fluentpath.application.learning.protocols.ai_feedback_repository import (
    AIFeedbackRepositoryProtocol,
)
from fluentpath.application.learning.protocols.test_attempt_repository import (
    TestAttemptRepositoryProtocol,
)
from fluentpath.domain.common.value_objects import TestAttemptId, UserId
from fluentpath.domain.learning.entities.ai_feedback import AIFeedback
from fluentpath.domain.learning.entities.test_attempt import TestAttempt
from fluentpath.exceptions import AttemptNotFoundError


class AttemptQueryUseCase:
    def __init__(
        self,
        attempt_repository: TestAttemptRepositoryProtocol,
        feedback_repository: AIFeedbackRepositoryProtocol,
    ) -> None:
        self.attempt_repository = attempt_repository
        self.feedback_repository = feedback_repository

    def list_attempts(self, user_id: int) -> list[TestAttempt]:
        return self.attempt_repository.find_by_user(UserId(user_id))

    def get_feedback(self, attempt_id: int, user_id: int) -> AIFeedback | None:
        """
        Get the feedback of one of the learner's attempts.

        Returns None while the attempt has no feedback.

        Raises:
            AttemptNotFoundError: If the attempt doesn't exist or belongs to someone else
        """
        attempt_id_vo = TestAttemptId(attempt_id)
        attempt = self.attempt_repository.find_by_id(attempt_id_vo, UserId(user_id))
        if not attempt:
            raise AttemptNotFoundError(attempt_id)
        return self.feedback_repository.find_by_attempt(attempt_id_vo)
