"""Protocol for AIFeedback repository."""

from typing import Protocol

from fluentpath.domain.common.value_objects import Score, TestAttemptId, UserId
from fluentpath.domain.learning.entities.ai_feedback import AIFeedback


class AIFeedbackRepositoryProtocol(Protocol):
    def find_by_attempt(self, attempt_id: TestAttemptId) -> AIFeedback | None: ...

    def find_by_attempts(self, attempt_ids: list[TestAttemptId]) -> dict[TestAttemptId, AIFeedback]:
        ...

    def find_grammar_scores(self, user_id: UserId) -> list[Score]:
        """Grammar sub-scores of every feedback on the user's attempts."""
        ...

    def save(self, feedback: AIFeedback) -> AIFeedback:
        """
        Store feedback for an attempt, replacing any earlier feedback of that attempt.

        Keeps the one-feedback-per-attempt invariant.
        """
        ...
