"""Rubric feedback for essay and letter attempts."""

from dataclasses import dataclass
from datetime import datetime

from fluentpath.domain.common.entity import Entity
from fluentpath.domain.common.value_objects import AIFeedbackId, Score, TestAttemptId

DEFAULT_STRENGTHS = "Good effort on this submission."
DEFAULT_IMPROVEMENTS = "Continue practicing to improve your skills."
DEFAULT_SUGGESTIONS = "Keep up the good work and practice regularly."


@dataclass
class AIFeedback(Entity[AIFeedbackId]):
    """
    Rubric scores and commentary for one attempt.

    Business Rules:
    - At most one feedback per attempt (enforced at repository level)
    - All sub-scores are within 0-10
    - Commentary fields are never empty
    """

    id: AIFeedbackId
    test_attempt_id: TestAttemptId
    overall_score: Score
    grammar_score: Score
    vocabulary_score: Score
    structure_score: Score
    strengths: str
    improvements: str
    suggestions: str
    created_at: datetime | None = None

    @classmethod
    def create(
        cls,
        test_attempt_id: TestAttemptId,
        overall_score: Score,
        grammar_score: Score,
        vocabulary_score: Score,
        structure_score: Score,
        strengths: str | None,
        improvements: str | None,
        suggestions: str | None,
    ) -> "AIFeedback":
        return cls(
            id=AIFeedbackId.generate(),
            test_attempt_id=test_attempt_id,
            overall_score=overall_score,
            grammar_score=grammar_score,
            vocabulary_score=vocabulary_score,
            structure_score=structure_score,
            strengths=_or_default(strengths, DEFAULT_STRENGTHS),
            improvements=_or_default(improvements, DEFAULT_IMPROVEMENTS),
            suggestions=_or_default(suggestions, DEFAULT_SUGGESTIONS),
        )


def _or_default(text: str | None, default: str) -> str:
    if text is None or not text.strip():
        return default
    return text.strip()
