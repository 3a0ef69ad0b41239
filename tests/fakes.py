"""Test doubles shared across the suite."""

from decimal import Decimal

from fluentpath.application.learning.protocols.text_generation_service import FeedbackResult
from fluentpath.domain.common.value_objects import Score
from fluentpath.domain.learning.entities.module import Level
from fluentpath.domain.learning.entities.test import TestContent, TestType
from fluentpath.exceptions import GenerationFailedError


class FakeTextGenerationService:
    """Deterministic stand-in for the AI service."""

    def __init__(self) -> None:
        self.feedback = FeedbackResult(
            overall_score=Score(Decimal("8.5")),
            grammar_score=Score(Decimal("8.0")),
            vocabulary_score=Score(Decimal("9.0")),
            structure_score=Score(Decimal("7.0")),
            strengths="Clear structure.",
            improvements="Watch your articles.",
            suggestions="Read more short stories.",
        )
        self.content = TestContent.from_dict(
            {
                "passage": "The cat sat on the mat.",
                "questions": [
                    {
                        "question": "Where did the cat sit?",
                        "options": ["On the mat", "On the sofa"],
                        "correctAnswer": "On the mat",
                    }
                ],
            }
        )
        self.fail = False
        self.feedback_calls: list[tuple[TestType, str, str | None]] = []
        self.content_calls: list[tuple[TestType, Level, int]] = []

    async def generate_feedback(
        self, test_type: TestType, response: str, prompt: str | None = None
    ) -> FeedbackResult:
        self.feedback_calls.append((test_type, response, prompt))
        if self.fail:
            raise GenerationFailedError("AI feedback request timed out")
        return self.feedback

    async def generate_test_content(
        self, test_type: TestType, level: Level, count: int
    ) -> TestContent:
        self.content_calls.append((test_type, level, count))
        if self.fail:
            raise GenerationFailedError("AI test_content request failed")
        return self.content
