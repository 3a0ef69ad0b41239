"""Capability interface of the external text-generation service."""

from dataclasses import dataclass
from typing import Protocol

from fluentpath.domain.common.value_objects import Score
from fluentpath.domain.learning.entities.module import Level
from fluentpath.domain.learning.entities.test import TestContent, TestType


@dataclass(frozen=True)
class FeedbackResult:
    """Rubric evaluation of a free-text submission, already clamped to range."""

    overall_score: Score
    grammar_score: Score
    vocabulary_score: Score
    structure_score: Score
    strengths: str
    improvements: str
    suggestions: str


class TextGenerationServiceProtocol(Protocol):
    """
    Narrow interface over the language model.

    Implementations raise GenerationFailedError for any failure, including
    timeouts and responses that cannot be used.
    """

    async def generate_feedback(
        self, test_type: TestType, response: str, prompt: str | None = None
    ) -> FeedbackResult: ...

    async def generate_test_content(
        self, test_type: TestType, level: Level, count: int
    ) -> TestContent: ...
