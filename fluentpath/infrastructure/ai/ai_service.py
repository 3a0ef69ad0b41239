"""Text-generation adapter backed by pydantic-ai agents."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

import structlog

from fluentpath.application.learning.protocols.text_generation_service import FeedbackResult
from fluentpath.config import get_settings
from fluentpath.domain.common.value_objects import Score
from fluentpath.domain.learning.entities.ai_feedback import (
    DEFAULT_IMPROVEMENTS,
    DEFAULT_STRENGTHS,
    DEFAULT_SUGGESTIONS,
)
from fluentpath.domain.learning.entities.module import Level
from fluentpath.domain.learning.entities.test import TestContent, TestType
from fluentpath.exceptions import GenerationFailedError
from fluentpath.infrastructure.ai.ai_agents import (
    FeedbackOutput,
    get_feedback_agent,
    get_test_content_agent,
)

logger = structlog.get_logger(__name__)


class AIService:
    """
    Generates rubric feedback and test content.

    Every call is bounded by the configured timeout. Any failure, be it the
    provider, the timeout or an unusable response, surfaces as
    GenerationFailedError.
    """

    def __init__(self, timeout_seconds: float | None = None) -> None:
        self.timeout_seconds = timeout_seconds or get_settings().AI_TIMEOUT_SECONDS

    async def generate_feedback(
        self, test_type: TestType, response: str, prompt: str | None = None
    ) -> FeedbackResult:
        message = f"Task type: {test_type.value}\n"
        if prompt:
            message += f"Prompt: {prompt}\n"
        message += f"Learner response:\n{response}"

        output = await self._run("feedback", lambda: get_feedback_agent().run(message))
        return feedback_from_output(output)

    async def generate_test_content(
        self, test_type: TestType, level: Level, count: int
    ) -> TestContent:
        message = (
            f"Create a {test_type.value} test for {level.value} learners with {count} questions."
        )
        output = await self._run("test_content", lambda: get_test_content_agent().run(message))

        content = TestContent.from_dict(output.model_dump())
        if test_type == TestType.COMPREHENSION and not content.questions:
            raise GenerationFailedError("Generated comprehension test has no questions")
        if test_type.is_subjective and not (content.prompt or content.questions):
            raise GenerationFailedError(f"Generated {test_type.value} test has no prompt")
        return content

    async def _run(self, kind: str, start: Callable[[], Awaitable[Any]]) -> Any:  # noqa: ANN401
        try:
            result = await asyncio.wait_for(start(), timeout=self.timeout_seconds)
        except TimeoutError as e:
            logger.warning("ai_request_timed_out", kind=kind, timeout=self.timeout_seconds)
            raise GenerationFailedError(f"AI {kind} request timed out") from e
        except GenerationFailedError:
            raise
        except Exception as e:
            logger.warning("ai_request_failed", kind=kind, error=str(e))
            raise GenerationFailedError(f"AI {kind} request failed: {e}") from e
        return result.output


def feedback_from_output(output: FeedbackOutput) -> FeedbackResult:
    """Clamp scores into range and fill in missing commentary."""
    return FeedbackResult(
        overall_score=Score.clamped(output.overall_score),
        grammar_score=Score.clamped(output.grammar_score),
        vocabulary_score=Score.clamped(output.vocabulary_score),
        structure_score=Score.clamped(output.structure_score),
        strengths=_text_or_default(output.strengths, DEFAULT_STRENGTHS),
        improvements=_text_or_default(output.improvements, DEFAULT_IMPROVEMENTS),
        suggestions=_text_or_default(output.suggestions, DEFAULT_SUGGESTIONS),
    )


def _text_or_default(text: str | None, default: str) -> str:
    if text is None or not text.strip():
        return default
    return text.strip()

