from pydantic import BaseModel
from pydantic_ai import Agent

from fluentpath.infrastructure.ai.ai_model import get_ai_model


class FeedbackOutput(BaseModel):
    """Rubric evaluation. Every field is optional; gaps are filled in by the service."""

    overall_score: float | None = None
    grammar_score: float | None = None
    vocabulary_score: float | None = None
    structure_score: float | None = None
    strengths: str | None = None
    improvements: str | None = None
    suggestions: str | None = None


class QuestionOutput(BaseModel):
    question: str
    options: list[str] = []
    correctAnswer: str | None = None  # noqa: N815
    points: int = 1


class TestContentOutput(BaseModel):
    __test__ = False

    passage: str | None = None
    prompt: str | None = None
    questions: list[QuestionOutput] = []


def get_feedback_agent() -> Agent[None, FeedbackOutput]:
    return Agent(
        get_ai_model(),
        output_type=FeedbackOutput,
        instructions="""
        You are an experienced English teacher evaluating a learner's writing.
        You receive the type of task (essay or letter), the original prompt when
        available, and the learner's response.

        Score the response on a scale from 0 to 10 (one decimal place) for:
        - overall_score: overall quality and how well it answers the prompt
        - grammar_score: grammatical accuracy
        - vocabulary_score: range and precision of vocabulary
        - structure_score: organisation, paragraphing and coherence

        Then write:
        - strengths: one or two sentences on what the learner did well
        - improvements: one or two sentences on the most important weaknesses
        - suggestions: concrete advice for the next attempt

        Be encouraging but honest. Address the learner directly.
        """,
    )


def get_test_content_agent() -> Agent[None, TestContentOutput]:
    return Agent(
        get_ai_model(),
        output_type=TestContentOutput,
        instructions="""
        You write English tests for language learners.
        You receive the test type, the learner level (beginner, intermediate or
        advanced) and the number of questions.

        For a comprehension test:
        - passage: a reading passage suitable for the level
        - questions: multiple choice questions about the passage, each with
          four options and correctAnswer set to the exact text of the right option

        For an essay or letter test:
        - prompt: a clear writing task suitable for the level, stating purpose,
          audience and approximate length
        - questions: leave empty

        Keep the language natural and the difficulty appropriate for the level.
        """,
    )
