"""
Test entity and its structured content.

A test's content is a JSON payload that may come from seed data or from the
text-generation service, so parsing is lenient: unknown keys are ignored and
missing fields fall back to empty values.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any

from fluentpath.domain.common.entity import Entity
from fluentpath.domain.common.exceptions import DomainError
from fluentpath.domain.common.value_object import ValueObject
from fluentpath.domain.common.value_objects import TestId
from fluentpath.domain.learning.entities.module import Level

DEFAULT_MAX_SCORE = 10


class TestType(StrEnum):
    __test__ = False

    COMPREHENSION = "comprehension"
    ESSAY = "essay"
    LETTER = "letter"

    @property
    def is_subjective(self) -> bool:
        return self in (TestType.ESSAY, TestType.LETTER)


DEFAULT_TIME_LIMITS: dict[TestType, int] = {
    TestType.COMPREHENSION: 15,
    TestType.ESSAY: 30,
    TestType.LETTER: 20,
}


@dataclass(frozen=True)
class Question(ValueObject):
    """One question of a test. Objective questions carry options and a correct answer."""

    question: str
    options: tuple[str, ...] = ()
    correct_answer: str | None = None
    points: int = 1
    id: int | None = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any], position: int) -> "Question":
        options = raw.get("options") or ()
        correct = raw.get("correctAnswer")
        points = raw.get("points")
        return cls(
            id=raw["id"] if isinstance(raw.get("id"), int) else position + 1,
            question=str(raw.get("question") or ""),
            options=tuple(str(o) for o in options) if isinstance(options, list | tuple) else (),
            correct_answer=str(correct) if correct is not None else None,
            points=points if isinstance(points, int) and points > 0 else 1,
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"id": self.id, "question": self.question, "points": self.points}
        if self.options:
            result["options"] = list(self.options)
        if self.correct_answer is not None:
            result["correctAnswer"] = self.correct_answer
        return result


@dataclass(frozen=True)
class TestContent(ValueObject):
    """Passage, writing prompt and questions of a test."""

    __test__ = False

    passage: str | None = None
    prompt: str | None = None
    questions: tuple[Question, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, raw: object) -> "TestContent":
        """
        Parse a stored or generated payload.

        Generated payloads may wrap the body in a nested ``content`` object,
        which is unwrapped here.
        """
        if not isinstance(raw, dict):
            return cls()
        body = raw.get("content") if isinstance(raw.get("content"), dict) else raw
        questions = body.get("questions")
        if not isinstance(questions, list):
            questions = []
        return cls(
            passage=body.get("passage") if isinstance(body.get("passage"), str) else None,
            prompt=body.get("prompt") if isinstance(body.get("prompt"), str) else None,
            questions=tuple(
                Question.from_dict(q, i) for i, q in enumerate(questions) if isinstance(q, dict)
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "passage": self.passage,
            "prompt": self.prompt,
            "questions": [q.to_dict() for q in self.questions],
        }


@dataclass
class Test(Entity[TestId]):
    """
    A quiz or writing task.

    Business Rules:
    - Title cannot be empty
    - Time limit and max score must be positive
    - Comprehension tests are scored objectively, essays and letters by rubric
    """

    __test__ = False

    id: TestId
    title: str
    type: TestType
    level: Level
    content: TestContent
    max_score: int = DEFAULT_MAX_SCORE
    time_limit: int = DEFAULT_TIME_LIMITS[TestType.COMPREHENSION]
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise DomainError("Test title cannot be empty")
        if self.time_limit <= 0:
            raise DomainError("Time limit must be positive")
        if self.max_score <= 0:
            raise DomainError("Max score must be positive")

    @property
    def is_subjective(self) -> bool:
        return self.type.is_subjective

    @property
    def questions(self) -> tuple[Question, ...]:
        return self.content.questions

    @property
    def prompt_text(self) -> str:
        """The task shown to the learner, used as context for feedback."""
        if self.content.prompt:
            return self.content.prompt
        if self.content.passage:
            return self.content.passage
        if self.content.questions:
            return self.content.questions[0].question
        return ""

    @classmethod
    def create(
        cls,
        title: str,
        type: TestType,
        level: Level,
        content: TestContent,
        time_limit: int | None = None,
        max_score: int = DEFAULT_MAX_SCORE,
    ) -> "Test":
        """Create a new test (ID will be 0 until persisted)."""
        return cls(
            id=TestId.generate(),
            title=title.strip(),
            type=type,
            level=level,
            content=content,
            max_score=max_score,
            time_limit=time_limit if time_limit is not None else DEFAULT_TIME_LIMITS[type],
        )

    @classmethod
    def generated_title(cls, type: TestType, level: Level) -> str:
        return f"{type.value.capitalize()} Test - {level.value}"
