"""Progress analytics derived from attempts and feedback."""

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

from fluentpath.domain.common.value_objects import Score
from fluentpath.domain.learning.entities.test import TestType


@dataclass(frozen=True)
class ScoredAttempt:
    """An attempt score joined with the type of its test."""

    score: Score
    test_type: TestType


@dataclass(frozen=True)
class SkillsBreakdown:
    reading: float
    essay: float
    letter: float
    grammar: float


@dataclass(frozen=True)
class UserStats:
    completed_lessons: int
    tests_completed: int
    average_score: float
    skills_breakdown: SkillsBreakdown


def mean_score(scores: Sequence[Score]) -> float:
    """Arithmetic mean of scores, 0 for none."""
    if not scores:
        return 0.0
    total = sum((s.value for s in scores), Decimal(0))
    return float(total / len(scores))


class StatsService:
    """Domain service aggregating a learner's dashboard statistics."""

    def compute_stats(
        self,
        completed_lessons: int,
        attempts: Sequence[ScoredAttempt],
        grammar_scores: Sequence[Score],
    ) -> UserStats:
        """
        Build the statistics.

        Args:
            completed_lessons: Number of completed module progress records
            attempts: Every attempt of the learner with its test type
            grammar_scores: Grammar sub-scores of all feedback on the learner's attempts
        """
        by_type: dict[TestType, list[Score]] = {t: [] for t in TestType}
        for attempt in attempts:
            by_type[attempt.test_type].append(attempt.score)

        return UserStats(
            completed_lessons=completed_lessons,
            tests_completed=len(attempts),
            average_score=mean_score([a.score for a in attempts]),
            skills_breakdown=SkillsBreakdown(
                reading=mean_score(by_type[TestType.COMPREHENSION]),
                essay=mean_score(by_type[TestType.ESSAY]),
                letter=mean_score(by_type[TestType.LETTER]),
                grammar=mean_score(grammar_scores),
            ),
        )
