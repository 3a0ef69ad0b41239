"""Scoring of submitted answers."""

from decimal import Decimal

from fluentpath.domain.common.value_objects import Score
from fluentpath.domain.learning.entities.test import Question, Test
from fluentpath.domain.learning.entities.test_attempt import Answers

# Recorded for essays and letters until rubric feedback replaces it
PROVISIONAL_SCORE = Score(Decimal("7.5"))


class ScoringService:
    """
    Domain service computing the score of an attempt.

    Comprehension tests are scored objectively against each question's
    correct answer. Essays and letters get the provisional policy score.
    """

    def score(self, test: Test, answers: Answers) -> Score:
        if test.is_subjective:
            return PROVISIONAL_SCORE
        return self.score_comprehension(test.questions, answers)

    def score_comprehension(self, questions: tuple[Question, ...], answers: Answers) -> Score:
        """Return correct / total on the 0-10 scale; a test without questions scores 0."""
        correct = sum(
            1
            for index, question in enumerate(questions)
            if _is_correct(question, _answer_at(answers, index))
        )
        return Score.from_ratio(correct, len(questions))

    def points_for(self, score: Score) -> int:
        return score.to_points()


def _answer_at(answers: Answers, index: int) -> object:
    if isinstance(answers, list):
        return answers[index] if index < len(answers) else None
    if isinstance(answers, dict):
        if str(index) in answers:
            return answers[str(index)]
        return answers.get(index)  # type: ignore[call-overload]
    return None


def _is_correct(question: Question, answer: object) -> bool:
    if question.correct_answer is None or answer is None or isinstance(answer, bool):
        return False
    return str(answer).strip() == question.correct_answer.strip()
