"""Use case for submitting a test attempt."""

import json
from dataclasses import dataclass, field
from datetime import UTC, datetime

import structlog

from fluentpath.application.learning.protocols.achievement_repository import (
    AchievementRepositoryProtocol,
)
from fluentpath.application.learning.protocols.ai_feedback_repository import (
    AIFeedbackRepositoryProtocol,
)
from fluentpath.application.learning.protocols.test_attempt_repository import (
    TestAttemptRepositoryProtocol,
)
from fluentpath.application.learning.protocols.test_repository import TestRepositoryProtocol
from fluentpath.application.learning.protocols.text_generation_service import (
    TextGenerationServiceProtocol,
)
from fluentpath.application.learning.use_cases.progress.record_activity_use_case import (
    RecordActivityUseCase,
)
from fluentpath.domain.common.value_objects import TestId, UserId
from fluentpath.domain.identity.entities.user import User
from fluentpath.domain.learning.entities.achievement import Achievement
from fluentpath.domain.learning.entities.ai_feedback import AIFeedback
from fluentpath.domain.learning.entities.test import Test
from fluentpath.domain.learning.entities.test_attempt import Answers, TestAttempt
from fluentpath.domain.learning.services.achievement_service import AchievementService
from fluentpath.domain.learning.services.scoring_service import ScoringService
from fluentpath.exceptions import (
    DuplicateSubmissionError,
    GenerationFailedError,
    TestNotFoundError,
    ValidationError,
)

logger = structlog.get_logger(__name__)


@dataclass
class SubmissionResult:
    """
    Outcome of a submission.

    ``replayed`` is set when the submission id was seen before; the stored
    attempt is returned and nothing is counted again.
    """

    attempt: TestAttempt
    test: Test
    points_earned: int
    feedback: AIFeedback | None = None
    user: User | None = None
    new_achievements: list[Achievement] = field(default_factory=list)
    replayed: bool = False


class SubmitTestUseCase:
    """
    Runs the attempt lifecycle.

    1. Score the answers (final for comprehension, provisional for essays and letters)
    2. Store the attempt
    3. For essays and letters, ask for rubric feedback and finalize the attempt in place
    4. Update the streak, add points and accumulate today's activity
    5. Award new achievements
    """

    def __init__(
        self,
        test_repository: TestRepositoryProtocol,
        attempt_repository: TestAttemptRepositoryProtocol,
        feedback_repository: AIFeedbackRepositoryProtocol,
        achievement_repository: AchievementRepositoryProtocol,
        text_generation_service: TextGenerationServiceProtocol,
        record_activity_use_case: RecordActivityUseCase,
        scoring_service: ScoringService,
        achievement_service: AchievementService,
    ) -> None:
        self.test_repository = test_repository
        self.attempt_repository = attempt_repository
        self.feedback_repository = feedback_repository
        self.achievement_repository = achievement_repository
        self.text_generation_service = text_generation_service
        self.record_activity_use_case = record_activity_use_case
        self.scoring_service = scoring_service
        self.achievement_service = achievement_service

    async def submit(
        self,
        test_id: int,
        user_id: int,
        answers: Answers,
        time_spent: int | None = None,
        submission_id: str | None = None,
        now: datetime | None = None,
    ) -> SubmissionResult:
        """
        Submit answers to a test.

        Args:
            test_id: ID of the test
            user_id: ID of the learner
            answers: List or object keyed by question index, or free text
            time_spent: Minutes spent on the test
            submission_id: Client key making retries of the same submission safe
            now: Submission time (defaults to the current time)

        Raises:
            TestNotFoundError: If the test doesn't exist
            ValidationError: If the answers don't fit the test type
            DuplicateSubmissionError: If the submission id belongs to another test
        """
        now = now or datetime.now(UTC)
        user_id_vo = UserId(user_id)

        test = self.test_repository.find_by_id(TestId(test_id))
        if not test:
            raise TestNotFoundError(test_id)
        _validate_answers(test, answers, time_spent)

        if submission_id:
            existing = self.attempt_repository.find_by_submission_id(user_id_vo, submission_id)
            if existing:
                return self._replay(existing, test)

        score = self.scoring_service.score(test, answers)
        attempt = TestAttempt.create(
            user_id=user_id_vo,
            test_id=test.id,
            answers=answers,
            score=score,
            provisional=test.is_subjective,
            completed_at=now,
            time_spent=time_spent,
            submission_id=submission_id,
        )
        attempt.award_points(self.scoring_service.points_for(score))

        try:
            attempt = self.attempt_repository.save(attempt)
        except DuplicateSubmissionError:
            # A concurrent request stored the same submission first
            existing = (
                self.attempt_repository.find_by_submission_id(user_id_vo, submission_id)
                if submission_id
                else None
            )
            if not existing:
                raise
            return self._replay(existing, test)

        logger.info(
            "test_attempt_stored",
            attempt_id=attempt.id.value,
            test_id=test_id,
            user_id=user_id,
            score=float(attempt.score),
            status=attempt.status.value,
        )

        feedback = None
        if test.is_subjective:
            attempt, feedback = await self._finalize_with_feedback(test, attempt, answers)

        outcome = self.record_activity_use_case.record_activity(
            user_id,
            activities_completed=1,
            points_earned=attempt.points_earned,
            now=now,
            accrue_points=True,
        )
        new_achievements = self._award_achievements(outcome.user, attempt, now)

        logger.info(
            "test_submitted",
            attempt_id=attempt.id.value,
            user_id=user_id,
            points_earned=attempt.points_earned,
            streak=outcome.user.current_streak,
        )
        return SubmissionResult(
            attempt=attempt,
            test=test,
            points_earned=attempt.points_earned,
            feedback=feedback,
            user=outcome.user,
            new_achievements=new_achievements,
        )

    async def _finalize_with_feedback(
        self, test: Test, attempt: TestAttempt, answers: Answers
    ) -> tuple[TestAttempt, AIFeedback | None]:
        """Replace the provisional score with the rubric score; keep it if generation fails."""
        try:
            result = await self.text_generation_service.generate_feedback(
                test.type, _response_text(answers), test.prompt_text or None
            )
        except GenerationFailedError as e:
            logger.warning(
                "ai_feedback_failed",
                attempt_id=attempt.id.value,
                test_type=test.type.value,
                error=str(e),
            )
            return attempt, None

        attempt.finalize(result.overall_score)
        attempt.award_points(self.scoring_service.points_for(result.overall_score))
        attempt = self.attempt_repository.save(attempt)

        feedback = self.feedback_repository.save(
            AIFeedback.create(
                test_attempt_id=attempt.id,
                overall_score=result.overall_score,
                grammar_score=result.grammar_score,
                vocabulary_score=result.vocabulary_score,
                structure_score=result.structure_score,
                strengths=result.strengths,
                improvements=result.improvements,
                suggestions=result.suggestions,
            )
        )
        logger.info(
            "test_attempt_finalized",
            attempt_id=attempt.id.value,
            score=float(attempt.score),
        )
        return attempt, feedback

    def _award_achievements(
        self, user: User, attempt: TestAttempt, now: datetime
    ) -> list[Achievement]:
        new_achievements = self.achievement_service.evaluate(
            user=user,
            attempt=attempt,
            tests_completed=self.attempt_repository.count_by_user(user.id),
            earned=self.achievement_repository.find_by_user(user.id),
            now=now,
        )
        if not new_achievements:
            return []

        saved = self.achievement_repository.save_all(new_achievements)
        logger.info(
            "achievements_awarded",
            user_id=user.id.value,
            titles=[a.title for a in saved],
        )
        return saved

    def _replay(self, existing: TestAttempt, test: Test) -> SubmissionResult:
        if existing.test_id != test.id:
            raise DuplicateSubmissionError(existing.submission_id or "")

        logger.info(
            "test_submission_replayed",
            attempt_id=existing.id.value,
            submission_id=existing.submission_id,
        )
        return SubmissionResult(
            attempt=existing,
            test=test,
            points_earned=existing.points_earned,
            feedback=self.feedback_repository.find_by_attempt(existing.id),
            replayed=True,
        )


def _validate_answers(test: Test, answers: Answers, time_spent: int | None) -> None:
    if time_spent is not None and time_spent < 0:
        raise ValidationError("Time spent cannot be negative")
    if answers is None:
        raise ValidationError("Answers are required")

    if test.is_subjective:
        if isinstance(answers, str) and not answers.strip():
            raise ValidationError(f"A {test.type.value} submission cannot be empty")
        if isinstance(answers, list | dict) and not answers:
            raise ValidationError(f"A {test.type.value} submission cannot be empty")
        return

    if not isinstance(answers, list | dict):
        raise ValidationError(
            "Comprehension answers must be a list or an object keyed by question index"
        )


def _response_text(answers: Answers) -> str:
    if isinstance(answers, str):
        return answers
    return json.dumps(answers, ensure_ascii=False)
