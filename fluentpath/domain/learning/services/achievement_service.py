"""Rules for awarding achievements after an attempt."""

from collections.abc import Iterable
from datetime import datetime

from fluentpath.domain.common.value_objects import Score
from fluentpath.domain.identity.entities.user import User
from fluentpath.domain.learning.entities.achievement import Achievement, AchievementType
from fluentpath.domain.learning.entities.test_attempt import TestAttempt

FIRST_TEST_TITLE = "First Test Completed"
PERFECT_SCORE_TITLE = "Perfect Score"
STREAK_MILESTONES = (3, 7, 30)


def streak_title(days: int) -> str:
    return f"{days}-Day Streak"


class AchievementService:
    """Decides which new achievements an attempt earns."""

    def evaluate(
        self,
        user: User,
        attempt: TestAttempt,
        tests_completed: int,
        earned: Iterable[Achievement],
        now: datetime,
    ) -> list[Achievement]:
        """
        Return achievements earned by this attempt that the learner doesn't hold yet.

        Args:
            user: Learner with the streak already updated
            attempt: The attempt just submitted, with its final score
            tests_completed: Attempts of the learner including this one
            earned: Achievements the learner already holds
            now: Award time
        """
        held = {a.key for a in earned}
        candidates: list[tuple[AchievementType, str, str]] = []

        if tests_completed >= 1:
            candidates.append(
                (AchievementType.COMPLETION, FIRST_TEST_TITLE, "Completed your first test.")
            )
        for days in STREAK_MILESTONES:
            if user.current_streak >= days:
                candidates.append(
                    (AchievementType.STREAK, streak_title(days), f"Practiced {days} days in a row.")
                )
        if attempt.score == Score(10):
            candidates.append(
                (AchievementType.SCORE, PERFECT_SCORE_TITLE, "Scored 10 out of 10 on a test.")
            )

        return [
            Achievement.create(
                user_id=user.id,
                type=type_,
                title=title,
                description=description,
                earned_at=now,
            )
            for type_, title, description in candidates
            if (type_, title) not in held
        ]
