"""Common value objects shared across all domain modules."""

from .ids import (
    AchievementId,
    AIFeedbackId,
    DailyActivityId,
    ModuleId,
    ModuleProgressId,
    TestAttemptId,
    TestId,
    UserId,
)
from .score import Score

__all__ = [
    # IDs
    "AIFeedbackId",
    "AchievementId",
    "DailyActivityId",
    "ModuleId",
    "ModuleProgressId",
    "TestAttemptId",
    "TestId",
    "UserId",
    # Scores
    "Score",
]
