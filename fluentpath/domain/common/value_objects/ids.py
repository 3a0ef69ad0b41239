from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier."""


@dataclass(frozen=True)
class ModuleId(EntityId):
    """Strongly-typed learning module identifier."""


@dataclass(frozen=True)
class ModuleProgressId(EntityId):
    """Strongly-typed module progress identifier."""


@dataclass(frozen=True)
class TestId(EntityId):
    """Strongly-typed test identifier."""

    __test__ = False


@dataclass(frozen=True)
class TestAttemptId(EntityId):
    """Strongly-typed test attempt identifier."""

    __test__ = False


@dataclass(frozen=True)
class AIFeedbackId(EntityId):
    """Strongly-typed AI feedback identifier."""


@dataclass(frozen=True)
class DailyActivityId(EntityId):
    """Strongly-typed daily activity identifier."""


@dataclass(frozen=True)
class AchievementId(EntityId):
    """Strongly-typed achievement identifier."""
