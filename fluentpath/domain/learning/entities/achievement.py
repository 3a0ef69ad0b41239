"""Achievement badges earned by learners."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from fluentpath.domain.common.entity import Entity
from fluentpath.domain.common.exceptions import DomainError
from fluentpath.domain.common.value_objects import AchievementId, UserId


class AchievementType(StrEnum):
    STREAK = "streak"
    SCORE = "score"
    COMPLETION = "completion"


@dataclass
class Achievement(Entity[AchievementId]):
    """A badge. A learner holds each (type, title) at most once."""

    id: AchievementId
    user_id: UserId
    type: AchievementType
    title: str
    description: str | None = None
    earned_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise DomainError("Achievement title cannot be empty")

    @property
    def key(self) -> tuple[AchievementType, str]:
        return (self.type, self.title)

    @classmethod
    def create(
        cls,
        user_id: UserId,
        type: AchievementType,
        title: str,
        description: str | None,
        earned_at: datetime,
    ) -> "Achievement":
        return cls(
            id=AchievementId.generate(),
            user_id=user_id,
            type=type,
            title=title,
            description=description,
            earned_at=earned_at,
        )
