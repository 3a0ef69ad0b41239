"""Learning modules and a learner's progress through them."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from fluentpath.domain.common.entity import Entity
from fluentpath.domain.common.exceptions import DomainError
from fluentpath.domain.common.value_objects import ModuleId, ModuleProgressId, Score, UserId


class Level(StrEnum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


@dataclass
class Module(Entity[ModuleId]):
    """
    Static unit of learning content.

    Modules are authored once and never change. Within a level they are
    sequenced by ``order``.
    """

    id: ModuleId
    title: str
    level: Level
    content: str
    order: int
    description: str | None = None
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise DomainError("Module title cannot be empty")
        if self.order < 0:
            raise DomainError("Module order cannot be negative")

    @classmethod
    def create(
        cls,
        title: str,
        level: Level,
        content: str,
        order: int,
        description: str | None = None,
    ) -> "Module":
        return cls(
            id=ModuleId.generate(),
            title=title.strip(),
            level=level,
            content=content,
            order=order,
            description=description,
        )


@dataclass
class ModuleProgress(Entity[ModuleProgressId]):
    """A learner's completion record for one module."""

    id: ModuleProgressId
    user_id: UserId
    module_id: ModuleId
    completed: bool = False
    score: Score | None = None
    completed_at: datetime | None = None

    @classmethod
    def record(
        cls,
        user_id: UserId,
        module_id: ModuleId,
        completed: bool,
        score: Score | None,
        now: datetime,
    ) -> "ModuleProgress":
        """Build a progress snapshot; completion time is only kept for completed modules."""
        return cls(
            id=ModuleProgressId.generate(),
            user_id=user_id,
            module_id=module_id,
            completed=completed,
            score=score,
            completed_at=now if completed else None,
        )
