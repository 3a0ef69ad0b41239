"""Repository for learning modules and module progress."""

from sqlalchemy import case, func, select
from sqlalchemy.orm import Session

from fluentpath.domain.common.value_objects import ModuleId, UserId
from fluentpath.domain.learning.entities.module import Level, Module, ModuleProgress
from fluentpath.infrastructure.learning.mappers.module_mapper import (
    ModuleMapper,
    ModuleProgressMapper,
)
from fluentpath.models import Module as ModuleORM
from fluentpath.models import UserProgress as UserProgressORM


_LEVEL_RANK = case(
    {level.value: rank for rank, level in enumerate(Level)}, value=ModuleORM.level, else_=len(Level)
)


class ModuleRepository:
    """Repository for Module domain entities and per-learner progress."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = ModuleMapper()
        self.progress_mapper = ModuleProgressMapper()

    def find_all(self) -> list[Module]:
        """
        Get all modules.

        Returns:
            Modules ordered beginner to advanced, then by order within the level
        """
        stmt = select(ModuleORM).order_by(_LEVEL_RANK, ModuleORM.order, ModuleORM.id)
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def find_by_level(self, level: Level) -> list[Module]:
        stmt = (
            select(ModuleORM)
            .where(ModuleORM.level == level.value)
            .order_by(ModuleORM.order, ModuleORM.id)
        )
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def find_by_id(self, module_id: ModuleId) -> Module | None:
        orm_model = self.db.get(ModuleORM, module_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def save(self, module: Module) -> Module:
        orm_model = self.mapper.to_orm(module)
        self.db.add(orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def find_progress(self, user_id: UserId) -> list[ModuleProgress]:
        stmt = select(UserProgressORM).where(UserProgressORM.user_id == user_id.value)
        return [
            self.progress_mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()
        ]

    def upsert_progress(self, progress: ModuleProgress) -> ModuleProgress:
        """
        Insert or replace the learner's progress on a module.

        Returns:
            The stored progress record
        """
        stmt = select(UserProgressORM).where(
            UserProgressORM.user_id == progress.user_id.value,
            UserProgressORM.module_id == progress.module_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        if orm_model is None:
            orm_model = UserProgressORM(
                user_id=progress.user_id.value, module_id=progress.module_id.value
            )
            self.db.add(orm_model)

        orm_model.completed = progress.completed
        orm_model.score = progress.score.value if progress.score is not None else None
        orm_model.completed_at = progress.completed_at
        self.db.commit()
        self.db.refresh(orm_model)
        return self.progress_mapper.to_domain(orm_model)

    def count_completed(self, user_id: UserId) -> int:
        stmt = select(func.count(UserProgressORM.id)).where(
            UserProgressORM.user_id == user_id.value,
            UserProgressORM.completed.is_(True),
        )
        return self.db.execute(stmt).scalar() or 0
