"""Mappers for Module and ModuleProgress ORM ↔ Domain conversion."""

from fluentpath.domain.common.value_objects import (
    ModuleId,
    ModuleProgressId,
    Score,
    UserId,
)
from fluentpath.domain.learning.entities.module import Level, Module, ModuleProgress
from fluentpath.models import Module as ModuleORM
from fluentpath.models import UserProgress as UserProgressORM


class ModuleMapper:
    def to_domain(self, orm_model: ModuleORM) -> Module:
        return Module(
            id=ModuleId(orm_model.id),
            title=orm_model.title,
            level=Level(orm_model.level),
            content=orm_model.content,
            order=orm_model.order,
            description=orm_model.description,
            created_at=orm_model.created_at,
        )

    def to_orm(self, domain_entity: Module) -> ModuleORM:
        return ModuleORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            title=domain_entity.title,
            description=domain_entity.description,
            level=domain_entity.level.value,
            content=domain_entity.content,
            order=domain_entity.order,
        )


class ModuleProgressMapper:
    def to_domain(self, orm_model: UserProgressORM) -> ModuleProgress:
        return ModuleProgress(
            id=ModuleProgressId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            module_id=ModuleId(orm_model.module_id),
            completed=orm_model.completed,
            score=Score(orm_model.score) if orm_model.score is not None else None,
            completed_at=orm_model.completed_at,
        )
