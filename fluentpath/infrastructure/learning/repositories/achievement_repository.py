"""Repository for Achievement domain entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from fluentpath.domain.common.value_objects import UserId
from fluentpath.domain.learning.entities.achievement import Achievement
from fluentpath.infrastructure.learning.mappers.progress_mapper import AchievementMapper
from fluentpath.models import Achievement as AchievementORM


class AchievementRepository:
    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = AchievementMapper()

    def find_by_user(self, user_id: UserId) -> list[Achievement]:
        """
        Get the learner's achievements.

        Returns:
            Achievements ordered by earned_at DESC
        """
        stmt = (
            select(AchievementORM)
            .where(AchievementORM.user_id == user_id.value)
            .order_by(AchievementORM.earned_at.desc(), AchievementORM.id.desc())
        )
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def save_all(self, achievements: list[Achievement]) -> list[Achievement]:
        orm_models = [self.mapper.to_orm(a) for a in achievements]
        self.db.add_all(orm_models)
        self.db.commit()
        for orm_model in orm_models:
            self.db.refresh(orm_model)
        return [self.mapper.to_domain(orm) for orm in orm_models]
