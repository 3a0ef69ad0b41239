"""Repository for per-day activity counters."""

from datetime import date

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from fluentpath.domain.common.value_objects import UserId
from fluentpath.domain.learning.entities.daily_activity import DailyActivity
from fluentpath.infrastructure.learning.mappers.progress_mapper import DailyActivityMapper
from fluentpath.models import DailyActivity as DailyActivityORM


class DailyActivityRepository:
    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = DailyActivityMapper()

    def record(self, activity: DailyActivity) -> DailyActivity:
        """
        Add the activity to the learner's record for that day.

        Uses a native upsert so that concurrent writers for the same day
        add to the counters instead of racing on the insert.

        Returns:
            The accumulated record for the day
        """
        dialect = self.db.get_bind().dialect.name
        insert = postgresql.insert if dialect == "postgresql" else sqlite.insert

        stmt = insert(DailyActivityORM).values(
            user_id=activity.user_id.value,
            date=activity.date,
            activities_completed=activity.activities_completed,
            points_earned=activity.points_earned,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[DailyActivityORM.user_id, DailyActivityORM.date],
            set_={
                "activities_completed": DailyActivityORM.activities_completed
                + stmt.excluded.activities_completed,
                "points_earned": DailyActivityORM.points_earned + stmt.excluded.points_earned,
            },
        )
        self.db.execute(stmt)
        self.db.commit()

        row = self.db.execute(
            select(DailyActivityORM)
            .where(
                DailyActivityORM.user_id == activity.user_id.value,
                DailyActivityORM.date == activity.date,
            )
            .execution_options(populate_existing=True)
        ).scalar_one()
        return self.mapper.to_domain(row)

    def find_since(self, user_id: UserId, start: date) -> list[DailyActivity]:
        """
        Get the learner's daily records from ``start`` onwards.

        Returns:
            Records ordered by date DESC
        """
        stmt = (
            select(DailyActivityORM)
            .where(DailyActivityORM.user_id == user_id.value, DailyActivityORM.date >= start)
            .order_by(DailyActivityORM.date.desc())
        )
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]
