"""Repository for User domain entities."""

from datetime import datetime

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from fluentpath.domain.common.value_objects.ids import UserId
from fluentpath.domain.identity.entities.user import User
from fluentpath.domain.identity.exceptions import UserNotFoundError
from fluentpath.infrastructure.identity.mappers.user_mapper import UserMapper
from fluentpath.models import User as UserORM


class UserRepository:
    """Repository for User domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    def find_by_id(self, user_id: UserId) -> User | None:
        """
        Find a user by ID.

        Args:
            user_id: The user ID

        Returns:
            User entity if found, None otherwise
        """
        stmt = select(UserORM).where(UserORM.id == user_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_id_for_update(self, user_id: UserId) -> User | None:
        """
        Find a user by ID and lock the row until the transaction ends.

        SQLite has no row locks; there the statement is a plain select.
        """
        stmt = (
            select(UserORM)
            .where(UserORM.id == user_id.value)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def create(self, user: User) -> User:
        """
        Insert a new user.

        A concurrent request may create the same user first; that row is
        returned instead.
        """
        orm_model = self.mapper.to_orm(user)
        self.db.add(orm_model)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            existing = self.find_by_id(user.id)
            if existing is None:
                raise
            return existing
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def save_activity(
        self, user_id: UserId, streak: int, last_activity_date: datetime, points: int
    ) -> User:
        """
        Store the streak and add points to the total in a single statement.

        Raises:
            UserNotFoundError: If the user doesn't exist
        """
        stmt = (
            update(UserORM)
            .where(UserORM.id == user_id.value)
            .values(
                total_points=UserORM.total_points + points,
                current_streak=streak,
                last_activity_date=last_activity_date,
            )
        )
        result = self.db.execute(stmt)
        if result.rowcount == 0:
            self.db.rollback()
            raise UserNotFoundError(user_id.value)
        self.db.commit()

        orm_model = self.db.get(UserORM, user_id.value, populate_existing=True)
        if orm_model is None:
            raise UserNotFoundError(user_id.value)
        return self.mapper.to_domain(orm_model)

    def find_leaderboard(self, limit: int) -> list[User]:
        """
        Get the top learners.

        Returns:
            Users ordered by total points, then streak, then id
        """
        stmt = (
            select(UserORM)
            .order_by(
                UserORM.total_points.desc(),
                UserORM.current_streak.desc(),
                UserORM.id.asc(),
            )
            .limit(limit)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def rank_of(self, user: User) -> int:
        """1-based position of the user in the leaderboard ordering."""
        ahead = select(func.count(UserORM.id)).where(
            (UserORM.total_points > user.total_points)
            | (
                (UserORM.total_points == user.total_points)
                & (UserORM.current_streak > user.current_streak)
            )
            | (
                (UserORM.total_points == user.total_points)
                & (UserORM.current_streak == user.current_streak)
                & (UserORM.id < user.id.value)
            )
        )
        return (self.db.execute(ahead).scalar() or 0) + 1
