"""Mapper for User ORM ↔ Domain conversion."""

from fluentpath.domain.common.value_objects.ids import UserId
from fluentpath.domain.identity.entities.user import User
from fluentpath.domain.learning.entities.module import Level
from fluentpath.models import User as UserORM


class UserMapper:
    """Mapper for User ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: UserORM) -> User:
        """Convert ORM model to domain entity."""
        return User.create_with_id(
            id=UserId(orm_model.id),
            email=orm_model.email,
            first_name=orm_model.first_name,
            last_name=orm_model.last_name,
            profile_image_url=orm_model.profile_image_url,
            current_level=Level(orm_model.current_level),
            total_points=orm_model.total_points,
            current_streak=orm_model.current_streak,
            last_activity_date=orm_model.last_activity_date,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: User) -> UserORM:
        """Convert a new domain entity to an ORM model."""
        return UserORM(
            id=domain_entity.id.value,
            email=domain_entity.email,
            first_name=domain_entity.first_name,
            last_name=domain_entity.last_name,
            profile_image_url=domain_entity.profile_image_url,
            current_level=domain_entity.current_level.value,
            total_points=domain_entity.total_points,
            current_streak=domain_entity.current_streak,
            last_activity_date=domain_entity.last_activity_date,
        )
