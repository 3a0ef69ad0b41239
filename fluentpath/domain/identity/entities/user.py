"""User entity for learners."""

from dataclasses import dataclass
from datetime import datetime

from fluentpath.domain.common.entity import Entity
from fluentpath.domain.common.exceptions import InvariantViolationError, ValidationError
from fluentpath.domain.common.value_objects.ids import UserId
from fluentpath.domain.learning.entities.module import Level

MAX_EMAIL_LENGTH = 255


@dataclass
class User(Entity[UserId]):
    """
    A learner known to the application.

    Business Rules:
    - The id is supplied by the authentication gate; users are created on first use
    - Total points never decrease
    - Current streak is never negative
    - Last activity date is set on every recorded activity
    """

    id: UserId
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    current_level: Level = Level.BEGINNER
    total_points: int = 0
    current_streak: int = 0
    last_activity_date: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.email is not None and len(self.email) > MAX_EMAIL_LENGTH:
            raise ValidationError(
                f"Email cannot exceed {MAX_EMAIL_LENGTH} characters",
                field="email",
                value=self.email,
            )
        if self.total_points < 0:
            raise InvariantViolationError("User", "total points cannot be negative")
        if self.current_streak < 0:
            raise InvariantViolationError("User", "current streak cannot be negative")

    @property
    def display_name(self) -> str:
        parts = [p for p in (self.first_name, self.last_name) if p]
        if parts:
            return " ".join(parts)
        return self.email or f"Learner {self.id.value}"

    def apply_streak(self, streak: int, last_activity_date: datetime) -> None:
        """Store the outcome of a streak update."""
        if streak < 0:
            raise InvariantViolationError("User", "current streak cannot be negative")
        self.current_streak = streak
        self.last_activity_date = last_activity_date

    @classmethod
    def create(
        cls,
        id: UserId,
        email: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        profile_image_url: str | None = None,
    ) -> "User":
        """Create a new learner with an empty record."""
        return cls(
            id=id,
            email=email,
            first_name=first_name,
            last_name=last_name,
            profile_image_url=profile_image_url,
        )

    @classmethod
    def create_with_id(
        cls,
        id: UserId,
        email: str | None,
        first_name: str | None,
        last_name: str | None,
        profile_image_url: str | None,
        current_level: Level,
        total_points: int,
        current_streak: int,
        last_activity_date: datetime | None,
        created_at: datetime | None,
        updated_at: datetime | None,
    ) -> "User":
        """Reconstitute a user from persistence."""
        return cls(
            id=id,
            email=email,
            first_name=first_name,
            last_name=last_name,
            profile_image_url=profile_image_url,
            current_level=current_level,
            total_points=total_points,
            current_streak=current_streak,
            last_activity_date=last_activity_date,
            created_at=created_at,
            updated_at=updated_at,
        )
