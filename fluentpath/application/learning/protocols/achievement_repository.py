"""Protocol for Achievement repository."""

from typing import Protocol

from fluentpath.domain.common.value_objects import UserId
from fluentpath.domain.learning.entities.achievement import Achievement


class AchievementRepositoryProtocol(Protocol):
    def find_by_user(self, user_id: UserId) -> list[Achievement]:
        """Achievements of a user, most recent first."""
        ...

    def save_all(self, achievements: list[Achievement]) -> list[Achievement]: ...
