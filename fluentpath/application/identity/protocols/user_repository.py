"""Protocol for User repository."""

from datetime import datetime
from typing import Protocol

from fluentpath.domain.common.value_objects.ids import UserId
from fluentpath.domain.identity.entities.user import User


class UserRepositoryProtocol(Protocol):
    """Protocol for User repository operations."""

    def find_by_id(self, user_id: UserId) -> User | None:
        """
        Find a user by ID.

        Returns:
            User entity if found, None otherwise
        """
        ...

    def find_by_id_for_update(self, user_id: UserId) -> User | None:
        """
        Find a user by ID and lock the row until the next commit.

        Concurrent activity for the same learner waits on this lock, so a
        streak read-modify-write is never interleaved with another one.
        """
        ...

    def create(self, user: User) -> User:
        """Insert a new user with the id supplied by the authentication gate."""
        ...

    def save_activity(
        self, user_id: UserId, streak: int, last_activity_date: datetime, points: int
    ) -> User:
        """
        Store a streak update and add points in one statement, then commit.

        Points are added with an atomic increment on the stored total.

        Returns:
            The user as stored after the update
        """
        ...

    def find_leaderboard(self, limit: int) -> list[User]:
        """Users ordered by total points, then current streak, both descending."""
        ...

    def rank_of(self, user: User) -> int:
        """1-based leaderboard position of a user."""
        ...
