"""Use case for the points leaderboard."""

from dataclasses import dataclass

from fluentpath.application.identity.protocols.user_repository import UserRepositoryProtocol
from fluentpath.domain.identity.entities.user import User

MAX_LEADERBOARD_LIMIT = 100


@dataclass
class LeaderboardEntry:
    rank: int
    user: User


class LeaderboardUseCase:
    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        self.user_repository = user_repository

    def get_leaderboard(self, limit: int) -> list[LeaderboardEntry]:
        """Top learners by points then streak, ranked from 1. The limit is kept within 1-100."""
        limit = max(1, min(limit, MAX_LEADERBOARD_LIMIT))
        users = self.user_repository.find_leaderboard(limit)
        return [LeaderboardEntry(rank=index, user=user) for index, user in enumerate(users, 1)]
