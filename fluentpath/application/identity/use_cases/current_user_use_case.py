"""Use case resolving the authenticated learner."""

import structlog

from fluentpath.application.identity.protocols.user_repository import UserRepositoryProtocol
from fluentpath.domain.common.value_objects.ids import UserId
from fluentpath.domain.identity.entities.user import User

logger = structlog.get_logger(__name__)


class CurrentUserUseCase:
    """Loads learners by the id the authentication gate vouches for."""

    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        self.user_repository = user_repository

    def get_or_create_user(
        self,
        user_id: int,
        email: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> User:
        """Return the learner, creating an empty record on first login."""
        user_id_vo = UserId(user_id)
        user = self.user_repository.find_by_id(user_id_vo)
        if user:
            return user

        user = self.user_repository.create(
            User.create(id=user_id_vo, email=email, first_name=first_name, last_name=last_name)
        )
        logger.info("learner_created", user_id=user_id)
        return user
