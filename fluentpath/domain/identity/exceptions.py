"""Identity domain exceptions."""

from fluentpath.domain.common.exceptions import EntityNotFoundError


class UserNotFoundError(EntityNotFoundError):
    """Raised when a user cannot be found."""

    def __init__(self, user_id: int) -> None:
        super().__init__("User", user_id)
