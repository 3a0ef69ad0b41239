"""Custom exception hierarchy for the FluentPath application."""

from fastapi import HTTPException
from starlette import status


class FluentPathError(Exception):
    """Base exception for all FluentPath errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(FluentPathError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class TestNotFoundError(NotFoundError):
    """Test not found error."""

    __test__ = False

    def __init__(self, test_id: int) -> None:
        self.test_id = test_id
        super().__init__(f"Test with id {test_id} not found")


class AttemptNotFoundError(NotFoundError):
    """Test attempt not found error."""

    def __init__(self, attempt_id: int) -> None:
        self.attempt_id = attempt_id
        super().__init__(f"Test attempt with id {attempt_id} not found")


class LearningModuleNotFoundError(NotFoundError):
    """Learning module not found error."""

    def __init__(self, module_id: int) -> None:
        self.module_id = module_id
        super().__init__(f"Module with id {module_id} not found")


class ValidationError(FluentPathError):
    """Malformed request payload."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code=status_code)


class DuplicateSubmissionError(FluentPathError):
    """A submission id was stored concurrently by another request."""

    def __init__(self, submission_id: str) -> None:
        self.submission_id = submission_id
        super().__init__(f"Submission {submission_id} was already recorded", status_code=409)


class GenerationFailedError(FluentPathError):
    """The text-generation service failed or returned an unusable response."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=502)


class AIDisabledError(FluentPathError):
    """No text-generation provider is configured."""

    def __init__(self) -> None:
        super().__init__("AI features are not enabled on this server", status_code=410)


class PersistenceError(FluentPathError):
    """The persistence store is unavailable."""

    def __init__(self, message: str = "Persistence store is unavailable") -> None:
        super().__init__(message, status_code=503)


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)
