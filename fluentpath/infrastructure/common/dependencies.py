"""FastAPI dependencies for the application."""

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

from fluentpath.config import get_settings
from fluentpath.exceptions import AIDisabledError

F = TypeVar("F", bound=Callable[..., Any])


def require_ai_enabled(func: F) -> F:
    """
    Decorator that requires AI to be enabled for the endpoint.

    Raises AIDisabledError (HTTP 410 Gone) if AI features are disabled.

    Usage:
        @router.post("/endpoint")
        @require_ai_enabled
        async def my_endpoint():
            ...
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:  # noqa: ANN401
        settings = get_settings()
        if not settings.ai_enabled:
            raise AIDisabledError()
        return await func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]
