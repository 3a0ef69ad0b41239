"""Access token creation and verification."""

from datetime import UTC, datetime, timedelta

import jwt
from jwt import InvalidTokenError
from pydantic import BaseModel

from fluentpath.config import get_settings

ALGORITHM = "HS256"


class AccessTokenClaims(BaseModel):
    """Identity vouched for by the authentication gate."""

    user_id: int
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None


def create_access_token(
    user_id: int,
    email: str | None = None,
    first_name: str | None = None,
    last_name: str | None = None,
) -> str:
    """Create an access token for a user."""
    settings = get_settings()
    expire = datetime.now(UTC) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode: dict[str, object] = {"sub": str(user_id), "exp": expire, "type": "access"}
    if email:
        to_encode["email"] = email
    if first_name:
        to_encode["first_name"] = first_name
    if last_name:
        to_encode["last_name"] = last_name
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=ALGORITHM)


def verify_access_token(token: str) -> AccessTokenClaims | None:
    """Verify an access token and return its claims if valid."""
    try:
        payload = jwt.decode(token, get_settings().SECRET_KEY, algorithms=[ALGORITHM])
        # Refresh tokens are issued by the gate for its own use only
        if payload.get("type") == "refresh":
            return None
        user_id = payload.get("sub")
        if user_id is None:
            return None
        return AccessTokenClaims(
            user_id=int(user_id),
            email=payload.get("email"),
            first_name=payload.get("first_name"),
            last_name=payload.get("last_name"),
        )
    except (InvalidTokenError, ValueError):
        return None
