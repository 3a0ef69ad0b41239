"""FastAPI dependencies for identity and authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from fluentpath.core import container
from fluentpath.database import DatabaseSession
from fluentpath.domain.identity.entities.user import User
from fluentpath.exceptions import CredentialsException
from fluentpath.infrastructure.identity.auth.token_service import verify_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login")


async def get_current_user(
    token: Annotated[str, Depends(oauth2_scheme)], db: DatabaseSession
) -> User:
    """
    Get the learner behind the access token.

    Learners are created on first use; the token's claims seed the profile.

    Raises:
        CredentialsException: If the token is invalid
    """
    claims = verify_access_token(token)
    if claims is None:
        raise CredentialsException

    container.db.override(db)
    try:
        use_case = container.current_user_use_case()
    finally:
        container.db.reset_override()

    return use_case.get_or_create_user(
        claims.user_id,
        email=claims.email,
        first_name=claims.first_name,
        last_name=claims.last_name,
    )


CurrentUser = Annotated[User, Depends(get_current_user)]
