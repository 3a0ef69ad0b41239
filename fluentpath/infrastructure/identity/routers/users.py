"""API routes for the authenticated learner."""

from fastapi import APIRouter

from fluentpath.domain.identity.entities.user import User
from fluentpath.infrastructure.identity.dependencies import CurrentUser
from fluentpath.infrastructure.identity.schemas import UserDetailsResponse

router = APIRouter(prefix="/auth", tags=["auth"])


def to_user_details(user: User) -> UserDetailsResponse:
    return UserDetailsResponse(
        id=user.id.value,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        display_name=user.display_name,
        profile_image_url=user.profile_image_url,
        current_level=user.current_level.value,
        total_points=user.total_points,
        current_streak=user.current_streak,
        last_activity_date=user.last_activity_date,
        created_at=user.created_at,
    )


@router.get("/user", response_model=UserDetailsResponse)
async def get_user(current_user: CurrentUser) -> UserDetailsResponse:
    """Get the authenticated learner, created on first use."""
    return to_user_details(current_user)
