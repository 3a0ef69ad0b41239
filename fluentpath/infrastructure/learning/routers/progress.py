"""API routes for the dashboard, progress, leaderboard and activity log."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import OperationalError

from fluentpath.application.learning.use_cases.progress.dashboard_use_case import (
    DashboardUseCase,
)
from fluentpath.application.learning.use_cases.progress.leaderboard_use_case import (
    MAX_LEADERBOARD_LIMIT,
    LeaderboardUseCase,
)
from fluentpath.application.learning.use_cases.progress.progress_use_case import (
    ProgressUseCase,
)
from fluentpath.application.learning.use_cases.progress.record_activity_use_case import (
    RecordActivityUseCase,
)
from fluentpath.config import get_settings
from fluentpath.core import container
from fluentpath.domain.common.exceptions import DomainError
from fluentpath.exceptions import FluentPathError
from fluentpath.infrastructure.common.di import inject_use_case
from fluentpath.infrastructure.identity.dependencies import CurrentUser
from fluentpath.infrastructure.identity.routers.users import to_user_details
from fluentpath.infrastructure.learning.routers.responses import (
    to_achievement_response,
    to_attempt_response,
    to_daily_activity_schema,
    to_feedback_response,
    to_leaderboard_entry,
    to_stats_schema,
    to_test_response,
)
from fluentpath.infrastructure.learning.schemas import (
    ActivityRequest,
    ActivityResponse,
    DashboardResponse,
    LeaderboardResponse,
    ProgressResponse,
    RecentAttemptSchema,
)

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["progress"])


@router.get("/dashboard", response_model=DashboardResponse, status_code=status.HTTP_200_OK)
def get_dashboard(
    current_user: CurrentUser,
    use_case: DashboardUseCase = Depends(
        inject_use_case(container.dashboard_use_case)
    ),
) -> DashboardResponse:
    """
    Get the learner's dashboard.

    Includes stats, the five most recent attempts with their test and
    feedback, the top ten learners, the learner's own rank and the latest
    achievements.
    """
    overview = use_case.get_dashboard(current_user.id.value)
    return DashboardResponse(
        user=to_user_details(overview.user),
        rank=overview.rank,
        stats=to_stats_schema(overview.stats),
        recent_attempts=[
            RecentAttemptSchema(
                attempt=to_attempt_response(summary.attempt),
                test=to_test_response(summary.test) if summary.test else None,
                feedback=to_feedback_response(summary.feedback) if summary.feedback else None,
            )
            for summary in overview.recent_attempts
        ],
        leaderboard=[to_leaderboard_entry(e) for e in overview.leaderboard],
        achievements=[to_achievement_response(a) for a in overview.achievements],
    )


@router.get("/progress", response_model=ProgressResponse, status_code=status.HTTP_200_OK)
def get_progress(
    current_user: CurrentUser,
    use_case: ProgressUseCase = Depends(
        inject_use_case(container.progress_use_case)
    ),
) -> ProgressResponse:
    """Get the learner's stats, recent daily activity and achievements."""
    overview = use_case.get_progress(current_user.id.value)
    return ProgressResponse(
        stats=to_stats_schema(overview.stats),
        streak_history=[to_daily_activity_schema(a) for a in overview.streak_history],
        achievements=[to_achievement_response(a) for a in overview.achievements],
    )


@router.get("/leaderboard", response_model=LeaderboardResponse, status_code=status.HTTP_200_OK)
def get_leaderboard(
    current_user: CurrentUser,
    use_case: LeaderboardUseCase = Depends(
        inject_use_case(container.leaderboard_use_case)
    ),
    limit: Annotated[int | None, Query(ge=1, le=MAX_LEADERBOARD_LIMIT)] = None,
) -> LeaderboardResponse:
    """Get learners ordered by total points, then streak."""
    entries = use_case.get_leaderboard(limit or get_settings().LEADERBOARD_DEFAULT_LIMIT)
    return LeaderboardResponse(entries=[to_leaderboard_entry(e) for e in entries])


@router.post("/activity", response_model=ActivityResponse, status_code=status.HTTP_200_OK)
def record_activity(
    request: ActivityRequest,
    current_user: CurrentUser,
    use_case: RecordActivityUseCase = Depends(
        inject_use_case(container.record_activity_use_case)
    ),
) -> ActivityResponse:
    """
    Record learner activity.

    Updates the streak and accumulates today's activity record. The points
    are logged on the day only; the learner's total grows from test
    submissions alone.
    """
    try:
        outcome = use_case.record_activity(
            current_user.id.value,
            activities_completed=request.activities_completed,
            points_earned=request.points_earned,
        )
        return ActivityResponse(
            activity=to_daily_activity_schema(outcome.activity),
            total_points=outcome.user.total_points,
            current_streak=outcome.user.current_streak,
        )
    except (FluentPathError, DomainError, OperationalError):
        raise
    except Exception as e:
        logger.error("failed_to_record_activity", user_id=current_user.id.value, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
