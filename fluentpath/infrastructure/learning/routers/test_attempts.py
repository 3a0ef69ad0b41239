"""API routes for the learner's test attempts."""

from fastapi import APIRouter, Depends, status

from fluentpath.application.learning.use_cases.assessments.attempt_query_use_case import (
    AttemptQueryUseCase,
)
from fluentpath.core import container
from fluentpath.infrastructure.common.di import inject_use_case
from fluentpath.infrastructure.identity.dependencies import CurrentUser
from fluentpath.infrastructure.learning.routers.responses import (
    to_attempt_response,
    to_feedback_response,
)
from fluentpath.infrastructure.learning.schemas import AttemptsListResponse, FeedbackResponse

router = APIRouter(prefix="/test-attempts", tags=["tests"])


@router.get("", response_model=AttemptsListResponse, status_code=status.HTTP_200_OK)
def list_attempts(
    current_user: CurrentUser,
    use_case: AttemptQueryUseCase = Depends(
        inject_use_case(container.attempt_query_use_case)
    ),
) -> AttemptsListResponse:
    """List the learner's attempts, newest first."""
    attempts = use_case.list_attempts(current_user.id.value)
    return AttemptsListResponse(attempts=[to_attempt_response(a) for a in attempts])


@router.get(
    "/{attempt_id}/feedback",
    response_model=FeedbackResponse | None,
    status_code=status.HTTP_200_OK,
)
def get_feedback(
    attempt_id: int,
    current_user: CurrentUser,
    use_case: AttemptQueryUseCase = Depends(
        inject_use_case(container.attempt_query_use_case)
    ),
) -> FeedbackResponse | None:
    """
    Get the AI feedback of one of the learner's attempts.

    Returns null while the attempt has no feedback.

    Raises:
        AttemptNotFoundError: If the attempt doesn't exist or belongs to someone else
    """
    feedback = use_case.get_feedback(attempt_id, current_user.id.value)
    return to_feedback_response(feedback) if feedback else None
