"""API routes for tests: browsing, generation and submission."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import OperationalError

from fluentpath.application.learning.use_cases.assessments.generate_test_use_case import (
    GenerateTestUseCase,
)
from fluentpath.application.learning.use_cases.assessments.submit_test_use_case import (
    SubmitTestUseCase,
)
from fluentpath.application.learning.use_cases.assessments.test_catalog_use_case import (
    TestCatalogUseCase,
)
from fluentpath.core import container
from fluentpath.domain.common.exceptions import DomainError
from fluentpath.domain.learning.entities.module import Level
from fluentpath.domain.learning.entities.test import TestType
from fluentpath.exceptions import FluentPathError
from fluentpath.infrastructure.common.dependencies import require_ai_enabled
from fluentpath.infrastructure.common.di import inject_use_case
from fluentpath.infrastructure.identity.dependencies import CurrentUser
from fluentpath.infrastructure.learning.routers.responses import (
    to_achievement_response,
    to_attempt_response,
    to_feedback_response,
    to_test_response,
)
from fluentpath.infrastructure.learning.schemas import (
    TestGenerateRequest,
    TestResponse,
    TestsListResponse,
    TestSubmitRequest,
    TestSubmitResponse,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/tests", tags=["tests"])


@router.get("", response_model=TestsListResponse, status_code=status.HTTP_200_OK)
def list_tests(
    current_user: CurrentUser,
    use_case: TestCatalogUseCase = Depends(
        inject_use_case(container.test_catalog_use_case)
    ),
    level: Annotated[Level | None, Query()] = None,
) -> TestsListResponse:
    """List every test, or the tests of one level."""
    tests = use_case.list_tests(level=level)
    return TestsListResponse(tests=[to_test_response(t) for t in tests])


@router.get("/type/{test_type}", response_model=TestsListResponse, status_code=status.HTTP_200_OK)
def list_tests_by_type(
    test_type: TestType,
    current_user: CurrentUser,
    use_case: TestCatalogUseCase = Depends(
        inject_use_case(container.test_catalog_use_case)
    ),
    level: Annotated[Level | None, Query()] = None,
) -> TestsListResponse:
    """List tests of one type: comprehension, essay or letter."""
    tests = use_case.list_tests(test_type, level)
    return TestsListResponse(tests=[to_test_response(t) for t in tests])


@router.get("/{test_id}", response_model=TestResponse, status_code=status.HTTP_200_OK)
def get_test(
    test_id: int,
    current_user: CurrentUser,
    use_case: TestCatalogUseCase = Depends(
        inject_use_case(container.test_catalog_use_case)
    ),
) -> TestResponse:
    """
    Get a single test.

    Raises:
        TestNotFoundError: If the test doesn't exist
    """
    return to_test_response(use_case.get_test(test_id))


@router.post("/generate", response_model=TestResponse, status_code=status.HTTP_201_CREATED)
@require_ai_enabled
async def generate_test(
    request: TestGenerateRequest,
    current_user: CurrentUser,
    use_case: GenerateTestUseCase = Depends(
        inject_use_case(container.generate_test_use_case)
    ),
) -> TestResponse:
    """
    Generate a new test with AI and store it.

    Nothing is stored when generation fails.
    """
    try:
        test = await use_case.generate_test(request.type, request.level, request.count)
        return to_test_response(test)
    except (FluentPathError, DomainError, OperationalError):
        raise
    except Exception as e:
        logger.error(
            "failed_to_generate_test",
            test_type=request.type.value,
            level=request.level.value,
            error=str(e),
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/{test_id}/submit", response_model=TestSubmitResponse, status_code=status.HTTP_200_OK
)
async def submit_test(
    test_id: int,
    request: TestSubmitRequest,
    current_user: CurrentUser,
    use_case: SubmitTestUseCase = Depends(
        inject_use_case(container.submit_test_use_case)
    ),
) -> TestSubmitResponse:
    """
    Submit answers to a test.

    Comprehension tests are scored immediately. Essays and letters are
    evaluated by AI; when evaluation fails the attempt keeps its provisional
    score. Resubmitting with the same submission_id returns the stored
    attempt without counting it again.
    """
    try:
        result = await use_case.submit(
            test_id=test_id,
            user_id=current_user.id.value,
            answers=request.answers,
            time_spent=request.time_spent,
            submission_id=request.submission_id,
        )
        return TestSubmitResponse(
            attempt=to_attempt_response(result.attempt),
            points_earned=result.points_earned,
            feedback=to_feedback_response(result.feedback) if result.feedback else None,
            new_achievements=[to_achievement_response(a) for a in result.new_achievements],
            total_points=result.user.total_points if result.user else None,
            current_streak=result.user.current_streak if result.user else None,
            replayed=result.replayed,
        )
    except (FluentPathError, DomainError, OperationalError):
        raise
    except Exception as e:
        logger.error("failed_to_submit_test", test_id=test_id, error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
