"""API routes for learning modules."""

from fastapi import APIRouter, Depends, status

from fluentpath.application.learning.use_cases.modules.module_use_case import (
    ModuleUseCase,
    ModuleWithProgress,
)
from fluentpath.core import container
from fluentpath.domain.learning.entities.module import Level
from fluentpath.infrastructure.common.di import inject_use_case
from fluentpath.infrastructure.identity.dependencies import CurrentUser
from fluentpath.infrastructure.learning.schemas import (
    ModuleProgressResponse,
    ModuleProgressUpdateRequest,
    ModuleResponse,
    ModulesListResponse,
)

router = APIRouter(prefix="/modules", tags=["modules"])


def _to_module_response(item: ModuleWithProgress) -> ModuleResponse:
    return ModuleResponse(
        id=item.module.id.value,
        title=item.module.title,
        description=item.module.description,
        level=item.module.level.value,
        content=item.module.content,
        order=item.module.order,
        completed=item.completed,
        score=float(item.score) if item.score is not None else None,
    )


@router.get("", response_model=ModulesListResponse, status_code=status.HTTP_200_OK)
def list_modules(
    current_user: CurrentUser,
    use_case: ModuleUseCase = Depends(
        inject_use_case(container.module_use_case)
    ),
) -> ModulesListResponse:
    """List all modules by level and order, with the learner's progress."""
    modules = use_case.list_modules(current_user.id.value)
    return ModulesListResponse(modules=[_to_module_response(m) for m in modules])


@router.get("/{level}", response_model=ModulesListResponse, status_code=status.HTTP_200_OK)
def list_modules_by_level(
    level: Level,
    current_user: CurrentUser,
    use_case: ModuleUseCase = Depends(
        inject_use_case(container.module_use_case)
    ),
) -> ModulesListResponse:
    """List the modules of one level in order, with the learner's progress."""
    modules = use_case.list_modules(current_user.id.value, level)
    return ModulesListResponse(modules=[_to_module_response(m) for m in modules])


@router.put(
    "/{module_id}/progress",
    response_model=ModuleProgressResponse,
    status_code=status.HTTP_200_OK,
)
def update_module_progress(
    module_id: int,
    request: ModuleProgressUpdateRequest,
    current_user: CurrentUser,
    use_case: ModuleUseCase = Depends(
        inject_use_case(container.module_use_case)
    ),
) -> ModuleProgressResponse:
    """
    Replace the learner's progress on a module.

    Raises:
        LearningModuleNotFoundError: If the module doesn't exist
    """
    progress = use_case.update_progress(
        user_id=current_user.id.value,
        module_id=module_id,
        completed=request.completed,
        score=request.score,
    )
    return ModuleProgressResponse(
        module_id=progress.module_id.value,
        completed=progress.completed,
        score=float(progress.score) if progress.score is not None else None,
        completed_at=progress.completed_at,
    )
