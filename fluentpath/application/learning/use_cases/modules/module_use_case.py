"""Use case for learning modules and module progress."""

from dataclasses import dataclass
from datetime import UTC, datetime

import structlog

from fluentpath.application.learning.protocols.module_repository import ModuleRepositoryProtocol
from fluentpath.domain.common.value_objects import ModuleId, Score, UserId
from fluentpath.domain.learning.entities.module import Level, Module, ModuleProgress
from fluentpath.exceptions import LearningModuleNotFoundError

logger = structlog.get_logger(__name__)


@dataclass
class ModuleWithProgress:
    """DTO for a module merged with the learner's progress."""

    module: Module
    completed: bool
    score: Score | None


class ModuleUseCase:
    def __init__(self, module_repository: ModuleRepositoryProtocol) -> None:
        self.module_repository = module_repository

    def list_modules(self, user_id: int, level: Level | None = None) -> list[ModuleWithProgress]:
        """Modules in learning order, each with the learner's completion flag and score."""
        modules = (
            self.module_repository.find_all()
            if level is None
            else self.module_repository.find_by_level(level)
        )
        progress = {p.module_id: p for p in self.module_repository.find_progress(UserId(user_id))}

        result = []
        for module in modules:
            module_progress = progress.get(module.id)
            result.append(
                ModuleWithProgress(
                    module=module,
                    completed=module_progress.completed if module_progress else False,
                    score=module_progress.score if module_progress else None,
                )
            )
        return result

    def update_progress(
        self,
        user_id: int,
        module_id: int,
        completed: bool,
        score: float | None = None,
        now: datetime | None = None,
    ) -> ModuleProgress:
        """
        Replace the learner's progress on a module.

        Raises:
            LearningModuleNotFoundError: If the module doesn't exist
            ValidationError: If the score is outside 0-10
        """
        module_id_vo = ModuleId(module_id)
        if not self.module_repository.find_by_id(module_id_vo):
            raise LearningModuleNotFoundError(module_id)

        progress = ModuleProgress.record(
            user_id=UserId(user_id),
            module_id=module_id_vo,
            completed=completed,
            score=Score(score) if score is not None else None,
            now=now or datetime.now(UTC),
        )
        progress = self.module_repository.upsert_progress(progress)

        logger.info(
            "module_progress_updated",
            user_id=user_id,
            module_id=module_id,
            completed=completed,
        )
        return progress
