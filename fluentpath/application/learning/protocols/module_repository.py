"""Protocol for Module repository."""

from typing import Protocol

from fluentpath.domain.common.value_objects import ModuleId, UserId
from fluentpath.domain.learning.entities.module import Level, Module, ModuleProgress


class ModuleRepositoryProtocol(Protocol):
    def find_all(self) -> list[Module]:
        """All modules ordered by level, then order."""
        ...

    def find_by_level(self, level: Level) -> list[Module]:
        """Modules of one level ordered by order."""
        ...

    def find_by_id(self, module_id: ModuleId) -> Module | None: ...

    def save(self, module: Module) -> Module: ...

    def find_progress(self, user_id: UserId) -> list[ModuleProgress]: ...

    def upsert_progress(self, progress: ModuleProgress) -> ModuleProgress:
        """Insert or replace the progress row of (user, module)."""
        ...

    def count_completed(self, user_id: UserId) -> int: ...
