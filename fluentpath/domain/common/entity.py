"""
Base class for Entities.

Entities have a distinct identity that runs through time and different
states. Two entities are equal if they have the same identity, regardless
of their attributes.

Example:
    @dataclass
    class TestAttempt(Entity[TestAttemptId]):
        id: TestAttemptId
        score: Score

        def finalize(self, score: Score) -> None:
            self.score = score
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Wraps a database integer so ids of different entities cannot be mixed:

        UserId(42) != TestId(42)
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"{self.__class__.__name__} must be non-negative")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Set placeholder id. The database assigns the real one."""
        return cls(0)

    def is_new(self) -> bool:
        return self.value == 0

    def to_primitive(self) -> int:
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Defined by identity (not attributes)
    - Mutable (state can change over time)
    - Have lifecycle (created, modified, deleted)

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
