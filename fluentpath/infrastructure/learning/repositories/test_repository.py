"""Repository for Test domain entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from fluentpath.domain.common.value_objects import TestId
from fluentpath.domain.learning.entities.module import Level
from fluentpath.domain.learning.entities.test import Test, TestType
from fluentpath.infrastructure.learning.mappers.test_mapper import TestMapper
from fluentpath.models import Test as TestORM


class TestRepository:
    """Repository for Test domain entities."""

    __test__ = False

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = TestMapper()

    def find_all(self) -> list[Test]:
        stmt = select(TestORM).order_by(TestORM.id)
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def find_by_type(self, test_type: TestType) -> list[Test]:
        stmt = select(TestORM).where(TestORM.type == test_type.value).order_by(TestORM.id)
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def find_by_level(self, level: Level) -> list[Test]:
        stmt = select(TestORM).where(TestORM.level == level.value).order_by(TestORM.id)
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def find_by_id(self, test_id: TestId) -> Test | None:
        orm_model = self.db.get(TestORM, test_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_ids(self, test_ids: list[TestId]) -> dict[TestId, Test]:
        """
        Load several tests at once.

        Returns:
            Tests keyed by ID; unknown IDs are absent
        """
        if not test_ids:
            return {}
        stmt = select(TestORM).where(TestORM.id.in_({t.value for t in test_ids}))
        tests = [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]
        return {test.id: test for test in tests}

    def save(self, test: Test) -> Test:
        """Insert a new test. Tests are never edited once stored."""
        orm_model = self.mapper.to_orm(test)
        self.db.add(orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)
