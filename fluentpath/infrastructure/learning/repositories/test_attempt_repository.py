"""Repository for TestAttempt domain entities."""

import structlog
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from fluentpath.domain.common.value_objects import Score, TestAttemptId, UserId
from fluentpath.domain.learning.entities.test import TestType
from fluentpath.domain.learning.entities.test_attempt import TestAttempt
from fluentpath.domain.learning.services.stats_service import ScoredAttempt
from fluentpath.exceptions import DuplicateSubmissionError
from fluentpath.infrastructure.learning.mappers.test_mapper import TestAttemptMapper
from fluentpath.models import Test as TestORM
from fluentpath.models import TestAttempt as TestAttemptORM

logger = structlog.get_logger(__name__)


class TestAttemptRepository:
    """Repository for TestAttempt domain entities."""

    __test__ = False

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = TestAttemptMapper()

    def find_by_id(self, attempt_id: TestAttemptId, user_id: UserId) -> TestAttempt | None:
        """
        Find an attempt by ID with user ownership check.

        Returns:
            TestAttempt entity if found and owned by user, None otherwise
        """
        stmt = select(TestAttemptORM).where(
            TestAttemptORM.id == attempt_id.value,
            TestAttemptORM.user_id == user_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_submission_id(self, user_id: UserId, submission_id: str) -> TestAttempt | None:
        stmt = select(TestAttemptORM).where(
            TestAttemptORM.user_id == user_id.value,
            TestAttemptORM.submission_id == submission_id,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_user(self, user_id: UserId, limit: int | None = None) -> list[TestAttempt]:
        """
        Get the learner's attempts.

        Returns:
            Attempts ordered by completion time DESC
        """
        stmt = (
            select(TestAttemptORM)
            .where(TestAttemptORM.user_id == user_id.value)
            .order_by(TestAttemptORM.completed_at.desc(), TestAttemptORM.id.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def find_scored_by_user(self, user_id: UserId) -> list[ScoredAttempt]:
        """Scores of all the learner's attempts together with their test type."""
        stmt = (
            select(TestAttemptORM.score, TestORM.type)
            .join(TestORM, TestORM.id == TestAttemptORM.test_id)
            .where(TestAttemptORM.user_id == user_id.value)
        )
        return [
            ScoredAttempt(score=Score(score), test_type=TestType(test_type))
            for score, test_type in self.db.execute(stmt).all()
        ]

    def count_by_user(self, user_id: UserId) -> int:
        stmt = select(func.count(TestAttemptORM.id)).where(
            TestAttemptORM.user_id == user_id.value
        )
        return self.db.execute(stmt).scalar() or 0

    def save(self, attempt: TestAttempt) -> TestAttempt:
        """
        Save an attempt entity (create or update).

        Raises:
            DuplicateSubmissionError: If the learner already stored this submission id
        """
        if attempt.id.is_new():
            orm_model = self.mapper.to_orm(attempt)
            self.db.add(orm_model)
            try:
                self.db.commit()
            except IntegrityError as e:
                self.db.rollback()
                if attempt.submission_id is None:
                    raise
                logger.info(
                    "duplicate_submission_detected",
                    user_id=attempt.user_id.value,
                    submission_id=attempt.submission_id,
                )
                raise DuplicateSubmissionError(attempt.submission_id) from e
            self.db.refresh(orm_model)
            return self.mapper.to_domain(orm_model)

        orm_model = self.db.get(TestAttemptORM, attempt.id.value)
        if not orm_model:
            raise ValueError(f"Test attempt {attempt.id.value} not found")
        self.mapper.to_orm(attempt, orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)
