"""Repository for AIFeedback domain entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from fluentpath.domain.common.value_objects import Score, TestAttemptId, UserId
from fluentpath.domain.learning.entities.ai_feedback import AIFeedback
from fluentpath.infrastructure.learning.mappers.progress_mapper import AIFeedbackMapper
from fluentpath.models import AIFeedback as AIFeedbackORM
from fluentpath.models import TestAttempt as TestAttemptORM


class AIFeedbackRepository:
    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = AIFeedbackMapper()

    def find_by_attempt(self, attempt_id: TestAttemptId) -> AIFeedback | None:
        stmt = select(AIFeedbackORM).where(AIFeedbackORM.test_attempt_id == attempt_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_attempts(self, attempt_ids: list[TestAttemptId]) -> dict[TestAttemptId, AIFeedback]:
        if not attempt_ids:
            return {}
        stmt = select(AIFeedbackORM).where(
            AIFeedbackORM.test_attempt_id.in_({a.value for a in attempt_ids})
        )
        feedback = [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]
        return {f.test_attempt_id: f for f in feedback}

    def find_grammar_scores(self, user_id: UserId) -> list[Score]:
        """Grammar sub-scores of all feedback on the learner's attempts."""
        stmt = (
            select(AIFeedbackORM.grammar_score)
            .join(TestAttemptORM, TestAttemptORM.id == AIFeedbackORM.test_attempt_id)
            .where(TestAttemptORM.user_id == user_id.value)
        )
        return [Score(score) for score in self.db.execute(stmt).scalars().all()]

    def save(self, feedback: AIFeedback) -> AIFeedback:
        """
        Store feedback for an attempt.

        An attempt holds at most one feedback; saving again replaces it.
        """
        stmt = select(AIFeedbackORM).where(
            AIFeedbackORM.test_attempt_id == feedback.test_attempt_id.value
        )
        existing = self.db.execute(stmt).scalar_one_or_none()
        orm_model = self.mapper.to_orm(feedback, existing)
        if existing is None:
            self.db.add(orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)
