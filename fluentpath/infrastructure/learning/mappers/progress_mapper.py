"""Mappers for feedback, daily activity and achievements."""

from fluentpath.domain.common.value_objects import (
    AchievementId,
    AIFeedbackId,
    DailyActivityId,
    Score,
    TestAttemptId,
    UserId,
)
from fluentpath.domain.learning.entities.achievement import Achievement, AchievementType
from fluentpath.domain.learning.entities.ai_feedback import AIFeedback
from fluentpath.domain.learning.entities.daily_activity import DailyActivity
from fluentpath.models import Achievement as AchievementORM
from fluentpath.models import AIFeedback as AIFeedbackORM
from fluentpath.models import DailyActivity as DailyActivityORM


class AIFeedbackMapper:
    def to_domain(self, orm_model: AIFeedbackORM) -> AIFeedback:
        return AIFeedback(
            id=AIFeedbackId(orm_model.id),
            test_attempt_id=TestAttemptId(orm_model.test_attempt_id),
            overall_score=Score(orm_model.overall_score),
            grammar_score=Score(orm_model.grammar_score),
            vocabulary_score=Score(orm_model.vocabulary_score),
            structure_score=Score(orm_model.structure_score),
            strengths=orm_model.strengths,
            improvements=orm_model.improvements,
            suggestions=orm_model.suggestions,
            created_at=orm_model.created_at,
        )

    def to_orm(
        self, domain_entity: AIFeedback, orm_model: AIFeedbackORM | None = None
    ) -> AIFeedbackORM:
        orm_model = orm_model or AIFeedbackORM(test_attempt_id=domain_entity.test_attempt_id.value)
        orm_model.overall_score = domain_entity.overall_score.value
        orm_model.grammar_score = domain_entity.grammar_score.value
        orm_model.vocabulary_score = domain_entity.vocabulary_score.value
        orm_model.structure_score = domain_entity.structure_score.value
        orm_model.strengths = domain_entity.strengths
        orm_model.improvements = domain_entity.improvements
        orm_model.suggestions = domain_entity.suggestions
        return orm_model


class DailyActivityMapper:
    def to_domain(self, orm_model: DailyActivityORM) -> DailyActivity:
        return DailyActivity(
            id=DailyActivityId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            date=orm_model.date,
            activities_completed=orm_model.activities_completed,
            points_earned=orm_model.points_earned,
        )


class AchievementMapper:
    def to_domain(self, orm_model: AchievementORM) -> Achievement:
        return Achievement(
            id=AchievementId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            type=AchievementType(orm_model.type),
            title=orm_model.title,
            description=orm_model.description,
            earned_at=orm_model.earned_at,
        )

    def to_orm(self, domain_entity: Achievement) -> AchievementORM:
        return AchievementORM(
            user_id=domain_entity.user_id.value,
            type=domain_entity.type.value,
            title=domain_entity.title,
            description=domain_entity.description,
            earned_at=domain_entity.earned_at,
        )
