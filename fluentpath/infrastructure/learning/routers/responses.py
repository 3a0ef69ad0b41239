"""Conversion of domain entities into API response schemas."""

from fluentpath.application.learning.use_cases.progress.leaderboard_use_case import (
    LeaderboardEntry,
)
from fluentpath.domain.learning.entities.achievement import Achievement
from fluentpath.domain.learning.entities.ai_feedback import AIFeedback
from fluentpath.domain.learning.entities.daily_activity import DailyActivity
from fluentpath.domain.learning.entities.test import Test
from fluentpath.domain.learning.entities.test_attempt import TestAttempt
from fluentpath.domain.learning.services.stats_service import UserStats
from fluentpath.infrastructure.learning.schemas import (
    AchievementResponse,
    AttemptResponse,
    DailyActivitySchema,
    FeedbackResponse,
    LeaderboardEntrySchema,
    QuestionSchema,
    SkillsBreakdownSchema,
    TestContentSchema,
    TestResponse,
    UserStatsSchema,
)


def to_test_response(test: Test) -> TestResponse:
    return TestResponse(
        id=test.id.value,
        title=test.title,
        type=test.type.value,
        level=test.level.value,
        content=TestContentSchema(
            passage=test.content.passage,
            prompt=test.content.prompt,
            questions=[
                QuestionSchema(
                    id=q.id,
                    question=q.question,
                    options=list(q.options),
                    correctAnswer=q.correct_answer,
                    points=q.points,
                )
                for q in test.questions
            ],
        ),
        max_score=test.max_score,
        time_limit=test.time_limit,
        created_at=test.created_at,
    )


def to_attempt_response(attempt: TestAttempt) -> AttemptResponse:
    return AttemptResponse(
        id=attempt.id.value,
        test_id=attempt.test_id.value,
        answers=attempt.answers,
        score=float(attempt.score),
        status=attempt.status.value,
        points_earned=attempt.points_earned,
        time_spent=attempt.time_spent,
        completed_at=attempt.completed_at,
    )


def to_feedback_response(feedback: AIFeedback) -> FeedbackResponse:
    return FeedbackResponse(
        id=feedback.id.value,
        test_attempt_id=feedback.test_attempt_id.value,
        overall_score=float(feedback.overall_score),
        grammar_score=float(feedback.grammar_score),
        vocabulary_score=float(feedback.vocabulary_score),
        structure_score=float(feedback.structure_score),
        strengths=feedback.strengths,
        improvements=feedback.improvements,
        suggestions=feedback.suggestions,
        created_at=feedback.created_at,
    )


def to_achievement_response(achievement: Achievement) -> AchievementResponse:
    return AchievementResponse(
        id=achievement.id.value,
        type=achievement.type.value,
        title=achievement.title,
        description=achievement.description,
        earned_at=achievement.earned_at,
    )


def to_stats_schema(stats: UserStats) -> UserStatsSchema:
    skills = stats.skills_breakdown
    return UserStatsSchema(
        completed_lessons=stats.completed_lessons,
        tests_completed=stats.tests_completed,
        average_score=stats.average_score,
        skills_breakdown=SkillsBreakdownSchema(
            reading=skills.reading,
            essay=skills.essay,
            letter=skills.letter,
            grammar=skills.grammar,
        ),
    )


def to_leaderboard_entry(entry: LeaderboardEntry) -> LeaderboardEntrySchema:
    return LeaderboardEntrySchema(
        rank=entry.rank,
        user_id=entry.user.id.value,
        display_name=entry.user.display_name,
        profile_image_url=entry.user.profile_image_url,
        total_points=entry.user.total_points,
        current_streak=entry.user.current_streak,
    )


def to_daily_activity_schema(activity: DailyActivity) -> DailyActivitySchema:
    return DailyActivitySchema(
        date=activity.date,
        activities_completed=activity.activities_completed,
        points_earned=activity.points_earned,
    )
