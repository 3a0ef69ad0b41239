"""Pydantic schemas for dashboard, progress, leaderboard and activity."""

import datetime as dt

from pydantic import BaseModel, Field

from fluentpath.infrastructure.identity.schemas import UserDetailsResponse
from fluentpath.infrastructure.learning.schemas.test_schemas import (
    AchievementResponse,
    AttemptResponse,
    FeedbackResponse,
    TestResponse,
)


class SkillsBreakdownSchema(BaseModel):
    reading: float
    essay: float
    letter: float
    grammar: float


class UserStatsSchema(BaseModel):
    completed_lessons: int
    tests_completed: int
    average_score: float
    skills_breakdown: SkillsBreakdownSchema


class LeaderboardEntrySchema(BaseModel):
    rank: int = Field(..., ge=1)
    user_id: int
    display_name: str
    profile_image_url: str | None
    total_points: int
    current_streak: int


class LeaderboardResponse(BaseModel):
    entries: list[LeaderboardEntrySchema]


class RecentAttemptSchema(BaseModel):
    attempt: AttemptResponse
    test: TestResponse | None
    feedback: FeedbackResponse | None


class DashboardResponse(BaseModel):
    user: UserDetailsResponse
    rank: int
    stats: UserStatsSchema
    recent_attempts: list[RecentAttemptSchema]
    leaderboard: list[LeaderboardEntrySchema]
    achievements: list[AchievementResponse]


class DailyActivitySchema(BaseModel):
    date: dt.date
    activities_completed: int
    points_earned: int


class ProgressResponse(BaseModel):
    stats: UserStatsSchema
    streak_history: list[DailyActivitySchema]
    achievements: list[AchievementResponse]


class ActivityRequest(BaseModel):
    activities_completed: int = Field(1, ge=1)
    points_earned: int = Field(0, ge=0)


class ActivityResponse(BaseModel):
    activity: DailyActivitySchema
    total_points: int
    current_streak: int
