from fluentpath.infrastructure.learning.schemas.module_schemas import (
    ModuleProgressResponse,
    ModuleProgressUpdateRequest,
    ModuleResponse,
    ModulesListResponse,
)
from fluentpath.infrastructure.learning.schemas.progress_schemas import (
    ActivityRequest,
    ActivityResponse,
    DailyActivitySchema,
    DashboardResponse,
    LeaderboardEntrySchema,
    LeaderboardResponse,
    ProgressResponse,
    RecentAttemptSchema,
    SkillsBreakdownSchema,
    UserStatsSchema,
)
from fluentpath.infrastructure.learning.schemas.test_schemas import (
    AchievementResponse,
    AttemptResponse,
    AttemptsListResponse,
    FeedbackResponse,
    QuestionSchema,
    TestContentSchema,
    TestGenerateRequest,
    TestResponse,
    TestsListResponse,
    TestSubmitRequest,
    TestSubmitResponse,
)

__all__ = [
    "AchievementResponse",
    "ActivityRequest",
    "ActivityResponse",
    "AttemptResponse",
    "AttemptsListResponse",
    "DailyActivitySchema",
    "DashboardResponse",
    "FeedbackResponse",
    "LeaderboardEntrySchema",
    "LeaderboardResponse",
    "ModuleProgressResponse",
    "ModuleProgressUpdateRequest",
    "ModuleResponse",
    "ModulesListResponse",
    "ProgressResponse",
    "QuestionSchema",
    "RecentAttemptSchema",
    "SkillsBreakdownSchema",
    "TestContentSchema",
    "TestGenerateRequest",
    "TestResponse",
    "TestSubmitRequest",
    "TestSubmitResponse",
    "TestsListResponse",
    "UserStatsSchema",
]
