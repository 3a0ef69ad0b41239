from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from fluentpath.application.identity.use_cases.current_user_use_case import CurrentUserUseCase
from fluentpath.application.learning.use_cases.assessments.attempt_query_use_case import (
    AttemptQueryUseCase,
)
from fluentpath.application.learning.use_cases.assessments.generate_test_use_case import (
    GenerateTestUseCase,
)
from fluentpath.application.learning.use_cases.assessments.submit_test_use_case import (
    SubmitTestUseCase,
)
from fluentpath.application.learning.use_cases.assessments.test_catalog_use_case import (
    TestCatalogUseCase,
)
from fluentpath.application.learning.use_cases.modules.module_use_case import ModuleUseCase
from fluentpath.application.learning.use_cases.progress.dashboard_use_case import (
    DashboardUseCase,
)
from fluentpath.application.learning.use_cases.progress.leaderboard_use_case import (
    LeaderboardUseCase,
)
from fluentpath.application.learning.use_cases.progress.progress_use_case import (
    ProgressUseCase,
)
from fluentpath.application.learning.use_cases.progress.record_activity_use_case import (
    RecordActivityUseCase,
)
from fluentpath.application.learning.use_cases.progress.user_stats_use_case import (
    UserStatsUseCase,
)
from fluentpath.config import get_settings
from fluentpath.domain.learning.services.achievement_service import AchievementService
from fluentpath.domain.learning.services.scoring_service import ScoringService
from fluentpath.domain.learning.services.stats_service import StatsService
from fluentpath.domain.learning.services.streak_service import StreakService
from fluentpath.infrastructure.ai.ai_service import AIService
from fluentpath.infrastructure.identity.repositories.user_repository import UserRepository
from fluentpath.infrastructure.learning.repositories.achievement_repository import (
    AchievementRepository,
)
from fluentpath.infrastructure.learning.repositories.ai_feedback_repository import (
    AIFeedbackRepository,
)
from fluentpath.infrastructure.learning.repositories.daily_activity_repository import (
    DailyActivityRepository,
)
from fluentpath.infrastructure.learning.repositories.module_repository import ModuleRepository
from fluentpath.infrastructure.learning.repositories.test_attempt_repository import (
    TestAttemptRepository,
)
from fluentpath.infrastructure.learning.repositories.test_repository import TestRepository


def _streak_history_days() -> int:
    return get_settings().STREAK_HISTORY_DAYS


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    user_repository = providers.Factory(UserRepository, db=db)
    module_repository = providers.Factory(ModuleRepository, db=db)
    test_repository = providers.Factory(TestRepository, db=db)
    test_attempt_repository = providers.Factory(TestAttemptRepository, db=db)
    ai_feedback_repository = providers.Factory(AIFeedbackRepository, db=db)
    daily_activity_repository = providers.Factory(DailyActivityRepository, db=db)
    achievement_repository = providers.Factory(AchievementRepository, db=db)

    # External services
    text_generation_service = providers.Singleton(AIService)

    # Domain services (pure domain logic, no db)
    scoring_service = providers.Factory(ScoringService)
    streak_service = providers.Factory(StreakService)
    stats_service = providers.Factory(StatsService)
    achievement_service = providers.Factory(AchievementService)

    # Identity use cases
    current_user_use_case = providers.Factory(
        CurrentUserUseCase,
        user_repository=user_repository,
    )

    # Progress use cases
    record_activity_use_case = providers.Factory(
        RecordActivityUseCase,
        user_repository=user_repository,
        daily_activity_repository=daily_activity_repository,
        streak_service=streak_service,
    )
    user_stats_use_case = providers.Factory(
        UserStatsUseCase,
        module_repository=module_repository,
        attempt_repository=test_attempt_repository,
        feedback_repository=ai_feedback_repository,
        stats_service=stats_service,
    )
    leaderboard_use_case = providers.Factory(
        LeaderboardUseCase,
        user_repository=user_repository,
    )
    progress_use_case = providers.Factory(
        ProgressUseCase,
        stats_use_case=user_stats_use_case,
        daily_activity_repository=daily_activity_repository,
        achievement_repository=achievement_repository,
        history_days=providers.Callable(_streak_history_days),
    )
    dashboard_use_case = providers.Factory(
        DashboardUseCase,
        user_repository=user_repository,
        test_repository=test_repository,
        attempt_repository=test_attempt_repository,
        feedback_repository=ai_feedback_repository,
        achievement_repository=achievement_repository,
        stats_use_case=user_stats_use_case,
        leaderboard_use_case=leaderboard_use_case,
    )

    # Module use cases
    module_use_case = providers.Factory(
        ModuleUseCase,
        module_repository=module_repository,
    )

    # Assessment use cases
    test_catalog_use_case = providers.Factory(
        TestCatalogUseCase,
        test_repository=test_repository,
    )
    generate_test_use_case = providers.Factory(
        GenerateTestUseCase,
        test_repository=test_repository,
        text_generation_service=text_generation_service,
    )
    submit_test_use_case = providers.Factory(
        SubmitTestUseCase,
        test_repository=test_repository,
        attempt_repository=test_attempt_repository,
        feedback_repository=ai_feedback_repository,
        achievement_repository=achievement_repository,
        text_generation_service=text_generation_service,
        record_activity_use_case=record_activity_use_case,
        scoring_service=scoring_service,
        achievement_service=achievement_service,
    )
    attempt_query_use_case = providers.Factory(
        AttemptQueryUseCase,
        attempt_repository=test_attempt_repository,
        feedback_repository=ai_feedback_repository,
    )


# Initialize container
container = Container()
