"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-signing-tokens-0123456789")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SEED_DEMO_CONTENT", "false")

from collections.abc import Generator  # noqa: E402
from datetime import UTC, datetime  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from fluentpath import models  # noqa: E402
from fluentpath.core import container  # noqa: E402
from fluentpath.database import Base, get_db  # noqa: E402
from fluentpath.infrastructure.identity.auth.token_service import (  # noqa: E402
    create_access_token,
)
from fluentpath.main import app  # noqa: E402
from tests.fakes import FakeTextGenerationService  # noqa: E402

# Test database URL (in-memory SQLite shared across threads)
TEST_DATABASE_URL = "sqlite:///:memory:"

test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

DEFAULT_USER_ID = 1


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture(autouse=True)
def fake_ai() -> Generator[FakeTextGenerationService, None, None]:
    """Replace the text-generation service in the container."""
    fake = FakeTextGenerationService()
    container.text_generation_service.override(providers.Object(fake))
    try:
        yield fake
    finally:
        container.text_generation_service.reset_override()


@pytest.fixture
def test_user(db_session: Session) -> models.User:
    """Create the learner the client authenticates as."""
    user = models.User(
        id=DEFAULT_USER_ID,
        email="learner@test.com",
        first_name="Ada",
        last_name="Learner",
        total_points=0,
        current_streak=0,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session and a valid access token."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        test_client.headers["Authorization"] = f"Bearer {create_access_token(DEFAULT_USER_ID)}"
        yield test_client

    app.dependency_overrides.clear()


def _insert_test(
    db_session: Session,
    test_type: str = "comprehension",
    level: str = "beginner",
    content: dict[str, Any] | None = None,
    title: str = "Test Quiz",
    time_limit: int = 15,
) -> models.Test:
    """Insert a test row."""
    test = models.Test(
        title=title,
        type=test_type,
        level=level,
        content=content or {"passage": None, "prompt": None, "questions": []},
        max_score=10,
        time_limit=time_limit,
    )
    db_session.add(test)
    db_session.commit()
    db_session.refresh(test)
    return test


@pytest.fixture
def comprehension_test(db_session: Session) -> models.Test:
    """A four question comprehension test."""
    return _insert_test(
        db_session,
        content={
            "passage": "Maria lives in Lisbon. She works at a bakery and loves the sea.",
            "questions": [
                {
                    "id": 1,
                    "question": "Where does Maria live?",
                    "options": ["Porto", "Lisbon", "Madrid"],
                    "correctAnswer": "Lisbon",
                    "points": 1,
                },
                {
                    "id": 2,
                    "question": "Where does she work?",
                    "options": ["At a bakery", "At a bank"],
                    "correctAnswer": "At a bakery",
                    "points": 1,
                },
                {
                    "id": 3,
                    "question": "What does she love?",
                    "options": ["The mountains", "The sea"],
                    "correctAnswer": "The sea",
                    "points": 1,
                },
                {
                    "id": 4,
                    "question": "Is Maria a student?",
                    "options": ["Yes", "No"],
                    "correctAnswer": "No",
                    "points": 1,
                },
            ],
        },
    )


@pytest.fixture
def essay_test(db_session: Session) -> models.Test:
    return _insert_test(
        db_session,
        test_type="essay",
        level="intermediate",
        title="My Hometown",
        content={"prompt": "Describe your hometown in 150 words.", "questions": []},
        time_limit=30,
    )


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 5, 10, 12, 0, tzinfo=UTC)


@pytest.fixture
def make_test(db_session: Session) -> Any:  # noqa: ANN401
    """Factory inserting tests with custom content."""

    def factory(**kwargs: Any) -> models.Test:  # noqa: ANN401
        return _insert_test(db_session, **kwargs)

    return factory
