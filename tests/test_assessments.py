"""Tests for test browsing, generation and submission endpoints."""

from datetime import UTC, datetime
from typing import Any
from unittest.mock import patch

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from fluentpath import models
from fluentpath.config import Settings
from tests.fakes import FakeTextGenerationService


def _ai_settings() -> Settings:
    return Settings(AI_PROVIDER="openai", AI_MODEL_NAME="gpt-test", OPENAI_API_KEY="sk-test")


class TestListTests:
    """Test suite for GET /tests endpoints."""

    def test_list_all_tests(
        self,
        client: TestClient,
        comprehension_test: models.Test,
        essay_test: models.Test,
    ) -> None:
        """Every stored test is listed with its content."""
        response = client.get("/api/v1/tests")

        assert response.status_code == status.HTTP_200_OK
        tests = response.json()["tests"]
        assert [t["id"] for t in tests] == [comprehension_test.id, essay_test.id]
        assert len(tests[0]["content"]["questions"]) == 4
        assert tests[0]["content"]["questions"][0]["correctAnswer"] == "Lisbon"
        assert tests[1]["content"]["prompt"] == "Describe your hometown in 150 words."

    def test_list_tests_by_type(
        self,
        client: TestClient,
        comprehension_test: models.Test,
        essay_test: models.Test,
    ) -> None:
        response = client.get("/api/v1/tests/type/essay")

        assert response.status_code == status.HTTP_200_OK
        tests = response.json()["tests"]
        assert len(tests) == 1
        assert tests[0]["id"] == essay_test.id
        assert tests[0]["type"] == "essay"

    def test_list_tests_by_level(
        self,
        client: TestClient,
        comprehension_test: models.Test,
        essay_test: models.Test,
    ) -> None:
        response = client.get("/api/v1/tests", params={"level": "intermediate"})

        assert response.status_code == status.HTTP_200_OK
        assert [t["id"] for t in response.json()["tests"]] == [essay_test.id]

        response = client.get("/api/v1/tests/type/comprehension", params={"level": "advanced"})
        assert response.json()["tests"] == []

    def test_list_tests_unknown_type(self, client: TestClient) -> None:
        response = client.get("/api/v1/tests/type/poetry")

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_get_test(self, client: TestClient, comprehension_test: models.Test) -> None:
        response = client.get(f"/api/v1/tests/{comprehension_test.id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["title"] == "Test Quiz"
        assert data["time_limit"] == 15
        assert data["max_score"] == 10

    def test_get_test_not_found(self, client: TestClient) -> None:
        response = client.get("/api/v1/tests/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Test with id 99999 not found"

    def test_requires_authentication(self, client: TestClient) -> None:
        response = client.get("/api/v1/tests", headers={"Authorization": "Bearer not-a-token"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestSubmitComprehension:
    """Test suite for POST /tests/:id/submit with comprehension tests."""

    def test_three_of_four_correct(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        comprehension_test: models.Test,
    ) -> None:
        """Three correct answers out of four score 7.5 and earn 75 points."""
        response = client.post(
            f"/api/v1/tests/{comprehension_test.id}/submit",
            json={"answers": ["Lisbon", "At a bakery", "The sea", "Yes"], "time_spent": 6},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["attempt"]["score"] == 7.5
        assert data["attempt"]["status"] == "finalized"
        assert data["points_earned"] == 75
        assert data["total_points"] == 75
        assert data["current_streak"] == 1
        assert data["feedback"] is None
        assert data["replayed"] is False

        db_session.expire_all()
        user = db_session.get(models.User, test_user.id)
        assert user is not None
        assert user.total_points == 75
        assert user.current_streak == 1
        assert user.last_activity_date is not None

        activity = db_session.query(models.DailyActivity).filter_by(user_id=test_user.id).all()
        assert len(activity) == 1
        assert activity[0].activities_completed == 1
        assert activity[0].points_earned == 75

        attempts = db_session.query(models.TestAttempt).all()
        assert len(attempts) == 1
        assert attempts[0].time_spent == 6

    def test_answers_keyed_by_index(
        self, client: TestClient, test_user: models.User, comprehension_test: models.Test
    ) -> None:
        """Answers may be an object keyed by question index."""
        response = client.post(
            f"/api/v1/tests/{comprehension_test.id}/submit",
            json={"answers": {"0": "Lisbon", "3": "No"}},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["attempt"]["score"] == 5.0
        assert response.json()["points_earned"] == 50

    def test_perfect_score_awards_achievements(
        self, client: TestClient, test_user: models.User, comprehension_test: models.Test
    ) -> None:
        response = client.post(
            f"/api/v1/tests/{comprehension_test.id}/submit",
            json={"answers": ["Lisbon", "At a bakery", "The sea", "No"]},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["attempt"]["score"] == 10.0
        titles = {a["title"] for a in data["new_achievements"]}
        assert titles == {"First Test Completed", "Perfect Score"}

    def test_achievements_not_duplicated(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        comprehension_test: models.Test,
    ) -> None:
        answers = {"answers": ["Lisbon", "At a bakery", "The sea", "No"]}
        client.post(f"/api/v1/tests/{comprehension_test.id}/submit", json=answers)
        response = client.post(f"/api/v1/tests/{comprehension_test.id}/submit", json=answers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["new_achievements"] == []
        assert db_session.query(models.Achievement).count() == 2

    def test_test_without_questions_scores_zero(
        self, client: TestClient, test_user: models.User, make_test: Any
    ) -> None:
        empty = make_test(content={"passage": "Nothing to ask.", "questions": []})

        response = client.post(f"/api/v1/tests/{empty.id}/submit", json={"answers": []})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["attempt"]["score"] == 0.0
        assert response.json()["points_earned"] == 0

    def test_free_text_rejected(
        self, client: TestClient, test_user: models.User, comprehension_test: models.Test
    ) -> None:
        response = client.post(
            f"/api/v1/tests/{comprehension_test.id}/submit", json={"answers": "Lisbon"}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_submit_unknown_test(self, client: TestClient, test_user: models.User) -> None:
        response = client.post("/api/v1/tests/99999/submit", json={"answers": []})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_negative_time_spent_rejected(
        self, client: TestClient, test_user: models.User, comprehension_test: models.Test
    ) -> None:
        response = client.post(
            f"/api/v1/tests/{comprehension_test.id}/submit",
            json={"answers": [], "time_spent": -3},
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


class TestSubmitWriting:
    """Test suite for POST /tests/:id/submit with essays and letters."""

    def test_feedback_finalizes_attempt(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        essay_test: models.Test,
        fake_ai: FakeTextGenerationService,
    ) -> None:
        """The AI overall score replaces the provisional score on the same attempt."""
        response = client.post(
            f"/api/v1/tests/{essay_test.id}/submit",
            json={"answers": "My hometown is small and quiet."},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["attempt"]["score"] == 8.5
        assert data["attempt"]["status"] == "finalized"
        assert data["points_earned"] == 85
        assert data["feedback"]["grammar_score"] == 8.0
        assert data["feedback"]["strengths"] == "Clear structure."

        assert fake_ai.feedback_calls == [
            (
                "essay",
                "My hometown is small and quiet.",
                "Describe your hometown in 150 words.",
            )
        ]

        assert db_session.query(models.TestAttempt).count() == 1
        feedback = db_session.query(models.AIFeedback).all()
        assert len(feedback) == 1
        assert feedback[0].test_attempt_id == data["attempt"]["id"]

        db_session.expire_all()
        user = db_session.get(models.User, test_user.id)
        assert user is not None
        assert user.total_points == 85

    def test_feedback_failure_keeps_provisional_score(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        essay_test: models.Test,
        fake_ai: FakeTextGenerationService,
    ) -> None:
        """A failed evaluation leaves the provisional 7.5 as the final score."""
        fake_ai.fail = True

        response = client.post(
            f"/api/v1/tests/{essay_test.id}/submit",
            json={"answers": "My hometown is small and quiet."},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["attempt"]["score"] == 7.5
        assert data["attempt"]["status"] == "provisional"
        assert data["points_earned"] == 75
        assert data["feedback"] is None
        assert db_session.query(models.AIFeedback).count() == 0
        assert db_session.query(models.TestAttempt).count() == 1

    def test_empty_essay_rejected(
        self, client: TestClient, test_user: models.User, essay_test: models.Test
    ) -> None:
        response = client.post(f"/api/v1/tests/{essay_test.id}/submit", json={"answers": "   "})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestIdempotentSubmission:
    """Test suite for resubmission with a submission id."""

    def test_resubmit_returns_stored_attempt(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        comprehension_test: models.Test,
    ) -> None:
        """A retried submission is not counted twice."""
        payload = {
            "answers": ["Lisbon", "At a bakery", "The sea", "Yes"],
            "submission_id": "c0ffee-1",
        }
        first = client.post(f"/api/v1/tests/{comprehension_test.id}/submit", json=payload)
        second = client.post(f"/api/v1/tests/{comprehension_test.id}/submit", json=payload)

        assert first.status_code == status.HTTP_200_OK
        assert second.status_code == status.HTTP_200_OK
        assert second.json()["replayed"] is True
        assert second.json()["attempt"]["id"] == first.json()["attempt"]["id"]
        assert second.json()["points_earned"] == 75

        assert db_session.query(models.TestAttempt).count() == 1
        db_session.expire_all()
        user = db_session.get(models.User, test_user.id)
        assert user is not None
        assert user.total_points == 75
        activity = db_session.query(models.DailyActivity).one()
        assert activity.activities_completed == 1

    def test_submission_id_reused_for_other_test(
        self,
        client: TestClient,
        test_user: models.User,
        comprehension_test: models.Test,
        essay_test: models.Test,
    ) -> None:
        client.post(
            f"/api/v1/tests/{comprehension_test.id}/submit",
            json={"answers": ["Lisbon"], "submission_id": "shared"},
        )
        response = client.post(
            f"/api/v1/tests/{essay_test.id}/submit",
            json={"answers": "Some text", "submission_id": "shared"},
        )

        assert response.status_code == status.HTTP_409_CONFLICT


class TestGenerateTest:
    """Test suite for POST /tests/generate."""

    def test_generate_disabled(self, client: TestClient) -> None:
        """Generation answers 410 when no AI provider is configured."""
        response = client.post(
            "/api/v1/tests/generate", json={"type": "comprehension", "level": "beginner"}
        )

        assert response.status_code == status.HTTP_410_GONE

    def test_generate_stores_test(
        self,
        client: TestClient,
        db_session: Session,
        fake_ai: FakeTextGenerationService,
    ) -> None:
        with patch(
            "fluentpath.infrastructure.common.dependencies.get_settings",
            return_value=_ai_settings(),
        ):
            response = client.post(
                "/api/v1/tests/generate",
                json={"type": "comprehension", "level": "beginner", "count": 5},
            )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["title"] == "Comprehension Test - beginner"
        assert data["time_limit"] == 15
        assert data["max_score"] == 10
        assert data["content"]["questions"][0]["correctAnswer"] == "On the mat"
        assert fake_ai.content_calls == [("comprehension", "beginner", 5)]
        assert db_session.query(models.Test).count() == 1

    def test_generate_failure_stores_nothing(
        self,
        client: TestClient,
        db_session: Session,
        fake_ai: FakeTextGenerationService,
    ) -> None:
        fake_ai.fail = True

        with patch(
            "fluentpath.infrastructure.common.dependencies.get_settings",
            return_value=_ai_settings(),
        ):
            response = client.post(
                "/api/v1/tests/generate", json={"type": "letter", "level": "advanced"}
            )

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
        assert db_session.query(models.Test).count() == 0

    def test_generate_count_out_of_range(self, client: TestClient) -> None:
        with patch(
            "fluentpath.infrastructure.common.dependencies.get_settings",
            return_value=_ai_settings(),
        ):
            response = client.post(
                "/api/v1/tests/generate",
                json={"type": "essay", "level": "beginner", "count": 50},
            )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


class TestAttempts:
    """Test suite for /test-attempts endpoints."""

    def test_list_attempts_newest_first(
        self,
        client: TestClient,
        test_user: models.User,
        comprehension_test: models.Test,
        essay_test: models.Test,
    ) -> None:
        client.post(f"/api/v1/tests/{comprehension_test.id}/submit", json={"answers": ["Lisbon"]})
        client.post(f"/api/v1/tests/{essay_test.id}/submit", json={"answers": "An essay."})

        response = client.get("/api/v1/test-attempts")

        assert response.status_code == status.HTTP_200_OK
        attempts = response.json()["attempts"]
        assert [a["test_id"] for a in attempts] == [essay_test.id, comprehension_test.id]

    def test_get_feedback(
        self, client: TestClient, test_user: models.User, essay_test: models.Test
    ) -> None:
        submitted = client.post(
            f"/api/v1/tests/{essay_test.id}/submit", json={"answers": "An essay."}
        ).json()

        response = client.get(f"/api/v1/test-attempts/{submitted['attempt']['id']}/feedback")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["overall_score"] == 8.5

    def test_get_feedback_without_feedback(
        self, client: TestClient, test_user: models.User, comprehension_test: models.Test
    ) -> None:
        submitted = client.post(
            f"/api/v1/tests/{comprehension_test.id}/submit", json={"answers": ["Lisbon"]}
        ).json()

        response = client.get(f"/api/v1/test-attempts/{submitted['attempt']['id']}/feedback")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() is None

    def test_get_feedback_of_other_learner(
        self,
        client: TestClient,
        db_session: Session,
        essay_test: models.Test,
    ) -> None:
        """Attempts of other learners are not visible."""
        other = models.User(id=2, email="other@test.com")
        db_session.add(other)
        db_session.commit()
        attempt = models.TestAttempt(
            user_id=2,
            test_id=essay_test.id,
            answers="Not yours.",
            score=7.5,
            status="provisional",
            points_earned=75,
            completed_at=datetime.now(UTC),
        )
        db_session.add(attempt)
        db_session.commit()

        response = client.get(f"/api/v1/test-attempts/{attempt.id}/feedback")

        assert response.status_code == status.HTTP_404_NOT_FOUND
