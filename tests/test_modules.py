"""Tests for learning module endpoints."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from fluentpath import models


def _add_modules(db_session: Session) -> list[models.Module]:
    modules = [
        models.Module(title="Verbs", level="beginner", content="...", order=2),
        models.Module(title="Greetings", level="beginner", content="...", order=1),
        models.Module(title="Idioms", level="advanced", content="...", order=1),
        models.Module(title="Past Tenses", level="intermediate", content="...", order=1),
    ]
    db_session.add_all(modules)
    db_session.commit()
    return modules


class TestListModules:
    """Test suite for GET /modules endpoints."""

    def test_list_all_modules(
        self, client: TestClient, db_session: Session, test_user: models.User
    ) -> None:
        _add_modules(db_session)

        response = client.get("/api/v1/modules")

        assert response.status_code == status.HTTP_200_OK
        modules = response.json()["modules"]
        assert len(modules) == 4
        assert [m["title"] for m in modules] == ["Greetings", "Verbs", "Past Tenses", "Idioms"]
        assert all(m["completed"] is False and m["score"] is None for m in modules)

    def test_list_modules_by_level_in_order(
        self, client: TestClient, db_session: Session, test_user: models.User
    ) -> None:
        _add_modules(db_session)

        response = client.get("/api/v1/modules/beginner")

        assert response.status_code == status.HTTP_200_OK
        assert [m["title"] for m in response.json()["modules"]] == ["Greetings", "Verbs"]

    def test_unknown_level(self, client: TestClient, test_user: models.User) -> None:
        response = client.get("/api/v1/modules/expert")

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


class TestModuleProgress:
    """Test suite for PUT /modules/:id/progress."""

    def test_progress_merged_into_listing(
        self, client: TestClient, db_session: Session, test_user: models.User
    ) -> None:
        modules = _add_modules(db_session)
        greetings = modules[1]

        response = client.put(
            f"/api/v1/modules/{greetings.id}/progress", json={"completed": True, "score": 8.5}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["completed"] is True
        assert response.json()["completed_at"] is not None

        listing = client.get("/api/v1/modules/beginner").json()["modules"]
        assert listing[0]["completed"] is True
        assert listing[0]["score"] == 8.5
        assert listing[1]["completed"] is False

    def test_progress_replaced(
        self, client: TestClient, db_session: Session, test_user: models.User
    ) -> None:
        """Updating progress again replaces the record instead of adding one."""
        module = _add_modules(db_session)[0]
        client.put(f"/api/v1/modules/{module.id}/progress", json={"completed": True, "score": 6})

        response = client.put(f"/api/v1/modules/{module.id}/progress", json={"completed": False})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["completed"] is False
        assert response.json()["completed_at"] is None
        assert db_session.query(models.UserProgress).count() == 1

    def test_unknown_module(self, client: TestClient, test_user: models.User) -> None:
        response = client.put("/api/v1/modules/99999/progress", json={"completed": True})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_score_out_of_range(
        self, client: TestClient, db_session: Session, test_user: models.User
    ) -> None:
        module = _add_modules(db_session)[0]

        response = client.put(
            f"/api/v1/modules/{module.id}/progress", json={"completed": True, "score": 11}
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
