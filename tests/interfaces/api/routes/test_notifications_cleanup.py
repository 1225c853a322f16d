"""Integration tests for the duplicate cleanup endpoint."""

from __future__ import annotations

from datetime import timedelta

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from app.domain.entities import Notification, NotificationCampaign, User
from app.domain.exceptions import StoreDeleteError
from app.infrastructure.repositories import (
    NotificationCampaignRepository,
    NotificationRepository,
    RoleRepository,
    UserRepository,
)
from app.infrastructure.security import create_access_token
from app.interfaces.api.routes import notifications as notifications_routes
from app.utils import now_in_app_timezone


@pytest.fixture()
def client(db_session):
    """Return a test client bound to a clean application instance."""

    from main import create_app

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


def _create_user(db_session, *, alias: str, email: str) -> User:
    role = RoleRepository(db_session).ensure(name=alias.title(), alias=alias)
    return UserRepository(db_session).create(
        User(id=None, role=role, name=email.split("@")[0], email=email)
    )


def _auth_headers(user: User) -> dict[str, str]:
    token = create_access_token({"sub": user.email})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def admin(db_session) -> User:
    return _create_user(db_session, alias="admin", email="admin@example.com")


def _seed_duplicates(db_session, admin: User) -> None:
    now = now_in_app_timezone()
    campaigns = NotificationCampaignRepository(db_session)
    for minutes in (30, 20, 10):
        campaigns.create(
            NotificationCampaign(
                id=None,
                title="Exam Reminder",
                body="Exam tomorrow at 9",
                notification_type="class",
                created_by=admin.id,
                class_id=1,
                class_number=10,
                created_at=now - timedelta(minutes=minutes),
            )
        )

    notifications = NotificationRepository(db_session)
    for minutes in (15, 5):
        notifications.create(
            Notification(
                id=None,
                recipient_id=admin.id,
                recipient_type="admin",
                title="Exam Reminder",
                body="Exam tomorrow at 9",
                type="test",
                created_at=now - timedelta(minutes=minutes),
            )
        )


def test_cleanup_removes_duplicates_and_reports_counts(client, db_session, admin):
    _seed_duplicates(db_session, admin)

    response = client.delete("/notifications/admin/duplicates", headers=_auth_headers(admin))

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Limpieza completada"
    assert body["data"] == {"deletedCampaigns": 2, "deletedNotifications": 1}

    inbox = client.get("/notifications/", headers=_auth_headers(admin))
    assert inbox.status_code == 200
    assert len(inbox.json()) == 1


def test_cleanup_twice_reports_zero(client, db_session, admin):
    _seed_duplicates(db_session, admin)
    headers = _auth_headers(admin)

    client.delete("/notifications/admin/duplicates", headers=headers)
    second = client.delete("/notifications/admin/duplicates", headers=headers)

    assert second.status_code == 200
    assert second.json()["data"] == {"deletedCampaigns": 0, "deletedNotifications": 0}


def test_cleanup_requires_administrator(client, db_session):
    student = _create_user(db_session, alias="student", email="student@example.com")

    response = client.delete(
        "/notifications/admin/duplicates", headers=_auth_headers(student)
    )

    assert response.status_code == 403


def test_cleanup_requires_authentication(client):
    assert client.delete("/notifications/admin/duplicates").status_code == 401

    response = client.delete(
        "/notifications/admin/duplicates",
        headers={"Authorization": "Bearer not-a-token"},
    )
    assert response.status_code == 401


def test_cleanup_failure_returns_generic_error(client, admin, monkeypatch, caplog):
    def _fail(_session):
        raise StoreDeleteError("connection reset", ids=[1, 2])

    monkeypatch.setattr(notifications_routes, "cleanup_duplicate_notifications", _fail)

    caplog.set_level("ERROR")
    response = client.delete("/notifications/admin/duplicates", headers=_auth_headers(admin))

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["data"] is None
    assert "connection reset" not in body["message"]
    assert "ids: [1, 2]" in caplog.text
