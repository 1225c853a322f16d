"""Tests for the command line duplicate cleanup."""

from __future__ import annotations

import sys
from datetime import timedelta

import pytest

from app.domain.entities import NotificationCampaign, User
from app.domain.exceptions import StoreDeleteError
from app.infrastructure.repositories import (
    NotificationCampaignRepository,
    RoleRepository,
    UserRepository,
)
from app.utils import now_in_app_timezone
from scripts import cleanup_duplicates as cleanup_script


def _seed_campaign_copies(db_session, copies: int) -> None:
    role = RoleRepository(db_session).ensure(name="Administrador", alias="admin")
    admin = UserRepository(db_session).create(
        User(id=None, role=role, name="Admin", email="admin@example.com")
    )
    repository = NotificationCampaignRepository(db_session)
    created_at = now_in_app_timezone() - timedelta(days=1)
    for offset in range(copies):
        repository.create(
            NotificationCampaign(
                id=None,
                title="Exam Reminder",
                body="Exam tomorrow at 9",
                notification_type="students",
                created_by=admin.id,
                created_at=created_at + timedelta(minutes=offset),
            )
        )


def test_script_prints_deleted_counts(db_session, monkeypatch, capsys):
    _seed_campaign_copies(db_session, copies=3)
    monkeypatch.setattr(sys, "argv", ["cleanup_duplicates"])

    cleanup_script.main()

    output = capsys.readouterr().out
    assert "Campañas eliminadas: 2" in output
    assert "Notificaciones eliminadas: 0" in output
    assert NotificationCampaignRepository(db_session).count() == 1


def test_script_exits_when_a_delete_fails(db_session, monkeypatch):
    def _fail(_session, **_kwargs):
        raise StoreDeleteError("connection reset", ids=[1])

    monkeypatch.setattr(sys, "argv", ["cleanup_duplicates"])
    monkeypatch.setattr(cleanup_script, "cleanup_duplicate_notifications", _fail)

    with pytest.raises(SystemExit) as excinfo:
        cleanup_script.main()

    assert "No se pudo completar la limpieza" in str(excinfo.value)
    assert "connection reset" in str(excinfo.value)


def test_script_rejects_non_positive_lookback(db_session, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["cleanup_duplicates", "--lookback-days", "0"])

    with pytest.raises(SystemExit) as excinfo:
        cleanup_script.main()

    assert "--lookback-days" in str(excinfo.value)
