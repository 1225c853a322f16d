"""Tests for configuration defaults and datetime helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from app.config import MERGE_POLICY_COLLAPSE, Settings
from app.utils import as_utc, ensure_app_naive_datetime, lookback_start

_REQUIRED = {
    "database_url": "sqlite://",
    "secret_key": "secret",
    "access_token_expire_minutes": 5,
}


def test_cleanup_settings_defaults():
    settings = Settings(_env_file=None, **_REQUIRED)

    assert settings.notification_lookback_days == 30
    assert settings.notification_merge_threshold_minutes == 60
    assert settings.notification_merge_policy == MERGE_POLICY_COLLAPSE


@pytest.mark.parametrize(
    "overrides",
    [
        {"notification_merge_policy": "sometimes"},
        {"notification_lookback_days": 0},
        {"notification_merge_threshold_minutes": -1},
    ],
)
def test_invalid_cleanup_settings_are_rejected(overrides):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **_REQUIRED, **overrides)


def test_lookback_start_is_relative_to_reference_time():
    now = datetime(2024, 3, 31, 8, 30, tzinfo=timezone.utc)

    assert lookback_start(timedelta(days=30), now=now) == now - timedelta(days=30)


def test_naive_storage_datetime_drops_tzinfo():
    value = datetime(2024, 3, 31, 8, 30, tzinfo=timezone.utc)

    stored = ensure_app_naive_datetime(value)

    assert stored == datetime(2024, 3, 31, 8, 30)
    assert stored.tzinfo is None


def test_lookback_start_spans_dst_change_in_real_time(monkeypatch):
    from app.utils import datetime as datetime_utils

    monkeypatch.setattr(
        datetime_utils, "get_app_timezone", lambda: ZoneInfo("America/New_York")
    )
    # 30 days before March 20 crosses the March 10 change to daylight time.
    now = datetime(2024, 3, 20, 16, 0, tzinfo=timezone.utc)

    start = lookback_start(timedelta(days=30), now=now)

    assert start == datetime(2024, 2, 19, 16, 0, tzinfo=timezone.utc)
    assert start.utcoffset() == timedelta(0)


def test_as_utc_reads_naive_values_in_app_timezone():
    assert as_utc(datetime(2024, 3, 31, 8, 30)) == datetime(
        2024, 3, 31, 8, 30, tzinfo=timezone.utc
    )
