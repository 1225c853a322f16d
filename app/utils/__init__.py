"""Utility helpers for reusable functionality."""

from .datetime import (
    as_utc,
    ensure_app_naive_datetime,
    ensure_app_timezone,
    get_app_timezone,
    lookback_start,
    now_in_app_naive_datetime,
    now_in_app_timezone,
)

__all__ = [
    "as_utc",
    "ensure_app_naive_datetime",
    "ensure_app_timezone",
    "get_app_timezone",
    "lookback_start",
    "now_in_app_naive_datetime",
    "now_in_app_timezone",
]
