"""Shared helpers to turn flat store rows into duplicate groups."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Any, Hashable

from app.domain.entities import DuplicateGroup
from app.utils import ensure_app_timezone


def collect_duplicate_groups(
    rows: Iterable[tuple[Any, ...]],
) -> list[DuplicateGroup]:
    """Group ``(id, created_at, *key)`` rows by key, keeping only repeated keys.

    Groups are returned in the order their first member appears in ``rows``.
    ``None`` is a regular key value, so rows missing the same optional field
    still group together.
    """

    groups: dict[tuple[Hashable, ...], DuplicateGroup] = {}
    for record_id, created_at, *key_values in rows:
        key = tuple(key_values)
        group = groups.get(key)
        if group is None:
            group = groups[key] = DuplicateGroup(key=key)
        group.add(int(record_id), _as_aware(created_at))
    return [group for group in groups.values() if len(group) > 1]


def unique_ids(ids: Iterable[int | None]) -> list[int]:
    """Return ``ids`` without ``None`` or repeats, preserving order."""

    seen: set[int] = set()
    ordered: list[int] = []
    for record_id in ids:
        if record_id is None or record_id in seen:
            continue
        seen.add(record_id)
        ordered.append(record_id)
    return ordered


def _as_aware(value: datetime) -> datetime:
    localized = ensure_app_timezone(value)
    if localized is None:  # pragma: no cover - created_at is NOT NULL
        msg = "Duplicate group member without creation time"
        raise ValueError(msg)
    return localized


__all__ = ["collect_duplicate_groups", "unique_ids"]
