"""Use case that removes repeated inbox notifications."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Protocol

import logging

from sqlalchemy.orm import Session

from app.config import MERGE_POLICY_COLLAPSE, MERGE_POLICY_WINDOW, Settings, get_settings
from app.domain.entities import DuplicateGroup, GroupMember
from app.infrastructure.repositories import NotificationRepository
from app.utils import as_utc, lookback_start

logger = logging.getLogger(__name__)

DEFAULT_LOOKBACK = timedelta(days=30)
DEFAULT_MERGE_THRESHOLD = timedelta(hours=1)


class NotificationStore(Protocol):
    def query_recent_grouped_by_identity(self, since: datetime) -> list[DuplicateGroup]: ...

    def delete_by_ids(self, ids: Iterable[int]) -> int: ...


@dataclass(frozen=True)
class NotificationDeduplicationResult:
    deleted_notifications_count: int


class NotificationDeduplicator:
    """Collapse copies of the same notification sent to the same recipient.

    Only notifications created inside the lookback window are considered.
    Within a group the earliest notification always survives. With the
    ``collapse`` policy every later copy is removed; with ``window`` a copy
    is removed only when it was created less than ``merge_threshold`` after
    the previous one.
    """

    def __init__(
        self,
        store: NotificationStore,
        *,
        lookback: timedelta = DEFAULT_LOOKBACK,
        merge_threshold: timedelta = DEFAULT_MERGE_THRESHOLD,
        policy: str = MERGE_POLICY_COLLAPSE,
    ) -> None:
        if policy not in (MERGE_POLICY_COLLAPSE, MERGE_POLICY_WINDOW):
            msg = f"Unknown merge policy '{policy}'"
            raise ValueError(msg)
        self._store = store
        self.lookback = lookback
        self.merge_threshold = merge_threshold
        self.policy = policy

    @classmethod
    def from_settings(
        cls, store: NotificationStore, settings: Settings | None = None
    ) -> "NotificationDeduplicator":
        settings = settings or get_settings()
        return cls(
            store,
            lookback=timedelta(days=settings.notification_lookback_days),
            merge_threshold=timedelta(minutes=settings.notification_merge_threshold_minutes),
            policy=settings.notification_merge_policy,
        )

    def run(self, *, now: datetime | None = None) -> NotificationDeduplicationResult:
        since = lookback_start(self.lookback, now=now)
        deleted_total = 0
        groups = self._store.query_recent_grouped_by_identity(since)
        for group in groups:
            members = [m for m in group.sorted_members() if m.created_at >= since]
            if len(members) < 2:
                continue
            ids_to_delete = self._select_for_deletion(group, members)
            if not ids_to_delete:
                continue
            deleted = self._store.delete_by_ids(ids_to_delete)
            if deleted != len(ids_to_delete):
                logger.warning(
                    "Notification group %s: expected to delete %s records but the store removed %s",
                    group.key,
                    len(ids_to_delete),
                    deleted,
                )
            deleted_total += deleted

        logger.info(
            "Notification deduplication (%s policy, since %s) removed %s records from %s groups",
            self.policy,
            since.isoformat(),
            deleted_total,
            len(groups),
        )
        return NotificationDeduplicationResult(deleted_notifications_count=deleted_total)

    def _select_for_deletion(
        self, group: DuplicateGroup, members: Sequence[GroupMember]
    ) -> list[int]:
        ids_to_delete: list[int] = []
        distant_copies = 0
        previous = members[0]
        for member in members[1:]:
            gap = as_utc(member.created_at) - as_utc(previous.created_at)
            previous = member
            if gap < self.merge_threshold:
                ids_to_delete.append(member.id)
                continue
            if self.policy == MERGE_POLICY_WINDOW:
                # Far from the previous copy: a separate send, kept.
                continue
            distant_copies += 1
            ids_to_delete.append(member.id)

        if distant_copies:
            logger.warning(
                "Collapsing %s copies of notification %s sent more than %s after the previous one",
                distant_copies,
                group.key,
                self.merge_threshold,
            )
        return ids_to_delete


def deduplicate_notifications(
    session: Session,
    *,
    now: datetime | None = None,
    settings: Settings | None = None,
) -> NotificationDeduplicationResult:
    """Delete non-canonical inbox notifications created inside the lookback window."""

    repository = NotificationRepository(session)
    return NotificationDeduplicator.from_settings(repository, settings).run(now=now)


__all__ = [
    "DEFAULT_LOOKBACK",
    "DEFAULT_MERGE_THRESHOLD",
    "NotificationDeduplicationResult",
    "NotificationDeduplicator",
    "NotificationStore",
    "deduplicate_notifications",
]
