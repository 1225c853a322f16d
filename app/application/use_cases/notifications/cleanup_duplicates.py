"""Use case that runs the full duplicate notification cleanup."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from threading import Lock

import logging

from sqlalchemy.orm import Session

from app.config import Settings
from app.infrastructure.locks import get_operation_lock
from app.infrastructure.repositories import (
    NotificationCampaignRepository,
    NotificationRepository,
)

from .deduplicate_campaigns import CampaignDeduplicator
from .deduplicate_notifications import NotificationDeduplicator

logger = logging.getLogger(__name__)

CLEANUP_LOCK_NAME = "notifications.cleanup"
CLEANUP_COMPLETED_MESSAGE = "Limpieza completada"


@dataclass(frozen=True)
class CleanupReport:
    """Summary returned to the administrator after a cleanup run."""

    success: bool
    message: str
    deleted_campaigns: int
    deleted_notifications: int


class CleanupReporter:
    """Run the campaign stage then the notification stage as one operation.

    Concurrent runs are serialized through a named lock, so a second caller
    waits and then finds nothing left to delete instead of reporting the same
    groups twice. Errors from either stage propagate unchanged.
    """

    def __init__(
        self,
        campaigns: CampaignDeduplicator,
        notifications: NotificationDeduplicator,
        *,
        lock: Lock | None = None,
    ) -> None:
        self._campaigns = campaigns
        self._notifications = notifications
        self._lock = lock if lock is not None else get_operation_lock(CLEANUP_LOCK_NAME)

    def run(self, *, now: datetime | None = None) -> CleanupReport:
        with self._lock:
            campaign_result = self._campaigns.run()
            notification_result = self._notifications.run(now=now)

        report = CleanupReport(
            success=True,
            message=CLEANUP_COMPLETED_MESSAGE,
            deleted_campaigns=campaign_result.deleted_campaigns_count,
            deleted_notifications=notification_result.deleted_notifications_count,
        )
        logger.info(
            "Duplicate cleanup finished: %s campaigns and %s notifications deleted",
            report.deleted_campaigns,
            report.deleted_notifications,
        )
        return report


def cleanup_duplicate_notifications(
    session: Session,
    *,
    now: datetime | None = None,
    settings: Settings | None = None,
) -> CleanupReport:
    """Remove duplicated campaigns and inbox notifications using ``session``."""

    reporter = CleanupReporter(
        CampaignDeduplicator(NotificationCampaignRepository(session)),
        NotificationDeduplicator.from_settings(NotificationRepository(session), settings),
    )
    return reporter.run(now=now)


__all__ = [
    "CLEANUP_COMPLETED_MESSAGE",
    "CLEANUP_LOCK_NAME",
    "CleanupReport",
    "CleanupReporter",
    "cleanup_duplicate_notifications",
]
