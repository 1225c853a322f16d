"""Domain entity representing an administrative notification campaign."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

CAMPAIGN_AUDIENCES = ("students", "teachers", "both", "class")


@dataclass
class NotificationCampaign:
    """Broadcast authored by an administrator and fanned out to inboxes."""

    id: int | None
    title: str
    body: str
    notification_type: str
    created_by: int
    class_id: int | None = None
    class_number: int | None = None
    sent_at: datetime | None = None
    created_at: datetime | None = None


__all__ = ["CAMPAIGN_AUDIENCES", "NotificationCampaign"]
