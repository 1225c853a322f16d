"""Domain entity representing a user inbox notification."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

NOTIFICATION_TYPE_GENERAL = "general"


@dataclass
class Notification:
    """Inbox entry delivered to a single recipient.

    ``(recipient_id, title, body, type)`` identifies the logical notification;
    two entries sharing it are copies of the same send.
    """

    id: int | None
    recipient_id: int
    recipient_type: str
    title: str
    body: str
    type: str = NOTIFICATION_TYPE_GENERAL
    data: dict[str, Any] = field(default_factory=dict)
    is_read: bool = False
    created_at: datetime | None = None
    read_at: datetime | None = None


__all__ = ["NOTIFICATION_TYPE_GENERAL", "Notification"]
