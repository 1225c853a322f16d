"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NotificationRead(BaseModel):
    """Representation of an inbox notification delivered to the client."""

    id: int
    recipient_id: int
    recipient_type: str
    title: str
    body: str
    type: str
    data: dict[str, Any] = Field(default_factory=dict)
    is_read: bool = False
    created_at: datetime
    read_at: datetime | None = None


class DuplicateCleanupData(BaseModel):
    """Counts of records removed by a cleanup run."""

    model_config = ConfigDict(populate_by_name=True)

    deleted_campaigns: int = Field(..., alias="deletedCampaigns", ge=0)
    deleted_notifications: int = Field(..., alias="deletedNotifications", ge=0)


class DuplicateCleanupResponse(BaseModel):
    """Envelope returned by the duplicate cleanup endpoint."""

    success: bool
    message: str
    data: DuplicateCleanupData | None = None


__all__ = ["DuplicateCleanupData", "DuplicateCleanupResponse", "NotificationRead"]
