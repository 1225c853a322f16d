"""Pydantic schemas exposed by the HTTP interface."""

from .notification import (
    DuplicateCleanupData,
    DuplicateCleanupResponse,
    NotificationRead,
)

__all__ = [
    "DuplicateCleanupData",
    "DuplicateCleanupResponse",
    "NotificationRead",
]
