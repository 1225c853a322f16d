"""Use cases that clean up duplicated notifications and campaigns."""

from .cleanup_duplicates import (
    CLEANUP_COMPLETED_MESSAGE,
    CLEANUP_LOCK_NAME,
    CleanupReport,
    CleanupReporter,
    cleanup_duplicate_notifications,
)
from .deduplicate_campaigns import (
    CampaignDeduplicationResult,
    CampaignDeduplicator,
    deduplicate_campaigns,
)
from .deduplicate_notifications import (
    NotificationDeduplicationResult,
    NotificationDeduplicator,
    deduplicate_notifications,
)

__all__ = [
    "CLEANUP_COMPLETED_MESSAGE",
    "CLEANUP_LOCK_NAME",
    "CampaignDeduplicationResult",
    "CampaignDeduplicator",
    "CleanupReport",
    "CleanupReporter",
    "NotificationDeduplicationResult",
    "NotificationDeduplicator",
    "cleanup_duplicate_notifications",
    "deduplicate_campaigns",
    "deduplicate_notifications",
]
