"""Domain entities exposed by the application."""

from .duplicate_group import DuplicateGroup, GroupMember
from .notification import NOTIFICATION_TYPE_GENERAL, Notification
from .notification_campaign import CAMPAIGN_AUDIENCES, NotificationCampaign
from .role import ADMIN_ROLE_ALIASES, Role
from .user import User

__all__ = [
    "ADMIN_ROLE_ALIASES",
    "CAMPAIGN_AUDIENCES",
    "DuplicateGroup",
    "GroupMember",
    "NOTIFICATION_TYPE_GENERAL",
    "Notification",
    "NotificationCampaign",
    "Role",
    "User",
]
