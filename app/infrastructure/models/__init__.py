"""ORM models used by the application infrastructure."""

from .role import RoleModel
from .user import UserModel
from .notification import NotificationModel
from .notification_campaign import NotificationCampaignModel

__all__ = [
    "RoleModel",
    "UserModel",
    "NotificationModel",
    "NotificationCampaignModel",
]
