"""SQLAlchemy model for administrative notification campaigns."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, Text

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class NotificationCampaignModel(Base):
    """Database representation of a broadcast sent by an administrator."""

    __tablename__ = "notification_campaign"
    __table_args__ = (
        Index("ix_notification_campaign_type_created", "notification_type", "created_at"),
        Index("ix_notification_campaign_creator_created", "created_by", "created_at"),
    )

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    body = Column(Text, nullable=False)
    notification_type = Column(String(20), nullable=False)
    class_number = Column(Integer, nullable=True)
    # Classes live in the course catalogue; only the identifier is kept here.
    class_id = Column(Integer, nullable=True)
    sent_at = Column(DateTime(), nullable=True)
    created_by = Column(Integer, ForeignKey("user.id"), nullable=False)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["NotificationCampaignModel"]
