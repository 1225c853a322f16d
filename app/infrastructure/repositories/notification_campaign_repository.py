"""Persistence helpers for notification campaigns."""

from __future__ import annotations

from collections.abc import Iterable

import logging

from sqlalchemy import and_, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import CAMPAIGN_AUDIENCES, DuplicateGroup, NotificationCampaign
from app.domain.exceptions import StoreDeleteError, StoreQueryError
from app.infrastructure.models import NotificationCampaignModel
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)

from .grouping import collect_duplicate_groups, unique_ids

logger = logging.getLogger(__name__)


class NotificationCampaignRepository:
    """Provide storage operations for :class:`NotificationCampaign` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, campaign_id: int) -> NotificationCampaign | None:
        model = self.session.get(NotificationCampaignModel, campaign_id)
        return self._to_entity(model) if model else None

    def count(self) -> int:
        return self.session.query(NotificationCampaignModel).count()

    def create(self, campaign: NotificationCampaign) -> NotificationCampaign:
        if campaign.notification_type not in CAMPAIGN_AUDIENCES:
            msg = f"Tipo de campaña no soportado: '{campaign.notification_type}'"
            raise ValueError(msg)
        model = NotificationCampaignModel()
        self._apply_entity_to_model(model, campaign)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def query_grouped_by_identity(self) -> list[DuplicateGroup]:
        """Return every repeated campaign identity across the full history.

        The database first narrows the scan to ``(title, notification_type)``
        pairs that occur more than once; the full key, including the body and
        the nullable class columns, is compared afterwards.
        """

        candidates = (
            self.session.query(
                NotificationCampaignModel.title,
                NotificationCampaignModel.notification_type,
            )
            .group_by(
                NotificationCampaignModel.title,
                NotificationCampaignModel.notification_type,
            )
            .having(func.count(NotificationCampaignModel.id) > 1)
            .subquery()
        )
        query = (
            self.session.query(
                NotificationCampaignModel.id,
                NotificationCampaignModel.created_at,
                NotificationCampaignModel.title,
                NotificationCampaignModel.body,
                NotificationCampaignModel.notification_type,
                NotificationCampaignModel.class_id,
                NotificationCampaignModel.class_number,
            )
            .join(
                candidates,
                and_(
                    NotificationCampaignModel.title == candidates.c.title,
                    NotificationCampaignModel.notification_type
                    == candidates.c.notification_type,
                ),
            )
            .order_by(
                NotificationCampaignModel.created_at.asc(),
                NotificationCampaignModel.id.asc(),
            )
        )
        try:
            rows = query.all()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreQueryError("No se pudieron agrupar las campañas de notificación") from exc

        logger.debug("Scanned %s notification campaigns", len(rows))
        return collect_duplicate_groups(rows)

    def delete_by_ids(self, campaign_ids: Iterable[int]) -> int:
        """Delete the given campaigns in one statement and return the affected rows."""

        ids = unique_ids(campaign_ids)
        if not ids:
            return 0
        try:
            deleted = (
                self.session.query(NotificationCampaignModel)
                .filter(NotificationCampaignModel.id.in_(ids))
                .delete(synchronize_session=False)
            )
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreDeleteError(
                "No se pudieron eliminar las campañas duplicadas", ids=ids
            ) from exc
        return int(deleted or 0)

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationCampaignModel, campaign: NotificationCampaign
    ) -> None:
        model.created_at = (
            ensure_app_naive_datetime(campaign.created_at)
            or ensure_app_naive_datetime(now_in_app_timezone())
        )
        model.title = campaign.title.strip()
        model.body = campaign.body.strip()
        model.notification_type = campaign.notification_type
        model.class_id = campaign.class_id
        model.class_number = campaign.class_number
        model.sent_at = ensure_app_naive_datetime(campaign.sent_at)
        model.created_by = campaign.created_by

    @staticmethod
    def _to_entity(model: NotificationCampaignModel) -> NotificationCampaign:
        return NotificationCampaign(
            id=model.id,
            title=model.title,
            body=model.body,
            notification_type=model.notification_type,
            created_by=model.created_by,
            class_id=model.class_id,
            class_number=model.class_number,
            sent_at=ensure_app_timezone(model.sent_at),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["NotificationCampaignRepository"]
