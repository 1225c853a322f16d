"""Persistence helpers for inbox notification entities."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime

import logging

from sqlalchemy import and_, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import DuplicateGroup, Notification
from app.domain.exceptions import StoreDeleteError, StoreQueryError
from app.infrastructure.models import NotificationModel
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)

from .grouping import collect_duplicate_groups, unique_ids

logger = logging.getLogger(__name__)


class NotificationRepository:
    """Provide storage operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(
        self,
        user_id: int,
        *,
        limit: int | None = 50,
    ) -> Sequence[Notification]:
        query = self.session.query(NotificationModel)
        query = query.filter(NotificationModel.user_id == user_id)
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def get(self, notification_id: int) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def count(self) -> int:
        return self.session.query(NotificationModel).count()

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel()
        self._apply_entity_to_model(model, notification)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def query_recent_grouped_by_identity(
        self, since: datetime
    ) -> list[DuplicateGroup]:
        """Return repeated ``(recipient, title, body, type)`` groups created at or after ``since``.

        The database first keeps the ``(recipient, title, type)`` combinations
        seen more than once in the window; bodies are compared afterwards.
        """

        cutoff = ensure_app_naive_datetime(since)
        candidates = (
            self.session.query(
                NotificationModel.user_id,
                NotificationModel.title,
                NotificationModel.type,
            )
            .filter(NotificationModel.created_at >= cutoff)
            .group_by(
                NotificationModel.user_id,
                NotificationModel.title,
                NotificationModel.type,
            )
            .having(func.count(NotificationModel.id) > 1)
            .subquery()
        )
        query = (
            self.session.query(
                NotificationModel.id,
                NotificationModel.created_at,
                NotificationModel.user_id,
                NotificationModel.title,
                NotificationModel.body,
                NotificationModel.type,
            )
            .join(
                candidates,
                and_(
                    NotificationModel.user_id == candidates.c.user_id,
                    NotificationModel.title == candidates.c.title,
                    NotificationModel.type == candidates.c.type,
                ),
            )
            .filter(NotificationModel.created_at >= cutoff)
            .order_by(NotificationModel.created_at.asc(), NotificationModel.id.asc())
        )
        try:
            rows = query.all()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreQueryError("No se pudieron agrupar las notificaciones recientes") from exc

        logger.debug("Scanned %s notifications created since %s", len(rows), cutoff)
        return collect_duplicate_groups(rows)

    def delete_by_ids(self, notification_ids: Iterable[int]) -> int:
        """Delete the given notifications in one statement and return the affected rows."""

        ids = unique_ids(notification_ids)
        if not ids:
            return 0
        try:
            deleted = (
                self.session.query(NotificationModel)
                .filter(NotificationModel.id.in_(ids))
                .delete(synchronize_session=False)
            )
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreDeleteError(
                "No se pudieron eliminar las notificaciones duplicadas", ids=ids
            ) from exc
        return int(deleted or 0)

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationModel,
        notification: Notification,
    ) -> None:
        model.created_at = (
            ensure_app_naive_datetime(notification.created_at)
            or ensure_app_naive_datetime(now_in_app_timezone())
        )
        model.user_id = notification.recipient_id
        model.user_type = notification.recipient_type
        model.title = notification.title.strip()
        model.body = notification.body.strip()
        model.type = notification.type
        model.data = notification.data or {}
        model.is_read = notification.is_read
        model.read_at = ensure_app_naive_datetime(notification.read_at)

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            recipient_id=model.user_id,
            recipient_type=model.user_type,
            title=model.title,
            body=model.body,
            type=model.type,
            data=model.data or {},
            is_read=bool(model.is_read),
            created_at=ensure_app_timezone(model.created_at),
            read_at=ensure_app_timezone(model.read_at),
        )


__all__ = ["NotificationRepository"]
