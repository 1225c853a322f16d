"""Endpoints for inbox notifications and their administrative cleanup."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import cleanup_duplicate_notifications
from app.domain.entities import Notification, User
from app.domain.exceptions import DuplicateCleanupError
from app.infrastructure.database import get_db
from app.infrastructure.repositories import NotificationRepository
from app.interfaces.api.dependencies import get_current_active_user, require_admin
from app.interfaces.api.schemas import (
    DuplicateCleanupData,
    DuplicateCleanupResponse,
    NotificationRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)

_CLEANUP_FAILED_MESSAGE = (
    "No se pudo completar la limpieza de notificaciones duplicadas. "
    "Puedes intentarlo nuevamente."
)


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead(
        id=notification.id or 0,
        recipient_id=notification.recipient_id,
        recipient_type=notification.recipient_type,
        title=notification.title,
        body=notification.body,
        type=notification.type,
        data=notification.data or {},
        is_read=notification.is_read,
        created_at=notification.created_at,
        read_at=notification.read_at,
    )


@router.get("/", response_model=list[NotificationRead])
def list_notifications(
    limit: int = Query(50, ge=1, le=200),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> list[NotificationRead]:
    """Devuelve las notificaciones más recientes del usuario autenticado."""

    notifications = NotificationRepository(db).list_for_user(current_user.id, limit=limit)
    return [_notification_to_schema(notification) for notification in notifications]


@router.delete(
    "/admin/duplicates",
    response_model=DuplicateCleanupResponse,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": DuplicateCleanupResponse}},
)
def remove_duplicate_notifications(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    """Elimina campañas y notificaciones duplicadas conservando la más antigua."""

    try:
        report = cleanup_duplicate_notifications(db)
    except DuplicateCleanupError as exc:
        logger.exception(
            "Duplicate cleanup requested by user %s failed: %s (ids: %s)",
            current_user.id,
            exc,
            getattr(exc, "ids", []),
        )
        failure = DuplicateCleanupResponse(success=False, message=_CLEANUP_FAILED_MESSAGE)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=failure.model_dump(by_alias=True),
        )

    logger.info(
        "User %s removed %s duplicate campaigns and %s duplicate notifications",
        current_user.id,
        report.deleted_campaigns,
        report.deleted_notifications,
    )
    return DuplicateCleanupResponse(
        success=report.success,
        message=report.message,
        data=DuplicateCleanupData(
            deleted_campaigns=report.deleted_campaigns,
            deleted_notifications=report.deleted_notifications,
        ),
    )
