"""
Notification routes (served under the dashboard prefix)
"""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from recruitment.core.config import settings
from recruitment.core.database import get_db
from recruitment.auth.dependencies import get_current_principal
from recruitment.auth.principal import Principal
from recruitment.notifications.schemas import NotificationResponse
from recruitment.notifications.service import NotificationService

router = APIRouter(prefix="/api/dashboard/notifications", tags=["Notifications"])


@router.get("", response_model=List[NotificationResponse])
def list_notifications(
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    """The caller's latest notifications, newest first"""
    return NotificationService(db).list_for_user(principal.user_id, settings.DASHBOARD_LIST_SIZE)


@router.put("/{notification_id}/read", response_model=NotificationResponse)
def mark_notification_read(
    notification_id: int,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    return NotificationService(db).mark_as_read(notification_id, principal)
