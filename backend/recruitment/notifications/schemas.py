"""
Notification Pydantic schemas
"""
from datetime import datetime

from recruitment.core.schemas import CamelModel


class NotificationResponse(CamelModel):
    id: int
    user_id: int
    message: str
    is_read: bool
    created_at: datetime
