from pydantic import BaseModel, ConfigDict
from typing import List, Optional
from datetime import datetime

from socialnet.models.notification import NotificationType
from socialnet.schemas.message import UserBrief


class NotificationResponse(BaseModel):
    id: int
    type: NotificationType
    recipient_id: int
    actor_id: int
    actor: Optional[UserBrief] = None
    post_id: Optional[int] = None
    comment_id: Optional[int] = None
    is_read: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class NotificationPageResponse(BaseModel):
    notifications: List[NotificationResponse]
    total: int
    page: int
    limit: int
    total_pages: int


class SuccessResponse(BaseModel):
    success: bool = True
