from fastapi import APIRouter, Depends, Query

from socialnet.api.deps import get_notification_engine
from socialnet.exceptions import NotFoundError
from socialnet.models.user import User
from socialnet.schemas.message import UnreadCountResponse
from socialnet.schemas.notification import (
    NotificationPageResponse,
    NotificationResponse,
    SuccessResponse,
)
from socialnet.services.notification_service import NotificationEngine
from socialnet.utils.security import get_current_user

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("", response_model=NotificationPageResponse)
def get_my_notifications(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    current_user: User = Depends(get_current_user),
    engine: NotificationEngine = Depends(get_notification_engine),
):
    result = engine.list_for_recipient(current_user.id, page=page, page_size=limit)
    return NotificationPageResponse(
        notifications=[NotificationResponse.model_validate(n) for n in result.items],
        total=result.total,
        page=result.page,
        limit=result.page_size,
        total_pages=result.total_pages,
    )


@router.get("/unread-count", response_model=UnreadCountResponse)
def get_unread_count(
    current_user: User = Depends(get_current_user),
    engine: NotificationEngine = Depends(get_notification_engine),
):
    return UnreadCountResponse(count=engine.unread_count(current_user.id))


@router.post("/read-all", response_model=SuccessResponse)
def mark_all_notifications_read(
    current_user: User = Depends(get_current_user),
    engine: NotificationEngine = Depends(get_notification_engine),
):
    engine.mark_all_read(current_user.id)
    return SuccessResponse()


@router.post("/{notification_id}/read", response_model=NotificationResponse)
def mark_notification_read(
    notification_id: int,
    current_user: User = Depends(get_current_user),
    engine: NotificationEngine = Depends(get_notification_engine),
):
    return NotificationResponse.model_validate(
        engine.mark_read(notification_id, current_user.id)
    )


@router.delete("/{notification_id}", response_model=SuccessResponse)
def delete_notification(
    notification_id: int,
    current_user: User = Depends(get_current_user),
    engine: NotificationEngine = Depends(get_notification_engine),
):
    if not engine.delete(notification_id, current_user.id):
        raise NotFoundError("Notification not found")
    return SuccessResponse()
