"""
Notification Engine
Single funnel for notification traffic from posts, comments, follows and
messages. Owns the self-action and duplicate suppression policy.

The duplicate check is a read followed by a write. Two identical triggers
landing in the same instant from different requests can both miss the read
and produce two rows; suppression is best-effort, not exactly-once.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, List, Optional

from sqlalchemy.orm import Session

from socialnet.config import settings
from socialnet.crud import notification as notification_crud
from socialnet.exceptions import NotFoundError, RejectedError
from socialnet.models.notification import Notification, NotificationType
from socialnet.utils.clock import utcnow

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotificationRequest:
    type: NotificationType
    recipient_id: int
    actor_id: int
    post_id: Optional[int] = None
    comment_id: Optional[int] = None


@dataclass
class NotificationPage:
    items: List[Notification]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.page_size) if self.total else 0


class NotificationEngine:
    """Creates, lists and updates notifications for a single DB session."""

    def __init__(
        self,
        db: Session,
        *,
        dedup_window: Optional[timedelta] = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.db = db
        self.dedup_window = (
            dedup_window if dedup_window is not None
            else timedelta(seconds=settings.NOTIFICATION_DEDUP_WINDOW_SECONDS)
        )
        self.clock = clock

    # ======================
    # NOTIFY
    # ======================

    def notify(self, request: NotificationRequest) -> Optional[Notification]:
        """
        Record a notification unless it is a self-action or a recent duplicate.

        Returns:
            The new notification, the existing one when a duplicate was
            created inside the dedup window, or None for self-actions
        """
        if request.recipient_id == request.actor_id:
            return None

        now = self.clock()
        existing = notification_crud.find_recent_duplicate(
            self.db,
            type=request.type,
            recipient_id=request.recipient_id,
            actor_id=request.actor_id,
            post_id=request.post_id,
            comment_id=request.comment_id,
            since=now - self.dedup_window,
        )
        if existing:
            logger.debug(
                "Suppressed duplicate %s notification (recipient_id=%s, actor_id=%s, existing_id=%s)",
                request.type.value,
                request.recipient_id,
                request.actor_id,
                existing.id,
            )
            return existing

        notification = notification_crud.create_notification(
            self.db,
            type=request.type,
            recipient_id=request.recipient_id,
            actor_id=request.actor_id,
            post_id=request.post_id,
            comment_id=request.comment_id,
            created_at=now,
        )
        self.db.commit()
        self.db.refresh(notification)
        logger.info(
            "Created %s notification %s (recipient_id=%s, actor_id=%s)",
            notification.type.value,
            notification.id,
            notification.recipient_id,
            notification.actor_id,
        )
        return notification

    def follow(self, follower_id: int, followed_user_id: int) -> Optional[Notification]:
        return self.notify(NotificationRequest(
            type=NotificationType.FOLLOW,
            recipient_id=followed_user_id,
            actor_id=follower_id,
        ))

    def post_like(self, liker_id: int, post_author_id: int, post_id: int) -> Optional[Notification]:
        return self.notify(NotificationRequest(
            type=NotificationType.POST_LIKE,
            recipient_id=post_author_id,
            actor_id=liker_id,
            post_id=post_id,
        ))

    def post_comment(
        self, commenter_id: int, post_author_id: int, post_id: int, comment_id: int
    ) -> Optional[Notification]:
        return self.notify(NotificationRequest(
            type=NotificationType.POST_COMMENT,
            recipient_id=post_author_id,
            actor_id=commenter_id,
            post_id=post_id,
            comment_id=comment_id,
        ))

    def comment_like(
        self, liker_id: int, comment_author_id: int, comment_id: int, post_id: Optional[int] = None
    ) -> Optional[Notification]:
        return self.notify(NotificationRequest(
            type=NotificationType.COMMENT_LIKE,
            recipient_id=comment_author_id,
            actor_id=liker_id,
            post_id=post_id,
            comment_id=comment_id,
        ))

    def comment_reply(
        self,
        replier_id: int,
        parent_comment_author_id: int,
        comment_id: int,
        post_id: Optional[int] = None,
    ) -> Optional[Notification]:
        return self.notify(NotificationRequest(
            type=NotificationType.COMMENT_REPLY,
            recipient_id=parent_comment_author_id,
            actor_id=replier_id,
            post_id=post_id,
            comment_id=comment_id,
        ))

    def message(self, sender_id: int, receiver_id: int) -> Optional[Notification]:
        return self.notify(NotificationRequest(
            type=NotificationType.MESSAGE,
            recipient_id=receiver_id,
            actor_id=sender_id,
        ))

    # ======================
    # RECIPIENT OPERATIONS
    # ======================

    def list_for_recipient(self, recipient_id: int, page: int = 1, page_size: int = 20) -> NotificationPage:
        if page < 1 or page_size < 1:
            raise RejectedError("page and page_size must be positive")
        items, total = notification_crud.list_for_recipient(
            self.db,
            recipient_id,
            offset=(page - 1) * page_size,
            limit=page_size,
        )
        return NotificationPage(items=items, total=total, page=page, page_size=page_size)

    def unread_count(self, recipient_id: int) -> int:
        return notification_crud.count_unread(self.db, recipient_id)

    def mark_read(self, notification_id: int, recipient_id: int) -> Notification:
        notification = notification_crud.get_owned(self.db, notification_id, recipient_id)
        if not notification:
            raise NotFoundError("Notification not found")
        if not notification.is_read:
            notification.is_read = True
            self.db.commit()
            self.db.refresh(notification)
        return notification

    def mark_all_read(self, recipient_id: int) -> int:
        updated = notification_crud.mark_all_read(self.db, recipient_id)
        self.db.commit()
        return updated

    def delete(self, notification_id: int, recipient_id: int) -> bool:
        """Delete a notification the recipient owns; foreign IDs look absent."""
        deleted = notification_crud.delete_owned(self.db, notification_id, recipient_id)
        self.db.commit()
        return deleted
