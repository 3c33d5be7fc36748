# socialnet/crud/notification.py
"""
Notification CRUD Operations
Append-only notification log plus the duplicate lookup used by the engine.
"""

from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session, joinedload

from socialnet.models.notification import Notification, NotificationType


def _subject_filter(column, value: Optional[int]):
    # A missing subject only matches rows whose subject is missing too.
    if value is None:
        return column.is_(None)
    return column == value


def find_recent_duplicate(
    db: Session,
    *,
    type: NotificationType,
    recipient_id: int,
    actor_id: int,
    post_id: Optional[int],
    comment_id: Optional[int],
    since: datetime,
) -> Optional[Notification]:
    """
    Find a notification for the same (type, recipient, actor, subjects)
    tuple created strictly after `since`.
    """
    return (
        db.query(Notification)
        .filter(
            Notification.type == type,
            Notification.recipient_id == recipient_id,
            Notification.actor_id == actor_id,
            _subject_filter(Notification.post_id, post_id),
            _subject_filter(Notification.comment_id, comment_id),
            Notification.created_at > since,
        )
        .order_by(Notification.created_at.desc())
        .first()
    )


def create_notification(
    db: Session,
    *,
    type: NotificationType,
    recipient_id: int,
    actor_id: int,
    created_at: datetime,
    post_id: Optional[int] = None,
    comment_id: Optional[int] = None,
) -> Notification:
    notification = Notification(
        type=type,
        recipient_id=recipient_id,
        actor_id=actor_id,
        post_id=post_id,
        comment_id=comment_id,
        is_read=False,
        created_at=created_at,
    )
    db.add(notification)
    db.flush()
    return notification


def list_for_recipient(
    db: Session,
    recipient_id: int,
    *,
    offset: int,
    limit: int,
) -> Tuple[List[Notification], int]:
    """
    Page of a recipient's notifications, newest first.

    Returns:
        (items, total) where total counts every notification of the recipient
    """
    query = db.query(Notification).filter(Notification.recipient_id == recipient_id)
    total = query.count()
    items = (
        query.options(joinedload(Notification.actor))
        .order_by(Notification.created_at.desc(), Notification.id.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )
    return items, total


def count_unread(db: Session, recipient_id: int) -> int:
    return db.query(Notification).filter(
        Notification.recipient_id == recipient_id,
        Notification.is_read.is_(False),
    ).count()


def get_owned(db: Session, notification_id: int, recipient_id: int) -> Optional[Notification]:
    return db.query(Notification).filter(
        Notification.id == notification_id,
        Notification.recipient_id == recipient_id,
    ).first()


def mark_all_read(db: Session, recipient_id: int) -> int:
    updated = db.query(Notification).filter(
        Notification.recipient_id == recipient_id,
        Notification.is_read.is_(False),
    ).update({"is_read": True}, synchronize_session=False)
    return int(updated)


def delete_owned(db: Session, notification_id: int, recipient_id: int) -> bool:
    deleted = db.query(Notification).filter(
        Notification.id == notification_id,
        Notification.recipient_id == recipient_id,
    ).delete(synchronize_session=False)
    return deleted > 0
