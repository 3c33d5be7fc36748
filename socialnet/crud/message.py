# socialnet/crud/message.py
"""
Message CRUD Operations
Storage-facing queries for direct messages. Nothing here commits;
the messaging service owns transaction boundaries.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from socialnet.models.message import Message, MessageKind


def create_message(
    db: Session,
    *,
    sender_id: int,
    receiver_id: int,
    conversation_id: str,
    content: str,
    kind: MessageKind,
    created_at: datetime,
    shared_post_id: Optional[int] = None,
    file_url: Optional[str] = None,
    file_type: Optional[str] = None,
    file_size: Optional[int] = None,
) -> Message:
    """
    Stage a new unread message.

    Args:
        db: Database session
        sender_id: Author user ID
        receiver_id: Recipient user ID
        conversation_id: Canonical key for the pair
        content: Message text
        kind: Message kind
        created_at: Creation timestamp (also used as initial updated_at)

    Returns:
        Flushed Message object with its ID assigned
    """
    message = Message(
        sender_id=sender_id,
        receiver_id=receiver_id,
        conversation_id=conversation_id,
        content=content,
        kind=kind,
        shared_post_id=shared_post_id,
        file_url=file_url,
        file_type=file_type,
        file_size=file_size,
        is_read=False,
        created_at=created_at,
        updated_at=created_at,
    )
    db.add(message)
    db.flush()
    return message


def get_message(db: Session, message_id: int) -> Optional[Message]:
    return db.query(Message).filter(Message.id == message_id).first()


def list_user_messages(db: Session, user_id: int) -> List[Message]:
    """All messages the user sent or received, newest first."""
    return (
        db.query(Message)
        .filter(or_(Message.sender_id == user_id, Message.receiver_id == user_id))
        .order_by(Message.created_at.desc(), Message.id.desc())
        .all()
    )


def list_conversation_messages(db: Session, conversation_id: str) -> List[Message]:
    """Messages of one conversation, oldest first."""
    return (
        db.query(Message)
        .filter(Message.conversation_id == conversation_id)
        .order_by(Message.created_at.asc(), Message.id.asc())
        .all()
    )


def count_conversation_unread(db: Session, conversation_id: str, receiver_id: int) -> int:
    return db.query(Message).filter(
        Message.conversation_id == conversation_id,
        Message.receiver_id == receiver_id,
        Message.is_read.is_(False),
    ).count()


def count_unread(db: Session, receiver_id: int) -> int:
    return db.query(Message).filter(
        Message.receiver_id == receiver_id,
        Message.is_read.is_(False),
        Message.is_deleted.is_(False),
    ).count()


def mark_conversation_read(
    db: Session,
    conversation_id: str,
    receiver_id: int,
    updated_at: datetime,
) -> int:
    """
    Flip every unread message addressed to receiver_id in the conversation.

    Issued as a single UPDATE so the batch lands together.

    Returns:
        Number of messages flipped
    """
    updated = db.query(Message).filter(
        Message.conversation_id == conversation_id,
        Message.receiver_id == receiver_id,
        Message.is_read.is_(False),
    ).update({"is_read": True, "updated_at": updated_at}, synchronize_session=False)
    return int(updated)
