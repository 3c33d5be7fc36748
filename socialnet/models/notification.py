from sqlalchemy import Column, Integer, Boolean, ForeignKey, TIMESTAMP, Enum, Index
from sqlalchemy.orm import relationship
from socialnet.database import Base
from socialnet.utils.clock import utcnow
import enum


class NotificationType(str, enum.Enum):
    FOLLOW = "follow"
    POST_LIKE = "post_like"
    POST_COMMENT = "post_comment"
    COMMENT_LIKE = "comment_like"
    COMMENT_REPLY = "comment_reply"
    MESSAGE = "message"


class Notification(Base):
    __tablename__ = "notifications"
    __table_args__ = (
        Index("ix_notifications_dedup", "type", "recipient_id", "actor_id", "created_at"),
    )

    id = Column(Integer, primary_key=True, index=True)
    type = Column(Enum(NotificationType), nullable=False)
    recipient_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    actor_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    # Subjects belong to the posts/comments services; no FK across that boundary.
    post_id = Column(Integer, nullable=True)
    comment_id = Column(Integer, nullable=True)
    is_read = Column(Boolean, default=False, nullable=False)
    created_at = Column(TIMESTAMP, default=utcnow, nullable=False)

    actor = relationship("User", foreign_keys=[actor_id])
