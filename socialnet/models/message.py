# socialnet/models/message.py
from sqlalchemy import (
    Column,
    Integer,
    BigInteger,
    String,
    Text,
    Boolean,
    ForeignKey,
    TIMESTAMP,
    Enum,
    Index,
)
from socialnet.database import Base
from socialnet.utils.clock import utcnow
import enum


class MessageKind(str, enum.Enum):
    TEXT = "text"
    POST_SHARE = "post-share"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"


MEDIA_KINDS = frozenset({MessageKind.IMAGE, MessageKind.VIDEO, MessageKind.AUDIO})

TOMBSTONE_CONTENT = "This message was deleted"


class Message(Base):
    __tablename__ = "messages"
    __table_args__ = (
        Index("ix_messages_sender_receiver", "sender_id", "receiver_id"),
    )

    id = Column(Integer, primary_key=True, index=True)
    sender_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    receiver_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    conversation_id = Column(String(64), nullable=False, index=True)
    content = Column(Text, nullable=False)
    kind = Column(Enum(MessageKind), default=MessageKind.TEXT, nullable=False)
    shared_post_id = Column(Integer, nullable=True)

    # Attachment (only for media kinds)
    file_url = Column(Text, nullable=True)
    file_type = Column(String(100), nullable=True)
    file_size = Column(BigInteger, nullable=True)

    is_read = Column(Boolean, default=False, nullable=False)
    is_deleted = Column(Boolean, default=False, nullable=False)
    is_edited = Column(Boolean, default=False, nullable=False)
    edited_at = Column(TIMESTAMP, nullable=True)
    created_at = Column(TIMESTAMP, default=utcnow, nullable=False, index=True)
    updated_at = Column(TIMESTAMP, default=utcnow, onupdate=utcnow, nullable=False)

    @property
    def attachment(self):
        if self.file_url is None:
            return None
        return {
            "url": self.file_url,
            "mime_type": self.file_type,
            "byte_size": self.file_size,
        }

    @property
    def has_media(self) -> bool:
        return self.kind in MEDIA_KINDS and bool(self.file_url)
