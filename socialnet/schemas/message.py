# socialnet/schemas/message.py
"""
Direct Message Pydantic Schemas
Request/response models for the messages API
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional
from datetime import datetime

from socialnet.models.message import MessageKind


# ======================
# SHARED
# ======================

class UserBrief(BaseModel):
    """Display identity of a user"""
    id: int
    username: str
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class Attachment(BaseModel):
    url: str = Field(..., min_length=1)
    mime_type: str = Field(..., min_length=1)
    byte_size: int = Field(..., ge=0, description="Attachment size in bytes")


# ======================
# REQUESTS
# ======================

class MessageCreate(BaseModel):
    """Schema for sending a message"""
    receiver_id: int
    content: str = Field(..., min_length=1)
    kind: MessageKind = MessageKind.TEXT
    shared_post_id: Optional[int] = None
    attachment: Optional[Attachment] = None

    @field_validator("content")
    @classmethod
    def validate_content(cls, v):
        if v.strip() == "":
            raise ValueError("Message content cannot be empty")
        return v


class MessageUpdate(BaseModel):
    """Schema for editing a text message"""
    content: str = Field(..., min_length=1)

    @field_validator("content")
    @classmethod
    def validate_content(cls, v):
        if v.strip() == "":
            raise ValueError("Message content cannot be empty")
        return v


# ======================
# RESPONSES
# ======================

class MessageResponse(BaseModel):
    id: int
    sender_id: int
    receiver_id: int
    conversation_id: str
    content: str
    kind: MessageKind
    shared_post_id: Optional[int] = None
    attachment: Optional[Attachment] = None
    is_read: bool
    is_deleted: bool
    is_edited: bool
    edited_at: Optional[datetime] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ThreadMessage(MessageResponse):
    """Message as shown inside a thread, with both participants embedded"""
    sender: UserBrief
    receiver: UserBrief


class ThreadResponse(BaseModel):
    other_user: UserBrief
    messages: List[ThreadMessage]
    unread_count: int = Field(..., description="Messages this read marked as read")


class LastMessage(BaseModel):
    id: int
    content: str
    kind: MessageKind
    sender_id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ConversationSummary(BaseModel):
    conversation_id: str
    other_user: UserBrief
    last_message: LastMessage
    unread_count: int
    updated_at: datetime


class UnreadCountResponse(BaseModel):
    count: int
