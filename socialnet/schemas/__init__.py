# socialnet/schemas/__init__.py

# Message schemas
from .message import (
    UserBrief,
    Attachment,
    MessageCreate,
    MessageUpdate,
    MessageResponse,
    ThreadMessage,
    ThreadResponse,
    LastMessage,
    ConversationSummary,
    UnreadCountResponse,
)

# Notification schemas
from .notification import (
    NotificationResponse,
    NotificationPageResponse,
    SuccessResponse,
)

__all__ = [
    "UserBrief",
    "Attachment",
    "MessageCreate",
    "MessageUpdate",
    "MessageResponse",
    "ThreadMessage",
    "ThreadResponse",
    "LastMessage",
    "ConversationSummary",
    "UnreadCountResponse",
    "NotificationResponse",
    "NotificationPageResponse",
    "SuccessResponse",
]
