# socialnet/models/__init__.py
# Import models in dependency order
from .user import User
from .message import Message, MessageKind
from .notification import Notification, NotificationType

__all__ = ["User", "Message", "MessageKind", "Notification", "NotificationType"]
