"""Ports (interfaces) the messaging core depends on.

Feature services and the messaging service receive these at construction
time, so the notification engine never has to know about its callers.
"""

from __future__ import annotations

from typing import Optional, Protocol

from socialnet.models.notification import Notification
from socialnet.models.user import User


class UserDirectory(Protocol):
    """Read-only lookup of users owned by the users service."""

    def find_by_id(self, user_id: int) -> Optional[User]:
        ...


class AssetStore(Protocol):
    """Media storage; deletions are best-effort from the caller's side."""

    def delete_by_path(self, path: str) -> None:
        ...


class Notifier(Protocol):
    """Typed notification triggers handed to every feature that emits events."""

    def follow(self, follower_id: int, followed_user_id: int) -> Optional[Notification]:
        ...

    def post_like(self, liker_id: int, post_author_id: int, post_id: int) -> Optional[Notification]:
        ...

    def post_comment(
        self, commenter_id: int, post_author_id: int, post_id: int, comment_id: int
    ) -> Optional[Notification]:
        ...

    def comment_like(
        self, liker_id: int, comment_author_id: int, comment_id: int, post_id: Optional[int] = None
    ) -> Optional[Notification]:
        ...

    def comment_reply(
        self,
        replier_id: int,
        parent_comment_author_id: int,
        comment_id: int,
        post_id: Optional[int] = None,
    ) -> Optional[Notification]:
        ...

    def message(self, sender_id: int, receiver_id: int) -> Optional[Notification]:
        ...
