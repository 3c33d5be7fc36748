# socialnet/services/messaging_service.py
"""
Messaging Service Layer
Send/read/edit/delete for direct messages between two users.

Message lifecycle:
    Sent -> Read (receiver only, one-way)
    Sent/Read -> Edited (sender only, text, inside the edit window)
    any -> Deleted (sender only, terminal; content replaced by a tombstone)
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Callable, Dict, List, Optional

from sqlalchemy.orm import Session

from socialnet.config import settings
from socialnet.crud import message as message_crud
from socialnet.exceptions import ForbiddenError, NotFoundError, RejectedError
from socialnet.models.message import (
    MEDIA_KINDS,
    TOMBSTONE_CONTENT,
    Message,
    MessageKind,
)
from socialnet.schemas.message import (
    Attachment,
    ConversationSummary,
    LastMessage,
    MessageResponse,
    ThreadMessage,
    ThreadResponse,
    UserBrief,
)
from socialnet.services.ports import AssetStore, Notifier, UserDirectory
from socialnet.utils.clock import utcnow
from socialnet.utils.conversation import canonical_pair

logger = logging.getLogger(__name__)


class MessagingService:
    def __init__(
        self,
        db: Session,
        *,
        users: UserDirectory,
        assets: AssetStore,
        notifier: Notifier,
        clock: Callable[[], datetime] = utcnow,
        edit_window: Optional[timedelta] = None,
        max_attachment_bytes: Optional[int] = None,
    ):
        self.db = db
        self.users = users
        self.assets = assets
        self.notifier = notifier
        self.clock = clock
        self.edit_window = (
            edit_window if edit_window is not None
            else timedelta(minutes=settings.MESSAGE_EDIT_WINDOW_MINUTES)
        )
        self.max_attachment_bytes = (
            max_attachment_bytes if max_attachment_bytes is not None
            else settings.MAX_ATTACHMENT_BYTES
        )

    # ======================
    # SEND
    # ======================

    def send(
        self,
        sender_id: int,
        receiver_id: int,
        content: str,
        kind: MessageKind = MessageKind.TEXT,
        *,
        shared_post_id: Optional[int] = None,
        attachment: Optional[Attachment] = None,
    ) -> Message:
        """
        Persist a message and notify the receiver.

        Raises:
            NotFoundError: Receiver does not exist
            RejectedError: Self-message, missing share metadata or oversized attachment
        """
        kind = MessageKind(kind)

        receiver = self.users.find_by_id(receiver_id)
        if not receiver:
            raise NotFoundError("Receiver not found")

        if sender_id == receiver_id:
            raise RejectedError("Cannot send a message to yourself")

        if kind in MEDIA_KINDS:
            if attachment is None:
                raise RejectedError("Attachment required for media messages")
            if attachment.byte_size > self.max_attachment_bytes:
                limit_mb = self.max_attachment_bytes // (1024 * 1024)
                raise RejectedError(f"File too large: attachments must not exceed {limit_mb}MB")
        else:
            attachment = None

        if kind == MessageKind.POST_SHARE:
            if shared_post_id is None:
                raise RejectedError("Shared post required for post-share messages")
        else:
            shared_post_id = None

        message = message_crud.create_message(
            self.db,
            sender_id=sender_id,
            receiver_id=receiver_id,
            conversation_id=canonical_pair(sender_id, receiver_id),
            content=content,
            kind=kind,
            shared_post_id=shared_post_id,
            file_url=attachment.url if attachment else None,
            file_type=attachment.mime_type if attachment else None,
            file_size=attachment.byte_size if attachment else None,
            created_at=self.clock(),
        )
        self.db.commit()
        self.db.refresh(message)

        self._notify_receiver(message)
        return message

    def _notify_receiver(self, message: Message) -> None:
        """Best-effort notification that must not undo a committed send."""
        sender_id, receiver_id, message_id = message.sender_id, message.receiver_id, message.id
        try:
            self.notifier.message(sender_id, receiver_id)
        except Exception as exc:
            self.db.rollback()
            logger.warning(
                "Message notification failed (message_id=%s, receiver_id=%s): %s",
                message_id,
                receiver_id,
                exc,
            )

    # ======================
    # CONVERSATIONS
    # ======================

    def list_conversations(self, user_id: int) -> List[ConversationSummary]:
        """
        One summary per conversation, built from its latest message.

        Conversations whose other participant no longer resolves are dropped.
        Sorted by latest activity, ties broken by conversation_id.
        """
        latest: Dict[str, Message] = {}
        for message in message_crud.list_user_messages(self.db, user_id):
            # Rows arrive newest first, so the first one seen wins.
            latest.setdefault(message.conversation_id, message)

        summaries = []
        for conversation_id, last in latest.items():
            other_id = last.receiver_id if last.sender_id == user_id else last.sender_id
            other_user = self.users.find_by_id(other_id)
            if not other_user:
                continue
            summaries.append(ConversationSummary(
                conversation_id=conversation_id,
                other_user=UserBrief.model_validate(other_user),
                last_message=LastMessage.model_validate(last),
                unread_count=message_crud.count_conversation_unread(self.db, conversation_id, user_id),
                updated_at=last.created_at,
            ))

        summaries.sort(key=lambda s: s.conversation_id)
        summaries.sort(key=lambda s: s.updated_at, reverse=True)
        return summaries

    def get_thread(self, user_id: int, other_user_id: int) -> ThreadResponse:
        """
        Return the conversation with other_user_id, oldest message first.

        Not a pure read: every unread message addressed to user_id in the
        thread is marked read while serving it. A second call reports
        unread_count == 0.
        """
        other_user = self.users.find_by_id(other_user_id)
        if not other_user:
            raise NotFoundError("User not found")
        if other_user_id == user_id:
            raise RejectedError("Cannot open a conversation with yourself")
        current_user = self.users.find_by_id(user_id)
        if not current_user:
            raise NotFoundError("User not found")

        conversation_id = canonical_pair(user_id, other_user_id)
        messages = message_crud.list_conversation_messages(self.db, conversation_id)
        flipped = self.mark_thread_read(conversation_id, user_id)
        if flipped:
            messages = message_crud.list_conversation_messages(self.db, conversation_id)

        briefs = {
            user_id: UserBrief.model_validate(current_user),
            other_user_id: UserBrief.model_validate(other_user),
        }
        return ThreadResponse(
            other_user=briefs[other_user_id],
            messages=[
                ThreadMessage(
                    **MessageResponse.model_validate(m).model_dump(),
                    sender=briefs[m.sender_id],
                    receiver=briefs[m.receiver_id],
                )
                for m in messages
            ],
            unread_count=flipped,
        )

    def mark_thread_read(self, conversation_id: str, receiver_id: int) -> int:
        flipped = message_crud.mark_conversation_read(
            self.db, conversation_id, receiver_id, updated_at=self.clock()
        )
        self.db.commit()
        if flipped:
            logger.debug(
                "Marked %s messages read (conversation_id=%s, receiver_id=%s)",
                flipped,
                conversation_id,
                receiver_id,
            )
        return flipped

    # ======================
    # SINGLE MESSAGE MUTATIONS
    # ======================

    def _get_or_404(self, message_id: int) -> Message:
        message = message_crud.get_message(self.db, message_id)
        if not message:
            raise NotFoundError("Message not found")
        return message

    def mark_as_read(self, message_id: int, user_id: int) -> Message:
        message = self._get_or_404(message_id)
        if message.receiver_id != user_id:
            raise ForbiddenError("Cannot mark this message as read")
        if not message.is_read:
            message.is_read = True
            message.updated_at = self.clock()
            self.db.commit()
            self.db.refresh(message)
        return message

    def edit(self, message_id: int, user_id: int, new_content: str) -> Message:
        """
        Replace the content of the caller's own message.

        Kind and attachment are left untouched.

        Raises:
            NotFoundError: Message does not exist
            ForbiddenError: Not the sender, message deleted, or edit window expired
        """
        message = self._get_or_404(message_id)
        if message.sender_id != user_id:
            raise ForbiddenError("You can only edit your own messages")
        if message.is_deleted:
            raise ForbiddenError("Cannot edit deleted message")

        now = self.clock()
        if now - message.created_at > self.edit_window:
            minutes = int(self.edit_window.total_seconds() // 60)
            raise ForbiddenError(f"Edit window expired: messages can only be edited within {minutes} minutes")

        message.content = new_content
        message.is_edited = True
        message.edited_at = now
        message.updated_at = now
        self.db.commit()
        self.db.refresh(message)
        return message

    def delete(self, message_id: int, user_id: int) -> Message:
        """Tombstone the caller's own message. Deleting twice changes nothing."""
        message = self._get_or_404(message_id)
        if message.sender_id != user_id:
            raise ForbiddenError("You can only delete your own messages")
        if message.is_deleted:
            return message

        if message.has_media:
            try:
                self.assets.delete_by_path(message.file_url)
            except Exception as exc:
                logger.warning(
                    "Asset cleanup failed (message_id=%s, path=%s): %s",
                    message.id,
                    message.file_url,
                    exc,
                )

        message.is_deleted = True
        message.content = TOMBSTONE_CONTENT
        message.kind = MessageKind.TEXT
        message.shared_post_id = None
        message.file_url = None
        message.file_type = None
        message.file_size = None
        message.updated_at = self.clock()
        self.db.commit()
        self.db.refresh(message)
        return message

    def unread_count(self, user_id: int) -> int:
        return message_crud.count_unread(self.db, user_id)
