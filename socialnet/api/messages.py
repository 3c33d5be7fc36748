# socialnet/api/messages.py
"""
Direct Messages API Router

Endpoints:
- POST /messages - Send a message
- GET /messages/conversations - Conversation list for the current user
- GET /messages/conversations/{other_user_id} - Thread (marks it read)
- GET /messages/unread-count - Unread direct messages
- POST /messages/{message_id}/read - Mark one message read
- PUT /messages/{message_id} - Edit a text message
- DELETE /messages/{message_id} - Delete (tombstone) a message
"""

from fastapi import APIRouter, Depends, status
from typing import List

from socialnet.api.deps import get_messaging_service
from socialnet.models.user import User
from socialnet.schemas.message import (
    ConversationSummary,
    MessageCreate,
    MessageResponse,
    MessageUpdate,
    ThreadResponse,
    UnreadCountResponse,
)
from socialnet.services.messaging_service import MessagingService
from socialnet.utils.security import get_current_user

router = APIRouter(prefix="/messages", tags=["messages"])


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def send_message(
    payload: MessageCreate,
    current_user: User = Depends(get_current_user),
    service: MessagingService = Depends(get_messaging_service),
):
    message = service.send(
        current_user.id,
        payload.receiver_id,
        payload.content,
        payload.kind,
        shared_post_id=payload.shared_post_id,
        attachment=payload.attachment,
    )
    return MessageResponse.model_validate(message)


@router.get("/conversations", response_model=List[ConversationSummary])
def get_conversations(
    current_user: User = Depends(get_current_user),
    service: MessagingService = Depends(get_messaging_service),
):
    return service.list_conversations(current_user.id)


@router.get("/conversations/{other_user_id}", response_model=ThreadResponse)
def get_thread(
    other_user_id: int,
    current_user: User = Depends(get_current_user),
    service: MessagingService = Depends(get_messaging_service),
):
    """Fetch a thread. Messages addressed to the caller are marked read."""
    return service.get_thread(current_user.id, other_user_id)


@router.get("/unread-count", response_model=UnreadCountResponse)
def get_unread_count(
    current_user: User = Depends(get_current_user),
    service: MessagingService = Depends(get_messaging_service),
):
    return UnreadCountResponse(count=service.unread_count(current_user.id))


@router.post("/{message_id}/read", response_model=MessageResponse)
def mark_message_read(
    message_id: int,
    current_user: User = Depends(get_current_user),
    service: MessagingService = Depends(get_messaging_service),
):
    return MessageResponse.model_validate(service.mark_as_read(message_id, current_user.id))


@router.put("/{message_id}", response_model=MessageResponse)
def edit_message(
    message_id: int,
    payload: MessageUpdate,
    current_user: User = Depends(get_current_user),
    service: MessagingService = Depends(get_messaging_service),
):
    return MessageResponse.model_validate(
        service.edit(message_id, current_user.id, payload.content)
    )


@router.delete("/{message_id}", response_model=MessageResponse)
def delete_message(
    message_id: int,
    current_user: User = Depends(get_current_user),
    service: MessagingService = Depends(get_messaging_service),
):
    return MessageResponse.model_validate(service.delete(message_id, current_user.id))
