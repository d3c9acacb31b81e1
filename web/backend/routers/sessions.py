#!/usr/bin/env python3
"""
Session endpoints - chat conversation history per user.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Path, Query

from core.cache import SESSION_ID_PATTERN

from ..dependencies import get_session_service
from ..services.session_service import SessionService
from ..models.requests import MessageRequest, ClearSessionsRequest
from ..models.responses import (
    ConversationsResponse,
    SessionHistoryResponse,
    MessageResponse,
    ClearSessionsResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


@router.get("/{user_id}", response_model=ConversationsResponse)
def list_conversations(
    user_id: str = Path(..., pattern=SESSION_ID_PATTERN),
    service: SessionService = Depends(get_session_service)
):
    """List a user's conversations, most recently active first."""
    return service.list_conversations(user_id)


@router.get("/{user_id}/{conversation_id}", response_model=SessionHistoryResponse)
def get_history(
    user_id: str = Path(..., pattern=SESSION_ID_PATTERN),
    conversation_id: str = Path(..., pattern=SESSION_ID_PATTERN),
    page: int = Query(default=1, ge=1, description="Page number"),
    limit: int = Query(default=50, ge=1, le=200, description="Messages per page"),
    service: SessionService = Depends(get_session_service)
):
    """
    Get one conversation's messages, paginated.

    Responds 404 if the conversation does not exist.
    """
    return service.get_history(user_id, conversation_id, page=page, limit=limit)


@router.post("/{user_id}/messages", response_model=MessageResponse)
def add_message(
    body: MessageRequest,
    user_id: str = Path(..., pattern=SESSION_ID_PATTERN),
    service: SessionService = Depends(get_session_service)
):
    """
    Append a message to a conversation.

    A new conversation is started when conversation_id is omitted.
    """
    return service.add_message(user_id, body)


@router.post("/{user_id}/clear", response_model=ClearSessionsResponse)
def clear_sessions(
    user_id: str = Path(..., pattern=SESSION_ID_PATTERN),
    body: Optional[ClearSessionsRequest] = None,
    service: SessionService = Depends(get_session_service)
):
    """Clear one conversation, or all of the user's conversations."""
    conversation_id = body.conversation_id if body else None
    logger.info(f"Clearing sessions for {user_id}")
    return service.clear(user_id, conversation_id)
