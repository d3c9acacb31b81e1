#!/usr/bin/env python3
"""
Session service - chat session history on top of ChatSessionCache.
"""

import logging
import math
from typing import Optional

from core.cache import ChatSessionCache, ChatMessage
from ..models.requests import MessageRequest
from ..models.responses import (
    MessageModel,
    ConversationModel,
    Pagination,
    SessionHistoryResponse,
    ConversationsResponse,
    MessageResponse,
    ClearSessionsResponse
)

logger = logging.getLogger(__name__)


def to_message_model(message: ChatMessage) -> MessageModel:
    return MessageModel(role=message.role, text=message.text, created_at=message.created_at)


class SessionService:
    """Service for managing chat sessions."""

    def __init__(self, cache: ChatSessionCache):
        self.cache = cache

    def list_conversations(self, user_id: str) -> ConversationsResponse:
        conversations = self.cache.list_conversations(user_id)
        return ConversationsResponse(
            success=True,
            conversations=[
                ConversationModel(
                    conversation_id=c.conversation_id,
                    message_count=c.message_count,
                    last_message_at=c.last_message_at
                )
                for c in conversations
            ]
        )

    def get_history(
        self,
        user_id: str,
        conversation_id: str,
        page: int = 1,
        limit: int = 50
    ) -> SessionHistoryResponse:
        """
        Raises:
            SessionNotFoundException: If the conversation does not exist.
        """
        messages, total = self.cache.history(user_id, conversation_id, page=page, limit=limit)
        return SessionHistoryResponse(
            success=True,
            conversation_id=conversation_id,
            messages=[to_message_model(m) for m in messages],
            pagination=Pagination(
                page=page,
                limit=limit,
                total=total,
                pages=math.ceil(total / limit) if limit else 0
            )
        )

    def add_message(self, user_id: str, request: MessageRequest) -> MessageResponse:
        """
        Raises:
            InvalidMessageException: If the text is blank or the role unknown.
        """
        conversation_id = request.conversation_id or self.cache.new_conversation_id(user_id)
        session = self.cache.append(user_id, conversation_id, request.role, request.text)
        return MessageResponse(
            success=True,
            conversation_id=session.conversation_id,
            message=to_message_model(session.messages[-1]),
            message_count=len(session.messages)
        )

    def clear(self, user_id: str, conversation_id: Optional[str] = None) -> ClearSessionsResponse:
        deleted = self.cache.clear(user_id, conversation_id)
        return ClearSessionsResponse(
            success=True,
            deleted_count=deleted,
            message=(
                "Conversation cleared successfully" if conversation_id
                else "All conversations cleared successfully"
            )
        )
