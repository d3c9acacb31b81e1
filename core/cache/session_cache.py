"""Chat Session Cache - mentor conversations keyed by user and conversation."""
import logging
import re
import threading
import time
from typing import List, Optional, Sequence, Tuple

from core.cache.models import ChatMessage, ChatSession, ConversationSummary, ROLES, utc_now_iso
from core.cache.session_store import SessionStore, InMemorySessionStore, RedisSessionStore
from core.config_loader import SessionConfig
from core.exceptions import (
    InvalidMessageException,
    InvalidSessionIdException,
    SessionNotFoundException,
    SessionStoreException
)

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 12
DEFAULT_MAX_MESSAGE_CHARS = 2000
CONVERSATION_LIST_LIMIT = 20
KEY_PREFIX = "chat"

# Ids become key segments: no ":" separator and no glob metacharacters.
SESSION_ID_PATTERN = r"^[A-Za-z0-9_.@+-]{1,128}$"
_SESSION_ID_RE = re.compile(SESSION_ID_PATTERN)


def validate_session_id(name: str, value: Optional[str]) -> str:
    if not isinstance(value, str) or not _SESSION_ID_RE.match(value):
        raise InvalidSessionIdException(
            f"Invalid {name}: {value!r}. Use letters, digits and _ . @ + - (max 128)"
        )
    return value


class ChatSessionCache:
    """
    Explicit cache of chat sessions over an injected SessionStore.

    New sessions are seeded with the most recent non-system messages of an
    existing history (at most `history_limit`). Read-modify-write goes
    through `store.update` under a cache lock, so concurrent appends to one
    conversation are never lost.
    """

    def __init__(
        self,
        store: SessionStore,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
        max_message_chars: int = DEFAULT_MAX_MESSAGE_CHARS
    ):
        self.store = store
        self.history_limit = history_limit
        self.max_message_chars = max_message_chars
        self._lock = threading.RLock()

    @staticmethod
    def make_key(user_id: str, conversation_id: str) -> str:
        validate_session_id("user_id", user_id)
        validate_session_id("conversation_id", conversation_id)
        return f"{KEY_PREFIX}:{user_id}:{conversation_id}"

    @staticmethod
    def user_prefix(user_id: str) -> str:
        validate_session_id("user_id", user_id)
        return f"{KEY_PREFIX}:{user_id}:"

    @staticmethod
    def new_conversation_id(user_id: str) -> str:
        return f"conv_{user_id[:64]}_{int(time.time() * 1000)}"

    def sanitize_text(self, text: Optional[str]) -> str:
        """Trim and truncate message text. Blank text is rejected."""
        if not isinstance(text, str) or not text.strip():
            raise InvalidMessageException("Message text is required")
        return text.strip()[:self.max_message_chars]

    def _seed(self, history: Optional[Sequence[ChatMessage]]) -> List[ChatMessage]:
        if self.history_limit <= 0:
            return []
        seeded = [m for m in (history or []) if m.role != "system"]
        return seeded[-self.history_limit:]

    def get(self, user_id: str, conversation_id: str) -> Optional[ChatSession]:
        return self.store.get(self.make_key(user_id, conversation_id))

    def require(self, user_id: str, conversation_id: str) -> ChatSession:
        session = self.get(user_id, conversation_id)
        if session is None:
            raise SessionNotFoundException(
                f"Conversation {conversation_id} not found for user {user_id}"
            )
        return session

    def get_or_create(
        self,
        user_id: str,
        conversation_id: Optional[str] = None,
        system_prompt: str = "",
        history: Optional[Sequence[ChatMessage]] = None
    ) -> ChatSession:
        conversation_id = conversation_id or self.new_conversation_id(user_id)
        key = self.make_key(user_id, conversation_id)

        def _create_if_missing(session: Optional[ChatSession]) -> ChatSession:
            if session is not None:
                return session
            seeded = self._seed(history)
            logger.info(f"Created chat session {key} with {len(seeded)} history messages")
            return ChatSession(
                user_id=user_id,
                conversation_id=conversation_id,
                system_prompt=system_prompt,
                messages=list(seeded)
            )

        with self._lock:
            return self.store.update(key, _create_if_missing)

    def append(self, user_id: str, conversation_id: str, role: str, text: str) -> ChatSession:
        """Add a message, creating the session when it does not exist yet."""
        if role not in ROLES:
            raise InvalidMessageException(f"Unknown role: {role}. Must be one of {', '.join(ROLES)}")
        clean_text = self.sanitize_text(text)
        key = self.make_key(user_id, conversation_id)

        def _add_message(session: Optional[ChatSession]) -> ChatSession:
            if session is None:
                session = ChatSession(user_id=user_id, conversation_id=conversation_id)
            session.messages.append(ChatMessage(role=role, text=clean_text))
            session.updated_at = utc_now_iso()
            return session

        with self._lock:
            return self.store.update(key, _add_message)

    def history(
        self,
        user_id: str,
        conversation_id: str,
        page: int = 1,
        limit: int = 50
    ) -> Tuple[List[ChatMessage], int]:
        """Oldest-first page of messages and the total message count."""
        session = self.require(user_id, conversation_id)
        start = (max(page, 1) - 1) * limit
        return session.messages[start:start + limit], len(session.messages)

    def list_conversations(self, user_id: str) -> List[ConversationSummary]:
        """Most recently active conversations first."""
        summaries = []
        for key in self.store.keys(self.user_prefix(user_id)):
            session = self.store.get(key)
            if session is None:
                continue
            summaries.append(ConversationSummary(
                conversation_id=session.conversation_id,
                message_count=len(session.messages),
                last_message_at=session.last_message_at or session.created_at
            ))

        summaries.sort(key=lambda s: s.last_message_at or "", reverse=True)
        return summaries[:CONVERSATION_LIST_LIMIT]

    def clear(self, user_id: str, conversation_id: Optional[str] = None) -> int:
        """Delete one conversation, or all of a user's conversations. Returns the count."""
        if conversation_id:
            deleted = 1 if self.store.delete(self.make_key(user_id, conversation_id)) else 0
        else:
            deleted = sum(1 for key in self.store.keys(self.user_prefix(user_id)) if self.store.delete(key))

        logger.info(f"Cleared {deleted} chat session(s) for user {user_id}")
        return deleted


def build_session_store(config: SessionConfig) -> SessionStore:
    """Select the configured store backend."""
    if config.backend == "redis":
        if not config.redis_url:
            raise SessionStoreException("sessions.redis_url is required for the redis backend")
        return RedisSessionStore(redis_url=config.redis_url, ttl_seconds=config.ttl_seconds)
    return InMemorySessionStore()


def build_session_cache(config: SessionConfig, store: Optional[SessionStore] = None) -> ChatSessionCache:
    return ChatSessionCache(
        store or build_session_store(config),
        history_limit=config.history_limit,
        max_message_chars=config.max_message_chars
    )
