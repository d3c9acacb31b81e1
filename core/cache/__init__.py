"""Cache Module - chat session caching."""
from core.cache.models import ChatMessage, ChatSession, ConversationSummary
from core.cache.session_store import (
    SessionStore,
    InMemorySessionStore,
    RedisSessionStore,
    SESSION_TTL_SECONDS
)
from core.cache.session_cache import (
    ChatSessionCache,
    SESSION_ID_PATTERN,
    validate_session_id,
    build_session_store,
    build_session_cache
)

__all__ = [
    'ChatMessage',
    'ChatSession',
    'ConversationSummary',
    'SessionStore',
    'InMemorySessionStore',
    'RedisSessionStore',
    'SESSION_TTL_SECONDS',
    'ChatSessionCache',
    'SESSION_ID_PATTERN',
    'validate_session_id',
    'build_session_store',
    'build_session_cache'
]
