"""Session Stores - pluggable storage behind the chat session cache."""
import json
import logging
import re
import threading
from typing import Callable, Dict, List, Optional, Protocol, runtime_checkable
from urllib.parse import urlparse

from redis import Redis
from redis.exceptions import RedisError

from core.cache.models import ChatSession
from core.exceptions import SessionStoreException

logger = logging.getLogger(__name__)

# 1 day in seconds
SESSION_TTL_SECONDS = 24 * 60 * 60

# Receives the stored session (None when absent) and returns the session to store.
# May run more than once when a Redis transaction is retried.
SessionMutator = Callable[[Optional[ChatSession]], ChatSession]

_GLOB_CHARS = re.compile(r"([*?\[\]\\])")


def _escape_glob(text: str) -> str:
    """Escape Redis SCAN/KEYS glob metacharacters."""
    return _GLOB_CHARS.sub(r"\\\1", text)


def _sanitize_url(url: str) -> str:
    """Remove credentials from URL for safe logging."""
    try:
        parsed = urlparse(url)
        if parsed.password:
            sanitized = parsed._replace(
                netloc=f"{parsed.username or ''}:*@{parsed.hostname}:{parsed.port or 6379}"
            )
            return sanitized.geturl()
        return url
    except ValueError:
        return url


@runtime_checkable
class SessionStore(Protocol):
    """Key/value storage for chat sessions."""

    def get(self, key: str) -> Optional[ChatSession]: ...

    def set(self, key: str, session: ChatSession) -> None: ...

    def delete(self, key: str) -> bool: ...

    def keys(self, prefix: str) -> List[str]: ...

    def update(self, key: str, mutate: SessionMutator) -> ChatSession: ...


class InMemorySessionStore:
    """Process-local store. Sessions are copied in and out so callers never share state."""

    def __init__(self):
        self._data: Dict[str, dict] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[ChatSession]:
        with self._lock:
            data = self._data.get(key)
        if data is None:
            return None
        return ChatSession.from_dict(data)

    def set(self, key: str, session: ChatSession) -> None:
        data = session.to_dict()
        with self._lock:
            self._data[key] = data

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._data.pop(key, None) is not None

    def keys(self, prefix: str) -> List[str]:
        with self._lock:
            return [k for k in self._data if k.startswith(prefix)]

    def update(self, key: str, mutate: SessionMutator) -> ChatSession:
        """Read, change and write one session while holding the store lock."""
        with self._lock:
            data = self._data.get(key)
            session = mutate(ChatSession.from_dict(data) if data is not None else None)
            data = session.to_dict()
            self._data[key] = data
        return ChatSession.from_dict(data)


class RedisSessionStore:
    """
    Redis-backed store. Sessions are JSON payloads with a TTL that is
    refreshed on every write.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379/0",
        password: Optional[str] = None,
        ttl_seconds: int = SESSION_TTL_SECONDS,
        client: Optional[Redis] = None
    ):
        self.redis_url = redis_url
        self.ttl_seconds = ttl_seconds
        if client is not None:
            self._redis = client
        else:
            self._redis = Redis.from_url(
                redis_url,
                password=password,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5
            )
        logger.info(f"Session store using Redis at {_sanitize_url(redis_url)}")

    @property
    def is_available(self) -> bool:
        try:
            return bool(self._redis.ping())
        except RedisError:
            return False

    def get(self, key: str) -> Optional[ChatSession]:
        try:
            data = self._redis.get(key)
        except RedisError as e:
            raise SessionStoreException(f"Error reading session {key}: {e}") from e

        if not data:
            logger.debug(f"Session miss for {key}")
            return None
        return ChatSession.from_dict(json.loads(data))

    def set(self, key: str, session: ChatSession) -> None:
        try:
            self._redis.setex(key, self.ttl_seconds, json.dumps(session.to_dict()))
        except RedisError as e:
            raise SessionStoreException(f"Error writing session {key}: {e}") from e

    def delete(self, key: str) -> bool:
        try:
            return bool(self._redis.delete(key))
        except RedisError as e:
            raise SessionStoreException(f"Error deleting session {key}: {e}") from e

    def keys(self, prefix: str) -> List[str]:
        try:
            found = []
            cursor = 0
            while True:
                cursor, keys = self._redis.scan(cursor=cursor, match=f"{_escape_glob(prefix)}*", count=100)
                found.extend(keys)
                if cursor == 0:
                    break
            return found
        except RedisError as e:
            raise SessionStoreException(f"Error scanning sessions {prefix}*: {e}") from e

    def update(self, key: str, mutate: SessionMutator) -> ChatSession:
        """
        Optimistic read-modify-write: WATCH the key, apply `mutate`, then
        write in MULTI/EXEC. redis-py retries when another client touched
        the key in between.
        """
        def _apply(pipe) -> ChatSession:
            data = pipe.get(key)
            session = mutate(ChatSession.from_dict(json.loads(data)) if data else None)
            pipe.multi()
            pipe.setex(key, self.ttl_seconds, json.dumps(session.to_dict()))
            return session

        try:
            return self._redis.transaction(_apply, key, value_from_callable=True)
        except RedisError as e:
            raise SessionStoreException(f"Error updating session {key}: {e}") from e
