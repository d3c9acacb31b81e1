"""
Tests for the chat session cache.

Runs against the in-memory store.
"""
import threading
import time

import pytest
from unittest.mock import patch

from core.cache import (
    ChatMessage,
    ChatSession,
    ChatSessionCache,
    InMemorySessionStore,
    RedisSessionStore,
    build_session_store,
    build_session_cache,
    validate_session_id
)
from core.config_loader import SessionConfig
from core.exceptions import (
    InvalidMessageException,
    InvalidSessionIdException,
    SessionNotFoundException,
    SessionStoreException
)


class TestChatSessionCache:
    """Test suite for ChatSessionCache."""

    @pytest.fixture
    def store(self):
        return InMemorySessionStore()

    @pytest.fixture
    def cache(self, store):
        return ChatSessionCache(store, history_limit=2, max_message_chars=10)

    def test_01_keys(self):
        assert ChatSessionCache.make_key("u1", "c1") == "chat:u1:c1"
        assert ChatSessionCache.user_prefix("u1") == "chat:u1:"
        assert ChatSessionCache.new_conversation_id("u1").startswith("conv_u1_")

    def test_02_append_creates_session(self, cache, store):
        session = cache.append("u1", "c1", "user", "  hello  ")

        assert session.conversation_id == "c1"
        assert [(m.role, m.text) for m in session.messages] == [("user", "hello")]
        assert store.get("chat:u1:c1") is not None

    def test_03_append_accumulates(self, cache):
        cache.append("u1", "c1", "user", "hi")
        session = cache.append("u1", "c1", "assistant", "hello")

        assert [m.role for m in session.messages] == ["user", "assistant"]
        assert len(cache.require("u1", "c1").messages) == 2

    def test_04_text_is_truncated(self, cache):
        session = cache.append("u1", "c1", "user", "x" * 50)
        assert session.messages[0].text == "x" * 10

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_05_blank_text_rejected(self, cache, text):
        with pytest.raises(InvalidMessageException):
            cache.append("u1", "c1", "user", text)

    def test_06_unknown_role_rejected(self, cache):
        with pytest.raises(InvalidMessageException, match="Unknown role"):
            cache.append("u1", "c1", "robot", "hi")

    def test_07_seeded_history_skips_system_and_is_limited(self, cache):
        history = [
            ChatMessage(role="system", text="be nice"),
            ChatMessage(role="user", text="one"),
            ChatMessage(role="assistant", text="two"),
            ChatMessage(role="user", text="three"),
        ]

        session = cache.get_or_create("u1", "c1", system_prompt="mentor", history=history)

        assert session.system_prompt == "mentor"
        assert [m.text for m in session.messages] == ["two", "three"]

    def test_08_get_or_create_returns_existing(self, cache):
        cache.append("u1", "c1", "user", "hi")

        session = cache.get_or_create("u1", "c1", history=[ChatMessage(role="user", text="old")])

        assert [m.text for m in session.messages] == ["hi"]

    def test_09_zero_history_limit_seeds_nothing(self, store):
        cache = ChatSessionCache(store, history_limit=0)

        session = cache.get_or_create("u1", "c1", history=[ChatMessage(role="user", text="old")])

        assert session.messages == []

    def test_10_history_pagination(self, cache):
        for i in range(5):
            cache.append("u1", "c1", "user", f"m{i}")

        messages, total = cache.history("u1", "c1", page=2, limit=2)

        assert total == 5
        assert [m.text for m in messages] == ["m2", "m3"]

    def test_11_missing_conversation(self, cache):
        assert cache.get("u1", "nope") is None
        with pytest.raises(SessionNotFoundException):
            cache.history("u1", "nope")

    def test_12_list_conversations_most_recent_first(self, cache, store):
        store.set("chat:u1:old", ChatSession(
            user_id="u1", conversation_id="old",
            messages=[ChatMessage(role="user", text="a", created_at="2026-01-01T00:00:00+00:00")]
        ))
        store.set("chat:u1:new", ChatSession(
            user_id="u1", conversation_id="new",
            messages=[
                ChatMessage(role="user", text="a", created_at="2026-02-01T00:00:00+00:00"),
                ChatMessage(role="assistant", text="b", created_at="2026-02-01T00:01:00+00:00"),
            ]
        ))
        store.set("chat:u2:other", ChatSession(user_id="u2", conversation_id="other"))

        conversations = cache.list_conversations("u1")

        assert [c.conversation_id for c in conversations] == ["new", "old"]
        assert conversations[0].message_count == 2
        assert conversations[0].last_message_at == "2026-02-01T00:01:00+00:00"

    def test_13_clear_one(self, cache):
        cache.append("u1", "c1", "user", "hi")
        cache.append("u1", "c2", "user", "hi")

        assert cache.clear("u1", "c1") == 1
        assert cache.clear("u1", "c1") == 0
        assert cache.get("u1", "c2") is not None

    def test_14_clear_all_for_user(self, cache):
        cache.append("u1", "c1", "user", "hi")
        cache.append("u1", "c2", "user", "hi")
        cache.append("u2", "c1", "user", "hi")

        assert cache.clear("u1") == 2
        assert cache.list_conversations("u1") == []
        assert cache.get("u2", "c1") is not None

    def test_15_store_returns_copies(self, cache, store):
        cache.append("u1", "c1", "user", "hi")

        session = store.get("chat:u1:c1")
        session.messages.append(ChatMessage(role="user", text="sneaky"))

        assert len(store.get("chat:u1:c1").messages) == 1

    @pytest.mark.parametrize("user_id,conversation_id", [
        ("u1:c1", "x"),
        ("u1", "c1:x"),
        ("u*", "c1"),
        ("u1", "c[1]"),
        ("", "c1"),
        ("u1", "a" * 129),
    ])
    def test_16_ids_that_break_key_layout_rejected(self, cache, user_id, conversation_id):
        with pytest.raises(InvalidSessionIdException):
            cache.append(user_id, conversation_id, "user", "hi")

    def test_17_prefix_sharing_users_kept_apart(self, cache):
        cache.append("alice", "c1", "user", "hi")
        cache.append("alice_2", "c1", "user", "hi")

        assert [c.conversation_id for c in cache.list_conversations("alice")] == ["c1"]
        assert cache.clear("alice") == 1
        assert cache.get("alice_2", "c1") is not None

    @pytest.mark.parametrize("user_id", ["alice:", "*", "a?"])
    def test_18_list_and_clear_reject_bad_user_id(self, cache, user_id):
        cache.append("alice", "c1", "user", "hi")

        with pytest.raises(InvalidSessionIdException):
            cache.list_conversations(user_id)
        with pytest.raises(InvalidSessionIdException):
            cache.clear(user_id)
        assert cache.get("alice", "c1") is not None

    def test_19_generated_conversation_id_is_valid(self):
        conversation_id = ChatSessionCache.new_conversation_id("u" * 128)

        assert validate_session_id("conversation_id", conversation_id) == conversation_id


class UnsyncedStore(InMemorySessionStore):
    """Store whose update is a plain get/set with a gap in between."""

    def update(self, key, mutate):
        session = self.get(key)
        time.sleep(0.001)
        session = mutate(session)
        self.set(key, session)
        return session


class TestConcurrentAppends:
    """Appends from many threads to one conversation."""

    THREADS = 20

    def _append_concurrently(self, cache):
        barrier = threading.Barrier(self.THREADS)

        def worker(i):
            barrier.wait()
            cache.append("u1", "c1", "user", f"m{i}")

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(self.THREADS)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

    def test_no_message_lost_with_in_memory_store(self):
        cache = ChatSessionCache(InMemorySessionStore())
        cache.append("u1", "c1", "user", "first")

        self._append_concurrently(cache)

        assert len(cache.require("u1", "c1").messages) == self.THREADS + 1

    def test_cache_serializes_read_modify_write(self):
        cache = ChatSessionCache(UnsyncedStore())
        cache.append("u1", "c1", "user", "first")

        self._append_concurrently(cache)

        texts = [m.text for m in cache.require("u1", "c1").messages]
        assert len(texts) == self.THREADS + 1
        assert sorted(texts[1:]) == sorted(f"m{i}" for i in range(self.THREADS))

    def test_store_update_is_atomic(self):
        store = InMemorySessionStore()

        def add(session):
            session = session or ChatSession(user_id="u1", conversation_id="c1")
            session.messages.append(ChatMessage(role="user", text="x"))
            return session

        threads = [
            threading.Thread(target=lambda: [store.update("chat:u1:c1", add) for _ in range(25)])
            for _ in range(8)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(store.get("chat:u1:c1").messages) == 200


class TestBuildSessionCache:
    """Backend selection from SessionConfig."""

    def test_memory_backend(self):
        assert isinstance(build_session_store(SessionConfig()), InMemorySessionStore)

    def test_redis_backend_requires_url(self):
        with pytest.raises(SessionStoreException):
            build_session_store(SessionConfig(backend="redis"))

    def test_redis_backend(self):
        with patch('core.cache.session_store.Redis') as mock_redis_class:
            store = build_session_store(
                SessionConfig(backend="redis", redis_url="redis://localhost:6379/0", ttl_seconds=60)
            )

        assert isinstance(store, RedisSessionStore)
        assert store.ttl_seconds == 60
        mock_redis_class.from_url.assert_called_once()

    def test_cache_settings(self):
        cache = build_session_cache(SessionConfig(history_limit=4, max_message_chars=100))

        assert cache.history_limit == 4
        assert cache.max_message_chars == 100
        assert isinstance(cache.store, InMemorySessionStore)
