#!/usr/bin/env python3
"""
Chat Session Models.
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional

Role = Literal["user", "assistant", "system"]
ROLES = ("user", "assistant", "system")


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class ChatMessage:
    role: Role
    text: str
    created_at: str = field(default_factory=utc_now_iso)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ChatMessage':
        return cls(
            role=data["role"],
            text=data["text"],
            created_at=data.get("created_at") or utc_now_iso()
        )


@dataclass
class ChatSession:
    """Mentor conversation state for one (user, conversation) pair."""
    user_id: str
    conversation_id: str
    system_prompt: str = ""
    messages: List[ChatMessage] = field(default_factory=list)
    created_at: str = field(default_factory=utc_now_iso)
    updated_at: str = field(default_factory=utc_now_iso)

    @property
    def last_message_at(self) -> Optional[str]:
        if not self.messages:
            return None
        return self.messages[-1].created_at

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ChatSession':
        return cls(
            user_id=data["user_id"],
            conversation_id=data["conversation_id"],
            system_prompt=data.get("system_prompt", ""),
            messages=[ChatMessage.from_dict(m) for m in data.get("messages", [])],
            created_at=data.get("created_at") or utc_now_iso(),
            updated_at=data.get("updated_at") or utc_now_iso()
        )


@dataclass(frozen=True)
class ConversationSummary:
    conversation_id: str
    message_count: int
    last_message_at: Optional[str]
