"""
Conversation context tracking.

`update_context` is the pure per-turn merge. `ConversationStateManager` keeps
the contexts of live sessions in process memory with a TTL and a capacity
limit; nothing is persisted beyond the running process.
"""

import asyncio
import logging
import time
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from app.core.config import settings

from assistant.lexicon.intents import IntentName

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversationContext:
    """What the assistant remembers between turns of one session."""
    last_intent: Optional[IntentName] = None
    entities: Dict[str, List[str]] = field(default_factory=dict)
    turn_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "last_intent": self.last_intent.value if self.last_intent else None,
            "entities": {key: list(values) for key, values in self.entities.items()},
            "turn_count": self.turn_count,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ConversationContext':
        last_intent = data.get("last_intent")
        return cls(
            last_intent=IntentName(last_intent) if last_intent else None,
            entities={key: list(values) for key, values in (data.get("entities") or {}).items()},
            turn_count=int(data.get("turn_count", 0)),
        )


def update_context(
    context: ConversationContext,
    intent: IntentName,
    entities: Dict[str, List[str]]
) -> ConversationContext:
    """Return the context after one turn; new entity types overwrite old ones."""
    merged = {key: list(values) for key, values in context.entities.items()}
    merged.update({key: list(values) for key, values in entities.items()})
    return ConversationContext(
        last_intent=intent,
        entities=merged,
        turn_count=context.turn_count + 1,
    )


@dataclass
class ConversationSession:
    """A live session and its latest context."""
    session_id: str
    context: ConversationContext
    created_at: float
    updated_at: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "session_id": self.session_id,
            "context": self.context.to_dict(),
            "created_at": datetime.utcfromtimestamp(self.created_at).isoformat(),
            "updated_at": datetime.utcfromtimestamp(self.updated_at).isoformat(),
        }


class ConversationStateManager:
    """Manages conversation sessions in process memory."""

    def __init__(
        self,
        session_ttl: Optional[int] = None,
        max_sessions: Optional[int] = None,
        clock: Callable[[], float] = time.time
    ):
        self.session_ttl = session_ttl or settings.CONVERSATION_SESSION_TTL
        self.max_sessions = max_sessions or settings.MAX_ACTIVE_SESSIONS
        self._clock = clock
        self._sessions: Dict[str, ConversationSession] = {}
        self._lock = asyncio.Lock()

        self.stats = {
            "sessions_created": 0,
            "sessions_ended": 0,
            "sessions_expired": 0,
            "sessions_evicted": 0,
        }

    async def create_session(self) -> ConversationSession:
        """Create a new session with an empty context."""
        async with self._lock:
            if len(self._sessions) >= self.max_sessions:
                self._remove_expired()
            if len(self._sessions) >= self.max_sessions:
                self._evict_oldest()

            now = self._clock()
            session = ConversationSession(
                session_id=str(uuid.uuid4()),
                context=ConversationContext(),
                created_at=now,
                updated_at=now,
            )
            self._sessions[session.session_id] = session
            self.stats["sessions_created"] += 1

        logger.info(f"Created conversation session: {session.session_id}")
        return session

    async def get_session(self, session_id: str) -> Optional[ConversationSession]:
        """Retrieve a live session, dropping it if it has expired."""
        async with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None
            if self._is_expired(session):
                del self._sessions[session_id]
                self.stats["sessions_expired"] += 1
                logger.info(f"Conversation session expired: {session_id}")
                return None
            return session

    async def get_context(self, session_id: str) -> Optional[ConversationContext]:
        session = await self.get_session(session_id)
        return session.context if session else None

    async def save_context(self, session_id: str, context: ConversationContext) -> bool:
        """Store the context produced by a turn. False if the session is gone."""
        async with self._lock:
            session = self._sessions.get(session_id)
            if session is None or self._is_expired(session):
                logger.warning(f"Cannot save context, session {session_id} not found")
                return False
            session.context = context
            session.updated_at = self._clock()
            return True

    async def end_session(self, session_id: str) -> bool:
        """End a conversation session."""
        async with self._lock:
            session = self._sessions.pop(session_id, None)
            if session is None:
                return False
            self.stats["sessions_ended"] += 1

        logger.info(f"Ended conversation session: {session_id}")
        return True

    async def cleanup_expired(self) -> int:
        """Remove expired sessions and return how many were removed."""
        async with self._lock:
            removed = self._remove_expired()
        if removed:
            logger.info(f"Cleaned up {removed} expired sessions")
        return removed

    def get_active_sessions(self) -> List[str]:
        return list(self._sessions)

    def get_stats(self) -> Dict[str, Any]:
        """Get session statistics."""
        stats = self.stats.copy()
        stats["active_sessions"] = len(self._sessions)
        stats["session_ttl_seconds"] = self.session_ttl
        stats["max_sessions"] = self.max_sessions
        return stats

    def _is_expired(self, session: ConversationSession) -> bool:
        return (self._clock() - session.updated_at) > self.session_ttl

    def _remove_expired(self) -> int:
        expired = [sid for sid, session in self._sessions.items() if self._is_expired(session)]
        for session_id in expired:
            del self._sessions[session_id]
        self.stats["sessions_expired"] += len(expired)
        return len(expired)

    def _evict_oldest(self):
        oldest = min(self._sessions.values(), key=lambda s: s.updated_at)
        del self._sessions[oldest.session_id]
        self.stats["sessions_evicted"] += 1
        logger.warning(f"Session capacity reached, evicted {oldest.session_id}")


# Global conversation state manager instance
conversation_state_manager = ConversationStateManager()
