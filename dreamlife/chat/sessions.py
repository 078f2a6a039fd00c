"""
Per-connection chat history for WebSocket clients.
"""

from datetime import datetime, timedelta

from dreamlife.domain.knowledge import utc_now
from dreamlife.domain.session import ChatMessage, ChatSession
from dreamlife.utils.logging import get_logger

logger = get_logger(__name__)


class ChatSessionManager:
    """
    Keeps the recent messages of each live session.

    History is capped at ``history_limit`` messages per session. Sessions
    idle for longer than ``idle_timeout`` seconds are dropped by
    ``cleanup_inactive``.
    """

    def __init__(self, history_limit: int = 50, idle_timeout: float = 2 * 60 * 60):
        if history_limit < 1:
            raise ValueError("history_limit must be >= 1")
        self.history_limit = history_limit
        self.idle_timeout = idle_timeout
        self._sessions: dict[str, ChatSession] = {}

    def _get_or_create(self, session_id: str) -> ChatSession:
        session = self._sessions.get(session_id)
        if session is None:
            session = self._sessions[session_id] = ChatSession(session_id=session_id)
        return session

    def touch(self, session_id: str) -> None:
        self._get_or_create(session_id).last_activity = utc_now()

    def add_message(self, session_id: str, message: ChatMessage) -> None:
        session = self._get_or_create(session_id)
        session.messages.append(message)
        if len(session.messages) > self.history_limit:
            del session.messages[: -self.history_limit]
        session.last_activity = utc_now()

    def get_history(self, session_id: str) -> list[ChatMessage]:
        session = self._sessions.get(session_id)
        return list(session.messages) if session else []

    def clear(self, session_id: str) -> None:
        session = self._get_or_create(session_id)
        session.messages.clear()
        session.last_activity = utc_now()

    def cleanup_inactive(self, now: datetime | None = None) -> int:
        """Drop idle sessions and return how many were removed."""
        cutoff = (now or utc_now()) - timedelta(seconds=self.idle_timeout)
        stale = [
            session_id
            for session_id, session in self._sessions.items()
            if session.last_activity < cutoff
        ]
        for session_id in stale:
            del self._sessions[session_id]

        if stale:
            logger.info("chat_sessions_cleaned", removed=len(stale), active=len(self._sessions))
        return len(stale)

    @property
    def active_count(self) -> int:
        return len(self._sessions)


__all__ = ["ChatSessionManager"]
