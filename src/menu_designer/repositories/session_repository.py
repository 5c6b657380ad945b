"""In-memory repository for menu sessions.

Sessions only live for the lifetime of the process and expire once idle for
longer than the configured TTL. When the store is full the least recently
updated session is evicted. Following the same convention as the rest of the
service, expected misses return None/False rather than raising.
"""

import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from menu_designer.models.session_models import MenuSession
from menu_designer.observability.metrics import record_session_change
from menu_designer.settings import DEFAULT_MAX_SESSIONS, DEFAULT_SESSION_TTL_SECONDS

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(UTC)


class SessionRepository:
    """Stores MenuSession values keyed by session_id."""

    def __init__(
        self,
        ttl_seconds: int = DEFAULT_SESSION_TTL_SECONDS,
        max_sessions: int = DEFAULT_MAX_SESSIONS,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize repository.

        Args:
            ttl_seconds: Idle time after which a session expires
            max_sessions: Maximum number of stored sessions
            clock: Source of the current time, compared against updated_at

        Raises:
            ValueError: If ttl_seconds or max_sessions is below 1
        """
        if ttl_seconds < 1:
            raise ValueError("ttl_seconds must be at least 1")
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")

        self.ttl = timedelta(seconds=ttl_seconds)
        self.max_sessions = max_sessions
        self.clock = clock
        self._sessions: dict[str, MenuSession] = {}

    def get_session(self, session_id: str) -> MenuSession | None:
        """Retrieve a session.

        Args:
            session_id: Session identifier

        Returns:
            MenuSession if found and not expired, None otherwise
        """
        self.evict_expired()
        return self._sessions.get(session_id)

    def save_session(self, session: MenuSession) -> bool:
        """Insert or replace a session, evicting to stay within max_sessions.

        Args:
            session: Session to store

        Returns:
            bool: True once stored
        """
        self.evict_expired()

        if session.session_id not in self._sessions:
            while len(self._sessions) >= self.max_sessions:
                oldest = min(self._sessions.values(), key=lambda s: s.updated_at)
                self._evict(oldest.session_id, "capacity")

        self._sessions[session.session_id] = session
        logger.debug(f"Saved session {session.session_id}")
        return True

    def delete_session(self, session_id: str) -> bool:
        """Remove a session.

        Args:
            session_id: Session identifier

        Returns:
            bool: True if a session was removed, False if it did not exist
        """
        if self._sessions.pop(session_id, None) is None:
            logger.debug(f"Session {session_id} not found for deletion")
            return False
        return True

    def evict_expired(self) -> int:
        """Drop sessions idle for longer than the TTL.

        Returns:
            int: Number of sessions evicted
        """
        cutoff = self.clock() - self.ttl
        expired = [s.session_id for s in self._sessions.values() if s.updated_at < cutoff]
        for session_id in expired:
            self._evict(session_id, "expired")
        return len(expired)

    def count(self) -> int:
        """Number of stored sessions."""
        return len(self._sessions)

    def _evict(self, session_id: str, reason: str) -> None:
        del self._sessions[session_id]
        record_session_change(-1)
        logger.info(f"Evicted session {session_id} ({reason})")
