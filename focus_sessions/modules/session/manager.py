import logging
from typing import Dict, List, Optional

from focus_sessions.modules.config import get_config

from .models import NullSession, Session, Source

logger = logging.getLogger("focus_sessions.session")


class SessionNotFoundError(LookupError):
    """Raised when no session exists for a UUID."""

    def __init__(self, session_uuid: str):
        super().__init__(f"There's no active session with UUID {session_uuid}")
        self.session_uuid = session_uuid


class SessionManager:
    """
    Keeps track of the open browsing sessions.

    Sessions live in memory only. Lookups that have to return something
    fall back to a fresh NullSession when the session is gone.
    """

    def __init__(self, default_blocking_enabled: Optional[bool] = None):
        """
        Initialize session manager.

        Args:
            default_blocking_enabled: Tracking protection state for new sessions.
                Read from configuration when not given.
        """
        if default_blocking_enabled is None:
            default_blocking_enabled = get_config().get("default_blocking_enabled", True)

        self.default_blocking_enabled = default_blocking_enabled
        self._sessions: Dict[str, Session] = {}
        self._current_uuid: Optional[str] = None

    def __len__(self) -> int:
        return len(self._sessions)

    def create_session(
        self,
        source: Source,
        url: str,
        search_terms: Optional[str] = None,
    ) -> Session:
        """
        Create a new session and select it.

        Args:
            source: How the session was opened
            url: Initial URL
            search_terms: Optional search terms that produced the URL

        Returns:
            The new session

        Raises:
            ValueError: If source is Source.NONE
        """
        if Source(source) == Source.NONE:
            raise ValueError("Sessions with source NONE are reserved for NullSession")

        session = Session(
            source,
            url,
            search_terms=search_terms,
            blocking_enabled=self.default_blocking_enabled,
        )
        self._sessions[session.uuid] = session
        self._current_uuid = session.uuid

        logger.info(
            "Created session %s (source=%s) at %s",
            session.uuid,
            session.source.value,
            url,
            extra={"session_url": url},
        )
        return session

    def has_session(self, session_uuid: str) -> bool:
        return session_uuid in self._sessions

    def get_session(self, session_uuid: str) -> Session:
        """
        Get a session by UUID.

        Raises:
            SessionNotFoundError: If no such session exists
        """
        try:
            return self._sessions[session_uuid]
        except KeyError:
            raise SessionNotFoundError(session_uuid) from None

    def get_session_or_null(self, session_uuid: str) -> Session:
        """Get a session by UUID, or a NullSession if it no longer exists."""
        session = self._sessions.get(session_uuid)
        if session is None:
            logger.debug("Session %s not found, using NullSession", session_uuid)
            return NullSession()
        return session

    def get_sessions(self) -> List[Session]:
        """All sessions in creation order."""
        return list(self._sessions.values())

    def has_session_current(self) -> bool:
        return self._current_uuid is not None

    @property
    def current_session(self) -> Session:
        """The selected session, or a NullSession when nothing is selected."""
        if self._current_uuid is None:
            return NullSession()
        return self._sessions[self._current_uuid]

    def select_session(self, session_uuid: str) -> None:
        """
        Make an existing session the current one.

        Raises:
            SessionNotFoundError: If no such session exists
        """
        if session_uuid not in self._sessions:
            raise SessionNotFoundError(session_uuid)
        self._current_uuid = session_uuid
        logger.debug("Selected session %s", session_uuid)

    def remove_session(self, session_uuid: str) -> None:
        """
        Remove a session. Unknown UUIDs are ignored.

        If the removed session was current, the most recently created
        remaining session becomes current.
        """
        if self._sessions.pop(session_uuid, None) is None:
            return

        if self._current_uuid == session_uuid:
            # Dicts keep insertion order, so the last key is the newest session
            self._current_uuid = next(reversed(self._sessions), None)

        logger.info("Removed session %s (%d remaining)", session_uuid, len(self._sessions))

    def remove_current_session(self) -> None:
        if self._current_uuid is not None:
            self.remove_session(self._current_uuid)

    def remove_all_sessions(self) -> None:
        count = len(self._sessions)
        self._sessions.clear()
        self._current_uuid = None
        logger.info("Removed all sessions (%d)", count)
