"""
Session Module - Black Box Interface

Purpose: Track browsing sessions and stand in for missing ones
Interface: Session, NullSession, Source, SessionManager, SessionNotFoundError
Hidden: Session storage, current-session selection, observer bookkeeping

NullSession lets callers that expect a Session skip None checks.
"""

from .manager import SessionManager, SessionNotFoundError
from .models import NullSession, Session, Source

__all__ = ["Session", "NullSession", "Source", "SessionManager", "SessionNotFoundError"]
