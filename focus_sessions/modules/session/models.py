"""
Session data models.

A Session is the browser's record of one browsing context: how it was
opened (its Source) and what it is currently showing. NullSession is the
placeholder handed out wherever a Session is expected but none exists.
"""

from enum import Enum
from typing import Any, Callable, ClassVar, Dict, List, Optional, Tuple
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from focus_sessions.modules.urls import URL_ABOUT

Observer = Callable[[Any], None]


class Source(str, Enum):
    """How a session came to exist."""

    VIEW = "view"
    ACTION_SEND = "action_send"
    TEXT_SELECTION = "text_selection"
    HOME_SCREEN = "home_screen"
    USER_ENTERED = "user_entered"
    CUSTOM_TAB = "custom_tab"
    MENU = "menu"
    NONE = "none"


class Session(BaseModel):
    """A single browsing session."""

    model_config = ConfigDict(validate_assignment=True)

    uuid: str = Field(default_factory=lambda: str(uuid4()), frozen=True)
    source: Source = Field(..., frozen=True, description="How the session was created")
    url: str = Field(..., description="Current URL")

    # Browsing state, updated while the page loads
    progress: int = Field(default=0, ge=0, le=100)
    loading: bool = False
    secure: bool = False
    trackers_blocked: int = Field(default=0, ge=0)
    search_terms: Optional[str] = None
    blocking_enabled: bool = True

    _observers: Dict[str, List[Observer]] = PrivateAttr(default_factory=dict)

    MUTABLE_FIELDS: ClassVar[Tuple[str, ...]] = (
        "url",
        "progress",
        "loading",
        "secure",
        "trackers_blocked",
        "search_terms",
        "blocking_enabled",
    )

    def __init__(self, source: Source, url: str, **data: Any) -> None:
        super().__init__(source=source, url=url, **data)

    def observe(self, field: str, callback: Observer) -> Callable[[], None]:
        """
        Register a callback for changes to a field.

        Args:
            field: Name of a mutable field (see MUTABLE_FIELDS)
            callback: Called with the new value after each change

        Returns:
            Function that removes the callback again
        """
        if field not in self.MUTABLE_FIELDS:
            raise ValueError(f"Cannot observe field '{field}'")

        callbacks = self._observers.setdefault(field, [])
        callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in callbacks:
                callbacks.remove(callback)

        return unsubscribe

    def update(self, **changes: Any) -> None:
        """
        Change one or more mutable fields and notify observers.

        Observers only hear about fields whose value actually changed.
        All changes are validated together first, so a rejected value
        leaves the session untouched. All assignments are applied before
        any observer runs.
        """
        for name in changes:
            if name not in self.MUTABLE_FIELDS:
                raise ValueError(f"Field '{name}' cannot be updated")

        # Raises ValidationError before anything is assigned
        validated = type(self).model_validate({**self.model_dump(), **changes})

        changed = []
        for name in changes:
            value = getattr(validated, name)
            if value != getattr(self, name):
                setattr(self, name, value)
                changed.append(name)

        for name in changed:
            value = getattr(self, name)
            for callback in list(self._observers.get(name, [])):
                callback(value)

    def is_custom_tab(self) -> bool:
        return self.source == Source.CUSTOM_TAB

    def is_search(self) -> bool:
        return bool(self.search_terms)

    def is_null(self) -> bool:
        """True for the placeholder session (source NONE)."""
        return self.source == Source.NONE

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return self.model_dump(mode="json")


class NullSession(Session):
    """An "empty" session object that can be used instead of None."""

    def __init__(self) -> None:
        super().__init__(Source.NONE, URL_ABOUT)
