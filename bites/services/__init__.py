"""Convenience exports for service layer."""
from .clock import Clock
from .errors import InvalidDuration, NotFound, SessionLimitReached, SessionNotFound, ViewerError
from .events import ViewerEvent, ViewerEventBus, author_seen, item_like_toggled
from .formatting import format_time_ago
from .interaction import InteractionChannel
from .navigator import END_OF_COLLECTION, NO_OP, Coordinate, NavigationStop, advance, retreat
from .playback import PlaybackSnapshot, PlaybackState, PlaybackStatus
from .session_registry import ViewerSessionRegistry, viewer_sessions
from .viewed_state import ViewedStateTracker
from .viewer_service import ViewerController

__all__ = [
    "Clock",
    "ViewerError",
    "NotFound",
    "SessionNotFound",
    "InvalidDuration",
    "SessionLimitReached",
    "ViewerEvent",
    "ViewerEventBus",
    "author_seen",
    "item_like_toggled",
    "format_time_ago",
    "InteractionChannel",
    "Coordinate",
    "NavigationStop",
    "END_OF_COLLECTION",
    "NO_OP",
    "advance",
    "retreat",
    "PlaybackSnapshot",
    "PlaybackState",
    "PlaybackStatus",
    "ViewedStateTracker",
    "ViewerController",
    "ViewerSessionRegistry",
    "viewer_sessions",
]
