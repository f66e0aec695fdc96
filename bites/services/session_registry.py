"""In-memory registry of open viewer sessions served over HTTP."""
from __future__ import annotations

import logging
import uuid
from typing import Callable, Iterable

from ..config import Settings, get_settings
from ..models import Author, build_collection
from .errors import SessionLimitReached, SessionNotFound
from .events import ViewerEventBus
from .viewer_service import ViewerController

logger = logging.getLogger(__name__)

DiscardListener = Callable[[str], None]


class ViewerSessionRegistry:
    """Owns one ViewerController per session id; no state is shared across sessions.

    When the registry is full, finished sessions (opened, then closed explicitly
    or by playing to the end) are evicted before a new session is refused.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self._sessions: dict[str, ViewerController] = {}
        self._discard_listeners: list[DiscardListener] = []

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def on_discard(self, listener: DiscardListener) -> None:
        self._discard_listeners.append(listener)

    def create(self, authors: Iterable[Author]) -> tuple[str, ViewerController]:
        collection = build_collection(authors)
        if len(self._sessions) >= self.settings.max_sessions:
            self._evict_finished()
        if len(self._sessions) >= self.settings.max_sessions:
            raise SessionLimitReached(f"at most {self.settings.max_sessions} viewer sessions may be open")

        session_id = uuid.uuid4().hex
        controller = ViewerController(collection, settings=self.settings, events=ViewerEventBus())
        self._sessions[session_id] = controller
        logger.info("Viewer session %s created (authors=%d)", session_id, len(collection))
        return session_id, controller

    def get(self, session_id: str) -> ViewerController:
        controller = self._sessions.get(session_id)
        if controller is None:
            raise SessionNotFound(f"viewer session {session_id!r} does not exist")
        return controller

    def discard(self, session_id: str) -> None:
        controller = self._sessions.pop(session_id, None)
        if controller is None:
            raise SessionNotFound(f"viewer session {session_id!r} does not exist")
        controller.close()
        self._notify_discard(session_id)
        logger.info("Viewer session %s discarded", session_id)

    def close_all(self) -> int:
        sessions = list(self._sessions.items())
        self._sessions.clear()
        for session_id, controller in sessions:
            controller.close()
            self._notify_discard(session_id)
        if sessions:
            logger.info("Closed %d viewer sessions", len(sessions))
        return len(sessions)

    def _evict_finished(self) -> int:
        finished = [session_id for session_id, controller in self._sessions.items() if controller.finished]
        for session_id in finished:
            del self._sessions[session_id]
            self._notify_discard(session_id)
        if finished:
            logger.info("Evicted %d finished viewer sessions", len(finished))
        return len(finished)

    def _notify_discard(self, session_id: str) -> None:
        for listener in list(self._discard_listeners):
            try:
                listener(session_id)
            except Exception:
                logger.exception("Discard listener failed for session %s", session_id)


viewer_sessions = ViewerSessionRegistry()


__all__ = ["ViewerSessionRegistry", "viewer_sessions"]
