"""Per-session WebSocket fan-out of viewer events."""
from __future__ import annotations

import asyncio
import json
import logging

from fastapi import WebSocket, status

from .events import Listener, ViewerEvent

logger = logging.getLogger(__name__)


class ViewerStreamManager:
    """Relays each viewer session's events to the sockets watching it.

    Every method runs on the event loop thread, so the socket groups are only
    mutated between awaits and need no lock.
    """

    def __init__(self) -> None:
        self._watchers: dict[str, set[WebSocket]] = {}

    def watcher_count(self, session_id: str) -> int:
        return len(self._watchers.get(session_id, ()))

    async def attach(self, session_id: str, websocket: WebSocket) -> None:
        await websocket.accept()
        self._watchers.setdefault(session_id, set()).add(websocket)

    def detach(self, session_id: str, websocket: WebSocket) -> None:
        watchers = self._watchers.get(session_id)
        if watchers is None:
            return
        watchers.discard(websocket)
        if not watchers:
            del self._watchers[session_id]

    async def publish(self, session_id: str, event: ViewerEvent) -> None:
        serialized = json.dumps(event.as_message(), default=str)
        for websocket in list(self._watchers.get(session_id, ())):
            try:
                await websocket.send_text(serialized)
            except Exception:
                logger.debug("Dropping dead viewer socket for session %s", session_id)
                self.detach(session_id, websocket)

    def forward(self, session_id: str) -> Listener:
        """Bus listener scheduling ``publish`` on the running loop.

        Events raised with no running loop have no sockets to reach and are
        dropped.
        """

        def _listener(event: ViewerEvent) -> None:
            loop = _running_loop()
            if loop is None:
                logger.debug("No running loop; dropping %s for session %s", event.kind, session_id)
                return
            loop.create_task(self.publish(session_id, event))

        return _listener

    def drop_session(self, session_id: str) -> None:
        """Forget a discarded session and close any sockets still watching it."""

        watchers = self._watchers.pop(session_id, set())
        loop = _running_loop()
        if loop is None:
            return
        for websocket in watchers:
            loop.create_task(_close_quietly(websocket))


def _running_loop() -> asyncio.AbstractEventLoop | None:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


async def _close_quietly(websocket: WebSocket) -> None:
    try:
        await websocket.close(code=status.WS_1000_NORMAL_CLOSURE)
    except Exception:
        logger.debug("Viewer socket already closed")


viewer_stream_manager = ViewerStreamManager()


__all__ = ["viewer_stream_manager", "ViewerStreamManager"]
