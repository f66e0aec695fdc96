"""WebSocket endpoints that stream viewer events to presentation clients."""
from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect, status

from ..services import viewer_sessions
from ..services.viewer_stream import viewer_stream_manager

router = APIRouter()
logger = logging.getLogger(__name__)


@router.websocket("/ws/viewers/{session_id}")
async def viewer_events(websocket: WebSocket, session_id: str) -> None:
    """Push author_seen / item_like_toggled events for one viewer session."""

    if session_id not in viewer_sessions:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    await viewer_stream_manager.attach(session_id, websocket)
    logger.info("Viewer socket connected for session %s", session_id)
    try:
        while True:
            try:
                raw = await websocket.receive_text()
            except WebSocketDisconnect:
                break
            except Exception:
                logger.exception("Viewer socket receive failed")
                break

            try:
                payload = json.loads(raw)
            except json.JSONDecodeError:
                payload = {"type": raw}
            if not isinstance(payload, dict):
                continue

            message_type = (payload.get("type") or "").lower()
            if message_type == "ping":
                await websocket.send_text(json.dumps({"type": "pong"}))
    finally:
        viewer_stream_manager.detach(session_id, websocket)
        logger.info("Viewer socket disconnected for session %s", session_id)


__all__ = ["router"]
