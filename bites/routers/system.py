"""System-level routes for diagnostics."""
from __future__ import annotations

from fastapi import APIRouter

from ..config import get_settings
from ..services import viewer_sessions

router = APIRouter(tags=["system"])


@router.get("/api")
def api_info() -> dict[str, str]:
    settings = get_settings()
    return {"service": settings.app_name, "version": settings.api_version}


@router.get("/health")
async def healthcheck() -> dict[str, object]:
    """Report liveness and how many viewer sessions are held in memory."""

    return {"status": "ok", "sessions": len(viewer_sessions)}


__all__ = ["router"]
