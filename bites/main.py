"""Application entry point for the bites viewer backend."""
from __future__ import annotations

import logging
import os
from typing import Iterable

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .routers import realtime_router, system_router, viewer_router
from .services import viewer_sessions
from .services.viewer_stream import viewer_stream_manager

logger = logging.getLogger(__name__)

settings = get_settings()

app = FastAPI(title=settings.app_name, version=settings.api_version)

cors_origins = os.getenv("CORS_ORIGINS")
if cors_origins:
    origins: Iterable[str] = [origin.strip() for origin in cors_origins.split(",") if origin.strip()]
else:
    origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(system_router)
app.include_router(viewer_router)
app.include_router(realtime_router)

viewer_sessions.on_discard(viewer_stream_manager.drop_session)


@app.on_event("startup")
async def _startup() -> None:
    logger.info(
        "Bites viewer ready (tick_interval_ms=%d, max_sessions=%d)",
        settings.tick_interval_ms,
        settings.max_sessions,
    )


@app.on_event("shutdown")
async def _shutdown() -> None:
    """Disarm every viewer clock so no timer outlives the event loop."""

    closed = viewer_sessions.close_all()
    logger.info("Shutdown closed %d viewer sessions", closed)
