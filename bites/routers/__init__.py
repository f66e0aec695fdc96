"""Aggregate router exports."""
from .realtime import router as realtime_router
from .system import router as system_router
from .viewer import router as viewer_router

__all__ = [
    "realtime_router",
    "system_router",
    "viewer_router",
]
