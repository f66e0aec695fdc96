"""Convenience exports for schema layer."""
from .viewer import (
    AuthorPayload,
    AuthorRingResponse,
    AuthorSummary,
    CollectionPayload,
    ItemEngagementResponse,
    ItemFeedResponse,
    ItemPayload,
    ItemResponse,
    MediaRefPayload,
    OpenRequest,
    PlaybackResponse,
    ViewerSessionResponse,
)

__all__ = [
    "AuthorPayload",
    "AuthorRingResponse",
    "AuthorSummary",
    "CollectionPayload",
    "ItemEngagementResponse",
    "ItemFeedResponse",
    "ItemPayload",
    "ItemResponse",
    "MediaRefPayload",
    "OpenRequest",
    "PlaybackResponse",
    "ViewerSessionResponse",
]
