"""Pydantic schemas for the bites viewer command surface."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, model_validator

from ..models import MediaType
from ..services.playback import PlaybackStatus


class MediaRefPayload(BaseModel):
    type: MediaType = MediaType.IMAGE
    url: str = Field(..., min_length=1, max_length=2048)
    thumbnail: str | None = Field(default=None, max_length=2048)


class ItemPayload(BaseModel):
    """One bite as supplied by the data-loading collaborator."""

    id: str = Field(..., min_length=1, max_length=128)
    author_id: str | None = Field(default=None, max_length=128)
    media: MediaRefPayload
    caption: str = Field(default="", max_length=2200)
    duration_seconds: float = Field(..., gt=0)
    view_count: int = Field(default=0, ge=0)
    like_count: int = Field(default=0, ge=0)
    liked_by_viewer: bool = False
    tags: list[str] = Field(default_factory=list)
    created_at: datetime | None = None

    @model_validator(mode="after")
    def _check_viewer_like(self) -> "ItemPayload":
        if self.liked_by_viewer and self.like_count < 1:
            raise ValueError("liked_by_viewer requires like_count of at least 1")
        return self


class AuthorPayload(BaseModel):
    id: str = Field(..., min_length=1, max_length=128)
    display_name: str = Field(..., min_length=1, max_length=120)
    avatar_ref: str | None = Field(default=None, max_length=2048)
    items: list[ItemPayload] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_item_owners(self) -> "AuthorPayload":
        for item in self.items:
            if item.author_id is not None and item.author_id != self.id:
                raise ValueError(f"item {item.id!r} belongs to {item.author_id!r}, not {self.id!r}")
        return self


class CollectionPayload(BaseModel):
    """Ordered authors handed to a new viewer session."""

    authors: list[AuthorPayload] = Field(..., min_length=1)


class OpenRequest(BaseModel):
    author_id: str = Field(..., min_length=1, max_length=128)


class PlaybackResponse(BaseModel):
    session_id: str
    status: PlaybackStatus
    author_index: int | None = None
    item_index: int | None = None
    progress: float = 0.0
    paused: bool = False
    author_id: str | None = None
    item_id: str | None = None


class ViewerSessionResponse(BaseModel):
    session_id: str
    author_count: int
    item_count: int
    playback: PlaybackResponse


class ItemResponse(BaseModel):
    id: str
    author_id: str
    media_type: MediaType
    media_url: str
    thumbnail_url: str | None = None
    caption: str
    duration_seconds: float
    view_count: int
    like_count: int
    liked_by_viewer: bool
    tags: list[str]
    created_at: datetime
    time_ago: str


class ItemFeedResponse(BaseModel):
    items: list[ItemResponse]


class AuthorSummary(BaseModel):
    id: str
    display_name: str
    avatar_ref: str | None = None
    item_count: int
    seen: bool
    has_unseen_items: bool
    unseen_count: int


class AuthorRingResponse(BaseModel):
    items: list[AuthorSummary]


class ItemEngagementResponse(BaseModel):
    """Like counters used by the interactive overlay."""

    item_id: str
    like_count: int
    liked_by_viewer: bool


__all__ = [
    "MediaRefPayload",
    "ItemPayload",
    "AuthorPayload",
    "CollectionPayload",
    "OpenRequest",
    "PlaybackResponse",
    "ViewerSessionResponse",
    "ItemResponse",
    "ItemFeedResponse",
    "AuthorSummary",
    "AuthorRingResponse",
    "ItemEngagementResponse",
]
