"""In-memory records for individual timed media items ("bites")."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class MediaType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"


@dataclass(frozen=True, slots=True)
class MediaRef:
    """Opaque, already-resolved reference to displayable content."""

    type: MediaType
    url: str
    thumbnail: str | None = None


@dataclass(slots=True)
class Item:
    """One timed media unit. Media fields are fixed; social counters are mutable."""

    id: str
    author_id: str
    media: MediaRef
    duration_seconds: float
    caption: str = ""
    view_count: int = 0
    like_count: int = 0
    liked_by_viewer: bool = False
    tags: frozenset[str] = field(default_factory=frozenset)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def has_valid_duration(self) -> bool:
        return self.duration_seconds > 0


__all__ = ["Item", "MediaRef", "MediaType"]
