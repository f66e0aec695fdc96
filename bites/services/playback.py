"""Authoritative playback record for one viewer instance."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..constants import PROGRESS_COMPLETE
from .navigator import Coordinate

# Float sums of 100/n can land a hair under 100 after n ticks.
_COMPLETION_TOLERANCE = 1e-9


class PlaybackStatus(str, Enum):
    CLOSED = "closed"
    OPEN = "open"


@dataclass(frozen=True, slots=True)
class PlaybackSnapshot:
    """Read-only view of the playback record handed to callers."""

    status: PlaybackStatus
    author_index: int | None = None
    item_index: int | None = None
    progress: float = 0.0
    paused: bool = False

    @property
    def is_open(self) -> bool:
        return self.status is PlaybackStatus.OPEN

    @property
    def coordinate(self) -> tuple[int, int] | None:
        if not self.is_open:
            return None
        return self.author_index, self.item_index


class PlaybackState:
    """Closed, or Open at (author_index, item_index) with progress and pause flag."""

    def __init__(self) -> None:
        self.status = PlaybackStatus.CLOSED
        self.author_index = 0
        self.item_index = 0
        self.progress = 0.0
        self.paused = False

    @property
    def is_open(self) -> bool:
        return self.status is PlaybackStatus.OPEN

    def start(self, author_index: int) -> None:
        self.status = PlaybackStatus.OPEN
        self.author_index = author_index
        self.item_index = 0
        self.progress = 0.0
        self.paused = False

    def move_to(self, coordinate: Coordinate) -> None:
        self.author_index = coordinate.author_index
        self.item_index = coordinate.item_index
        self.progress = 0.0

    def accumulate(self, increment: float) -> bool:
        """Add ``increment`` to progress; return True once the item is complete."""

        self.progress += increment
        if self.progress >= PROGRESS_COMPLETE - _COMPLETION_TOLERANCE:
            self.progress = PROGRESS_COMPLETE
            return True
        return False

    def reset(self) -> None:
        self.status = PlaybackStatus.CLOSED
        self.author_index = 0
        self.item_index = 0
        self.progress = 0.0
        self.paused = False

    def snapshot(self) -> PlaybackSnapshot:
        if not self.is_open:
            return PlaybackSnapshot(status=PlaybackStatus.CLOSED)
        return PlaybackSnapshot(
            status=self.status,
            author_index=self.author_index,
            item_index=self.item_index,
            progress=self.progress,
            paused=self.paused,
        )


__all__ = ["PlaybackSnapshot", "PlaybackState", "PlaybackStatus"]
