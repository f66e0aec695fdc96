"""Viewer controller: composes clock, playback record, navigator and side channels.

All commands run to completion synchronously on the caller's thread; the clock
fires on the event loop that armed it, so an HTTP handler and the timer never
interleave as long as both run on that loop. Commands that arrive in the wrong
state (``pause`` while closed, ``next`` while closed, ...) are no-ops.
"""
from __future__ import annotations

import asyncio
import logging

from ..config import Settings, get_settings
from ..constants import PROGRESS_COMPLETE
from ..models import Author, Collection, Item
from .clock import Clock
from .errors import InvalidDuration, NotFound
from .events import ViewerEventBus, author_seen, item_like_toggled
from .interaction import InteractionChannel
from .navigator import Coordinate, NavigationStop, advance, retreat
from .playback import PlaybackSnapshot, PlaybackState
from .viewed_state import ViewedStateTracker

logger = logging.getLogger(__name__)


class ViewerController:
    def __init__(
        self,
        collection: Collection,
        *,
        settings: Settings | None = None,
        events: ViewerEventBus | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.collection: Collection = collection
        self.events = events or ViewerEventBus()
        self.state = PlaybackState()
        self.viewed = ViewedStateTracker(collection)
        self.interactions = InteractionChannel(collection)
        self.clock = Clock(self.settings.tick_interval_seconds, self.tick, loop=loop)
        self._has_opened = False

    # ── read side ─────────────────────────────────────────────────────────
    @property
    def is_open(self) -> bool:
        return self.state.is_open

    @property
    def finished(self) -> bool:
        """True once the viewer has been opened and has since closed."""

        return self._has_opened and not self.state.is_open

    @property
    def current_author(self) -> Author | None:
        if not self.state.is_open:
            return None
        return self.collection[self.state.author_index]

    @property
    def current_item(self) -> Item | None:
        author = self.current_author
        if author is None:
            return None
        return author.items[self.state.item_index]

    def snapshot(self) -> PlaybackSnapshot:
        return self.state.snapshot()

    def progress_increment(self, item: Item) -> float:
        return PROGRESS_COMPLETE / (item.duration_seconds * self.settings.ticks_per_second)

    # ── commands ──────────────────────────────────────────────────────────
    def open(self, author_id: str) -> PlaybackSnapshot:
        author_index = self._index_of(author_id)
        self._validate_durations()
        # Arming needs an event loop; a failure here must leave the viewer untouched.
        self.clock.arm()

        self.state.start(author_index)
        self._has_opened = True
        self._mark_seen(author_id)
        self.viewed.record_display(self.current_item)
        logger.info("Viewer opened at author %s", author_id)
        return self.snapshot()

    def close(self) -> PlaybackSnapshot:
        self.clock.disarm()
        if self.state.is_open:
            self.state.reset()
            logger.info("Viewer closed")
        return self.snapshot()

    def next(self) -> PlaybackSnapshot:
        if self.state.is_open:
            self._advance()
        return self.snapshot()

    def previous(self) -> PlaybackSnapshot:
        if not self.state.is_open:
            return self.snapshot()
        result = retreat(self.collection, self.state.author_index, self.state.item_index)
        if result is not NavigationStop.NO_OP:
            self._apply(result)
        return self.snapshot()

    def pause(self) -> PlaybackSnapshot:
        if self.state.is_open:
            self.state.paused = True
        return self.snapshot()

    def resume(self) -> PlaybackSnapshot:
        if self.state.is_open:
            self.state.paused = False
        return self.snapshot()

    def toggle_like(self, item_id: str) -> Item:
        item = self.interactions.toggle_like(item_id)
        self.events.emit(item_like_toggled(item.id, item.liked_by_viewer, item.like_count))
        return item

    def tick(self) -> None:
        # A tick already in flight when the viewer closed lands here harmlessly.
        if not self.state.is_open or self.state.paused:
            return
        if self.state.accumulate(self.progress_increment(self.current_item)):
            self._advance()

    # ── internals ─────────────────────────────────────────────────────────
    def _index_of(self, author_id: str) -> int:
        for index, author in enumerate(self.collection):
            if author.id == author_id:
                if not author.items:
                    raise NotFound(f"author {author_id!r} has no items")
                return index
        raise NotFound(f"author {author_id!r} is not in this collection")

    def _validate_durations(self) -> None:
        for author in self.collection:
            for item in author.items:
                if not item.has_valid_duration:
                    raise InvalidDuration(
                        f"item {item.id!r} has non-positive duration {item.duration_seconds!r}"
                    )

    def _advance(self) -> None:
        result = advance(self.collection, self.state.author_index, self.state.item_index)
        if result is NavigationStop.END_OF_COLLECTION:
            logger.info("Viewer reached the end of the collection")
            self.close()
            return
        self._apply(result)

    def _apply(self, coordinate: Coordinate) -> None:
        self.state.move_to(coordinate)
        if coordinate.crossed_author:
            self._mark_seen(self.current_author.id)
        self.viewed.record_display(self.current_item)

    def _mark_seen(self, author_id: str) -> None:
        if self.viewed.mark_seen(author_id):
            self.events.emit(author_seen(author_id))


__all__ = ["ViewerController"]
