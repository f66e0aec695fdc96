"""Like toggling for items addressed by id, independent of playback."""
from __future__ import annotations

import logging

from ..models import Collection, Item
from .errors import NotFound

logger = logging.getLogger(__name__)


class InteractionChannel:
    """Owns the per-item social counters of one viewer instance."""

    def __init__(self, collection: Collection) -> None:
        self._items: dict[str, Item] = {item.id: item for author in collection for item in author.items}

    def get_item(self, item_id: str) -> Item:
        item = self._items.get(item_id)
        if item is None:
            raise NotFound(f"item {item_id!r} is not in this collection")
        return item

    def toggle_like(self, item_id: str) -> Item:
        item = self.get_item(item_id)
        if item.liked_by_viewer:
            item.liked_by_viewer = False
            item.like_count -= 1
        else:
            item.liked_by_viewer = True
            item.like_count += 1
        logger.debug("Item %s like toggled (liked=%s, count=%d)", item.id, item.liked_by_viewer, item.like_count)
        return item


__all__ = ["InteractionChannel"]
