"""Session-scoped bookkeeping for which authors and items have been shown."""
from __future__ import annotations

from ..models import Collection, Item
from .errors import NotFound


class ViewedStateTracker:
    def __init__(self, collection: Collection) -> None:
        self._authors = {author.id: author for author in collection}
        self._displayed_items: set[str] = set()

    def is_seen(self, author_id: str) -> bool:
        author = self._authors.get(author_id)
        if author is None:
            raise NotFound(f"author {author_id!r} is not in this collection")
        return author.seen

    def mark_seen(self, author_id: str) -> bool:
        """Mark ``author_id`` as seen; return True only on the first call."""

        author = self._authors.get(author_id)
        if author is None:
            raise NotFound(f"author {author_id!r} is not in this collection")
        if author.seen:
            return False
        author.seen = True
        return True

    def record_display(self, item: Item) -> bool:
        """Count one view for ``item`` the first time it is displayed this session."""

        if item.id in self._displayed_items:
            return False
        self._displayed_items.add(item.id)
        item.view_count += 1
        return True


__all__ = ["ViewedStateTracker"]
