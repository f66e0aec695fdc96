"""Project-wide constant values."""
from __future__ import annotations

PROGRESS_COMPLETE = 100.0

AUTHOR_SEEN_EVENT = "author_seen"
ITEM_LIKE_TOGGLED_EVENT = "item_like_toggled"

__all__ = ["PROGRESS_COMPLETE", "AUTHOR_SEEN_EVENT", "ITEM_LIKE_TOGGLED_EVENT"]
