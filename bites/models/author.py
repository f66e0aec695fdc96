"""In-memory records for authors and the ordered collection they form."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .bite import Item


@dataclass(slots=True)
class Author:
    id: str
    display_name: str
    items: list[Item] = field(default_factory=list)
    avatar_ref: str | None = None
    seen: bool = False

    @property
    def has_unseen_items(self) -> bool:
        return not self.seen

    @property
    def last_item_index(self) -> int:
        return len(self.items) - 1


Collection = Sequence[Author]


def build_collection(authors: Iterable[Author]) -> list[Author]:
    """Return the playable collection: authors without items are dropped.

    Raises ``ValueError`` when two authors or two items share an id, or when an
    item is liked by the viewer while its like count is zero.
    """

    playable: list[Author] = []
    author_ids: set[str] = set()
    item_ids: set[str] = set()
    for author in authors:
        if author.id in author_ids:
            raise ValueError(f"duplicate author id {author.id!r}")
        author_ids.add(author.id)
        if not author.items:
            continue
        for item in author.items:
            if item.id in item_ids:
                raise ValueError(f"duplicate item id {item.id!r}")
            item_ids.add(item.id)
            if item.liked_by_viewer and item.like_count < 1:
                raise ValueError(f"item {item.id!r} is liked by the viewer but has like_count {item.like_count}")
        playable.append(author)
    return playable


__all__ = ["Author", "Collection", "build_collection"]
