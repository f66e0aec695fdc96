"""Pure coordinate arithmetic for moving through an author collection.

Neither function mutates the collection or touches playback timing, so both
can be exercised without a clock. Callers are responsible for resetting
progress and for marking a newly entered author as seen when
``Coordinate.crossed_author`` is set.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..models import Collection


@dataclass(frozen=True, slots=True)
class Coordinate:
    author_index: int
    item_index: int
    crossed_author: bool = False

    def as_tuple(self) -> tuple[int, int]:
        return self.author_index, self.item_index


class NavigationStop(Enum):
    END_OF_COLLECTION = "end_of_collection"
    NO_OP = "no_op"


END_OF_COLLECTION = NavigationStop.END_OF_COLLECTION
NO_OP = NavigationStop.NO_OP


def advance(collection: Collection, author_index: int, item_index: int) -> Coordinate | NavigationStop:
    if item_index + 1 < len(collection[author_index].items):
        return Coordinate(author_index, item_index + 1)
    if author_index + 1 < len(collection):
        return Coordinate(author_index + 1, 0, crossed_author=True)
    return END_OF_COLLECTION


def retreat(collection: Collection, author_index: int, item_index: int) -> Coordinate | NavigationStop:
    if item_index - 1 >= 0:
        return Coordinate(author_index, item_index - 1)
    if author_index - 1 >= 0:
        previous = author_index - 1
        return Coordinate(previous, collection[previous].last_item_index, crossed_author=True)
    return NO_OP


__all__ = [
    "Coordinate",
    "NavigationStop",
    "END_OF_COLLECTION",
    "NO_OP",
    "advance",
    "retreat",
]
