"""Unit tests for forward/backward coordinate arithmetic."""
from __future__ import annotations

from bites.services.navigator import END_OF_COLLECTION, NO_OP, Coordinate, advance, retreat


def test_advance_moves_within_author(collection_factory):
    collection = collection_factory([5, 5, 5])

    result = advance(collection, 0, 0)

    assert result == Coordinate(0, 1)
    assert result.crossed_author is False


def test_advance_crosses_to_first_item_of_next_author(collection_factory):
    collection = collection_factory([5, 5], [4, 4, 4])

    result = advance(collection, 0, 1)

    assert result.as_tuple() == (1, 0)
    assert result.crossed_author is True


def test_advance_past_last_item_signals_end(collection_factory):
    collection = collection_factory([5, 5], [4])

    assert advance(collection, 1, 0) is END_OF_COLLECTION


def test_retreat_moves_within_author(collection_factory):
    collection = collection_factory([5, 5, 5])

    assert retreat(collection, 0, 2) == Coordinate(0, 1)


def test_retreat_jumps_to_last_item_of_previous_author(collection_factory):
    collection = collection_factory([5, 5], [4, 4, 4])

    result = retreat(collection, 1, 0)

    assert result.as_tuple() == (0, 1)
    assert result.crossed_author is True


def test_retreat_at_very_first_item_is_noop(collection_factory):
    collection = collection_factory([5, 5], [4])

    assert retreat(collection, 0, 0) is NO_OP


def test_navigation_does_not_touch_collection(collection_factory):
    collection = collection_factory([5], [4, 4])
    before = [(author.id, author.seen, [item.id for item in author.items]) for author in collection]

    advance(collection, 0, 0)
    retreat(collection, 1, 0)

    assert [(author.id, author.seen, [item.id for item in author.items]) for author in collection] == before
