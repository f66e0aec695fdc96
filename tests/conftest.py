"""Shared fixtures for the bites viewer test-suite."""
from __future__ import annotations

import asyncio
import os
from datetime import datetime, timedelta, timezone
from typing import Callable, Iterator, Sequence

import pytest

# Keep the HTTP surface's clock effectively idle so responses are deterministic.
os.environ.setdefault("VIEWER_TICK_INTERVAL_MS", "60000")
os.environ.setdefault("VIEWER_MAX_SESSIONS", "64")

from bites.config import Settings  # noqa: E402
from bites.models import Author, Item, MediaRef, MediaType  # noqa: E402
from bites.services import ViewerController, ViewerEventBus  # noqa: E402

_BASE_TIME = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)

CollectionFactory = Callable[..., list[Author]]


def _make_item(item_id: str, author_id: str, duration: float = 5, **overrides) -> Item:
    fields = {
        "id": item_id,
        "author_id": author_id,
        "media": MediaRef(type=MediaType.IMAGE, url=f"https://cdn.example.test/{item_id}.jpg"),
        "duration_seconds": duration,
        "caption": f"bite {item_id}",
        "created_at": _BASE_TIME,
    }
    fields.update(overrides)
    return Item(**fields)


@pytest.fixture
def collection_factory() -> CollectionFactory:
    """Build authors ``a0, a1, ...`` whose item durations are given per author."""

    def _factory(*durations: Sequence[float]) -> list[Author]:
        authors = []
        for author_index, item_durations in enumerate(durations):
            author_id = f"a{author_index}"
            items = [
                _make_item(
                    f"{author_id}-i{item_index}",
                    author_id,
                    duration,
                    created_at=_BASE_TIME + timedelta(minutes=10 * author_index + item_index),
                )
                for item_index, duration in enumerate(item_durations)
            ]
            authors.append(Author(id=author_id, display_name=f"Author {author_index}", items=items))
        return authors

    return _factory


@pytest.fixture
def event_loop_for_clock() -> Iterator[asyncio.AbstractEventLoop]:
    """A private loop that is only run when a test drives it explicitly."""

    loop = asyncio.new_event_loop()
    yield loop
    loop.close()


@pytest.fixture
def settings() -> Settings:
    return Settings(tick_interval_ms=100)


@pytest.fixture
def controller_factory(
    settings: Settings, event_loop_for_clock: asyncio.AbstractEventLoop
) -> Callable[[list[Author]], ViewerController]:
    def _factory(collection: list[Author], events: ViewerEventBus | None = None) -> ViewerController:
        return ViewerController(collection, settings=settings, events=events, loop=event_loop_for_clock)

    return _factory
