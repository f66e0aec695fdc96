"""Tests for session bookkeeping: capacity, eviction and discard notifications."""
from __future__ import annotations

import asyncio

import pytest

from bites.config import Settings
from bites.services import SessionLimitReached, SessionNotFound, ViewerController
from bites.services.session_registry import ViewerSessionRegistry


@pytest.fixture
def registry() -> ViewerSessionRegistry:
    return ViewerSessionRegistry(Settings(max_sessions=2))


def _play_to_the_end(controller: ViewerController) -> None:
    async def _run() -> None:
        controller.open("a0")
        while controller.is_open:
            controller.next()

    asyncio.run(_run())


def test_full_registry_evicts_finished_sessions(registry, collection_factory):
    discarded = []
    registry.on_discard(discarded.append)
    finished_id, finished = registry.create(collection_factory([5]))
    waiting_id, _ = registry.create(collection_factory([5]))
    _play_to_the_end(finished)

    new_id, _ = registry.create(collection_factory([5]))

    assert finished_id not in registry
    assert waiting_id in registry
    assert new_id in registry
    assert len(registry) == 2
    assert discarded == [finished_id]


def test_full_registry_keeps_sessions_never_opened(registry, collection_factory):
    registry.create(collection_factory([5]))
    registry.create(collection_factory([5]))

    with pytest.raises(SessionLimitReached):
        registry.create(collection_factory([5]))

    assert len(registry) == 2


def test_discard_closes_controller_and_notifies(registry, collection_factory):
    discarded = []
    registry.on_discard(discarded.append)
    session_id, controller = registry.create(collection_factory([5]))

    registry.discard(session_id)

    assert discarded == [session_id]
    assert not controller.clock.armed
    with pytest.raises(SessionNotFound):
        registry.get(session_id)
    with pytest.raises(SessionNotFound):
        registry.discard(session_id)


def test_failing_discard_listener_does_not_block_others(registry, collection_factory):
    def _broken(session_id: str) -> None:
        raise RuntimeError("listener down")

    discarded = []
    registry.on_discard(_broken)
    registry.on_discard(discarded.append)
    first_id, _ = registry.create(collection_factory([5]))
    second_id, _ = registry.create(collection_factory([5]))

    assert registry.close_all() == 2
    assert discarded == [first_id, second_id]
    assert len(registry) == 0
