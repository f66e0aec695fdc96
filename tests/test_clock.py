"""Timer discipline tests driven on a private asyncio loop."""
from __future__ import annotations

import asyncio
import logging

import pytest

from bites.config import Settings
from bites.services import Clock, PlaybackStatus, ViewerController


def _run_for(loop: asyncio.AbstractEventLoop, seconds: float) -> None:
    loop.run_until_complete(asyncio.sleep(seconds))


def test_clock_ticks_while_armed_and_stops_when_disarmed(event_loop_for_clock):
    ticks = []
    clock = Clock(0.01, lambda: ticks.append(1), loop=event_loop_for_clock)

    clock.arm()
    _run_for(event_loop_for_clock, 0.1)
    clock.disarm()
    fired = len(ticks)
    _run_for(event_loop_for_clock, 0.05)

    assert fired >= 3
    assert len(ticks) == fired
    assert not clock.armed


def test_arm_is_idempotent(event_loop_for_clock):
    ticks = []
    clock = Clock(0.02, lambda: ticks.append(1), loop=event_loop_for_clock)

    clock.arm()
    clock.arm()
    clock.arm()
    _run_for(event_loop_for_clock, 0.05)
    clock.disarm()

    # Three overlapping timers would have produced about six ticks.
    assert 1 <= len(ticks) <= 3


def test_disarm_is_idempotent(event_loop_for_clock):
    clock = Clock(0.01, lambda: None, loop=event_loop_for_clock)

    clock.disarm()
    clock.arm()
    clock.disarm()
    clock.disarm()

    assert not clock.armed


def test_handler_may_disarm_its_own_clock(event_loop_for_clock):
    ticks = []

    def _on_tick() -> None:
        ticks.append(1)
        clock.disarm()

    clock = Clock(0.01, _on_tick, loop=event_loop_for_clock)
    clock.arm()
    _run_for(event_loop_for_clock, 0.08)

    assert ticks == [1]
    assert not clock.armed


def test_failing_handler_is_logged_and_clock_keeps_running(event_loop_for_clock, caplog):
    ticks = []

    def _on_tick() -> None:
        ticks.append(1)
        raise RuntimeError("boom")

    clock = Clock(0.01, _on_tick, loop=event_loop_for_clock)
    with caplog.at_level(logging.ERROR, logger="bites.services.clock"):
        clock.arm()
        _run_for(event_loop_for_clock, 0.06)
        clock.disarm()

    assert len(ticks) >= 2
    assert "Viewer tick handler failed" in caplog.text


def test_arm_outside_running_loop_requires_explicit_loop():
    clock = Clock(0.01, lambda: None)

    with pytest.raises(RuntimeError):
        clock.arm()


def test_clock_rejects_non_positive_interval():
    with pytest.raises(ValueError):
        Clock(0, lambda: None)


def test_controller_plays_collection_to_the_end_in_real_time(collection_factory, event_loop_for_clock):
    settings = Settings(tick_interval_ms=5)
    controller = ViewerController(
        collection_factory([0.02, 0.02], [0.02]),
        settings=settings,
        loop=event_loop_for_clock,
    )

    controller.open("a0")
    _run_for(event_loop_for_clock, 1.0)

    assert controller.snapshot().status is PlaybackStatus.CLOSED
    assert not controller.clock.armed
    assert all(author.seen for author in controller.collection)
