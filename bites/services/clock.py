"""Single-handle repeating timer driving viewer playback."""
from __future__ import annotations

import asyncio
import logging
from typing import Callable

logger = logging.getLogger(__name__)


class Clock:
    """Emits ``on_tick`` every ``interval`` seconds while armed.

    At most one timer handle exists per instance. The event loop is resolved
    when the clock is armed, so callers must arm from inside the loop thread
    unless a loop is supplied explicitly.
    """

    def __init__(
        self,
        interval: float,
        on_tick: Callable[[], None],
        *,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = interval
        self._on_tick = on_tick
        self._loop = loop
        self._handle: asyncio.TimerHandle | None = None

    @property
    def armed(self) -> bool:
        return self._handle is not None

    def arm(self) -> None:
        if self._handle is not None:
            return
        loop = self._loop or asyncio.get_running_loop()
        self._handle = loop.call_later(self.interval, self._fire, loop)

    def disarm(self) -> None:
        handle, self._handle = self._handle, None
        if handle is not None:
            handle.cancel()

    def _fire(self, loop: asyncio.AbstractEventLoop) -> None:
        # Re-arm before dispatching so a handler that disarms wins.
        self._handle = loop.call_later(self.interval, self._fire, loop)
        try:
            self._on_tick()
        except Exception:
            logger.exception("Viewer tick handler failed")


__all__ = ["Clock"]
