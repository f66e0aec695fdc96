"""In-process fan-out of viewer events to persistence/telemetry listeners."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from ..constants import AUTHOR_SEEN_EVENT, ITEM_LIKE_TOGGLED_EVENT

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ViewerEvent:
    kind: str
    payload: dict[str, Any] = field(default_factory=dict)

    def as_message(self) -> dict[str, Any]:
        return {"type": self.kind, **self.payload}


def author_seen(author_id: str) -> ViewerEvent:
    return ViewerEvent(AUTHOR_SEEN_EVENT, {"author_id": author_id})


def item_like_toggled(item_id: str, liked: bool, like_count: int) -> ViewerEvent:
    return ViewerEvent(ITEM_LIKE_TOGGLED_EVENT, {"item_id": item_id, "liked": liked, "like_count": like_count})


Listener = Callable[[ViewerEvent], None]


class ViewerEventBus:
    """Delivers each emitted event once to every subscribed listener.

    Delivery is fire-and-forget: a failing listener is logged and does not
    affect the command that produced the event or the other listeners.
    """

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass

        return _unsubscribe

    def emit(self, event: ViewerEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Viewer event listener failed for %s", event.kind)


__all__ = [
    "Listener",
    "ViewerEvent",
    "ViewerEventBus",
    "author_seen",
    "item_like_toggled",
]
