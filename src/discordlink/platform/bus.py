"""
EventBus - in-process publish/subscribe for normalized gateway events.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

from .event import DispatchEvent, EventKind

logger = logging.getLogger(__name__)

EventHandler = Callable[[DispatchEvent], Awaitable[None]]


class EventBus:
    """
    Routes DispatchEvents to async handlers by EventKind.

    Handlers subscribed with ``kind=None`` receive every event, after the
    kind-specific handlers. A failing handler is logged and skipped.
    """

    def __init__(self):
        self._handlers: dict[EventKind | None, list[EventHandler]] = {}

    def subscribe(self, kind: EventKind | None, handler: EventHandler) -> None:
        self._handlers.setdefault(kind, []).append(handler)

    def unsubscribe(self, kind: EventKind | None, handler: EventHandler) -> None:
        handlers = self._handlers.get(kind, [])
        if handler in handlers:
            handlers.remove(handler)

    def handlers_for(self, kind: EventKind) -> list[EventHandler]:
        return [*self._handlers.get(kind, []), *self._handlers.get(None, [])]

    async def publish(self, event: DispatchEvent) -> None:
        for handler in self.handlers_for(event.kind):
            try:
                await handler(event)
            except Exception:
                logger.exception(f"Handler for '{event.kind.value}' failed")
