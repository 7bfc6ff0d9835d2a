"""Synchronous event emitter with wildcard handlers."""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable

from emitlet.constants import WILDCARD
from emitlet.lib.types import EventHandlerMap, EventType, Unsubscribe

logger = logging.getLogger(__name__)


def _is_same_handler(registered: Callable[..., None], handler: Callable[..., None]) -> bool:
    """Identity match, treating fresh lookups of the same bound method as one handler."""
    if registered is handler:
        return True
    if inspect.ismethod(registered) and inspect.ismethod(handler):
        return registered.__func__ is handler.__func__ and registered.__self__ is handler.__self__
    if inspect.isbuiltin(registered) and inspect.isbuiltin(handler):
        return registered.__self__ is handler.__self__ and registered.__name__ == handler.__name__
    return False


class Emitter:
    """Minimal publish/subscribe dispatcher.

    Handlers are called synchronously in registration order; exceptions bubble up
    normally and stop the remaining handlers of that emit. Handlers registered under
    WILDCARD are called with (type, event) after the type's own handlers.

    The registry is exposed as ``all`` and may be read or mutated directly. A
    mapping passed to the constructor is used as-is, not copied.
    """

    def __init__(self, all: EventHandlerMap | None = None) -> None:
        self.all: EventHandlerMap = all if all is not None else {}

    def on(self, type: EventType | list[EventType], handler: Callable[..., None]) -> Unsubscribe:
        """Register a handler for one event type or a list of them.

        Returns a function that unregisters the handler from every type it was
        registered under here. Calling it more than once is harmless.
        """
        types = list(type) if isinstance(type, list) else [type]
        for event_type in types:
            handlers = self.all.get(event_type)
            if handlers is None:
                self.all[event_type] = [handler]
            else:
                handlers.append(handler)
            logger.debug(f"Registered handler for event: {event_type!r}")

        def unsubscribe() -> None:
            for event_type in types:
                self.off(event_type, handler)

        return unsubscribe

    def off(self, type: EventType, handler: Callable[..., None] | None = None) -> None:
        """Remove a handler for an event type.

        Handlers are matched by identity, and only the first matching registration is
        removed. If handler is omitted, all handlers of the type are removed.
        """
        handlers = self.all.get(type)
        if handlers is None:
            return

        if handler is None:
            self.all[type] = []
            logger.debug(f"Cleared all handlers for event: {type!r}")
            return

        for index, registered in enumerate(handlers):
            if _is_same_handler(registered, handler):
                break
        else:
            return
        handlers.pop(index)
        logger.debug(f"Removed handler for event: {type!r}")

    def emit(self, type: EventType, event: Any = None) -> None:
        """Call all handlers for the event type, then all wildcard handlers.

        Each list is copied before dispatch, so handlers added or removed while
        emitting only take effect on the next emit. Emitting WILDCARD itself is not
        supported.
        """
        logger.debug(f"Emitting event: {type!r}")
        handlers = self.all.get(type)
        if handlers:
            for handler in list(handlers):
                handler(event)

        handlers = self.all.get(WILDCARD)
        if handlers:
            for handler in list(handlers):
                handler(type, event)


def create(all: EventHandlerMap | None = None) -> Emitter:
    """Create an emitter, optionally backed by an existing registry."""
    return Emitter(all)
