"""Emitter views narrowed to a subset of event types.

A picked emitter is handed to code that should only publish or subscribe to a few
of the events an emitter carries. It shares the source emitter's registry.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from emitlet.constants import WILDCARD
from emitlet.lib.errors import EventTypeError
from emitlet.lib.types import EventType, Handler, LimitedEmitter, Unsubscribe


class PickedEmitter:
    """Forwards on/off/emit to another emitter for the allowed types only."""

    def __init__(self, source: LimitedEmitter, types: Iterable[EventType]) -> None:
        self._source = source
        self.types: frozenset[EventType] = frozenset(types)
        if WILDCARD in self.types:
            raise EventTypeError(f"Wildcard event type can not be picked: {WILDCARD!r}")

    def _check(self, type: EventType) -> None:
        if type not in self.types:
            raise EventTypeError(f"Event type not available on this emitter: {type!r}")

    def on(self, type: EventType | list[EventType], handler: Handler) -> Unsubscribe:
        for event_type in type if isinstance(type, list) else [type]:
            self._check(event_type)
        return self._source.on(type, handler)

    def off(self, type: EventType, handler: Handler | None = None) -> None:
        self._check(type)
        self._source.off(type, handler)

    def emit(self, type: EventType, event: Any = None) -> None:
        self._check(type)
        self._source.emit(type, event)

    def __repr__(self) -> str:
        return f"PickedEmitter(types={sorted(self.types, key=repr)!r})"


def pick(emitter: LimitedEmitter, types: Iterable[EventType] | EventType) -> PickedEmitter:
    """Return a view of ``emitter`` limited to ``types``.

    ``types`` may be a list, set or frozenset of event types. Anything else, including a
    string or a tuple, is a single event type, the same as for ``Emitter.on``.
    """
    if not isinstance(types, (list, set, frozenset)):
        types = [types]
    return PickedEmitter(emitter, types)
