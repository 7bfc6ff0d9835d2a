"""Type aliases and protocols shared by the emitters."""

from __future__ import annotations

from collections.abc import Callable, Hashable, MutableMapping
from typing import Any, Protocol, runtime_checkable

EventType = Hashable

# A handler takes the emitted payload and returns nothing
Handler = Callable[[Any], None]
WildcardHandler = Callable[[EventType, Any], None]

EventHandlerList = list[Handler]
WildcardEventHandlerList = list[WildcardHandler]

# Event type (or WILDCARD) -> handlers, in registration order
EventHandlerMap = MutableMapping[EventType, list[Callable[..., None]]]

Unsubscribe = Callable[[], None]


@runtime_checkable
class LimitedEmitter(Protocol):
    """The on/off/emit surface, without registry access or wildcard handlers."""

    def on(self, type: EventType | list[EventType], handler: Handler) -> Unsubscribe: ...

    def off(self, type: EventType, handler: Handler | None = None) -> None: ...

    def emit(self, type: EventType, event: Any = None) -> None: ...
