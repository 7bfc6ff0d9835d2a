class EmitletError(Exception):
    """Base class for emitlet errors."""


class EventTypeError(EmitletError, KeyError):
    """Raised when an event type is not available on a picked emitter."""
