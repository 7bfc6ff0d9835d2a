from emitlet.constants import WILDCARD
from emitlet.lib.errors import EmitletError, EventTypeError
from emitlet.lib.events import Emitter, create
from emitlet.lib.logger import configure_logger
from emitlet.lib.picked import PickedEmitter, pick
from emitlet.lib.types import LimitedEmitter
from emitlet.version import __version__

PACKAGE = __package__
VERSION = __version__

__all__ = [
    "VERSION",
    "PACKAGE",
    "WILDCARD",
    Emitter.__name__,
    PickedEmitter.__name__,
    LimitedEmitter.__name__,
    EmitletError.__name__,
    EventTypeError.__name__,
    create.__name__,
    pick.__name__,
    configure_logger.__name__,
]
