import logging
import logging.handlers
from pathlib import Path

from emitlet.constants import (
    CONSOLE_LOG_FORMAT,
    FILE_LOG_BACKUP_COUNT,
    FILE_LOG_DATE_FORMAT,
    FILE_LOG_FORMAT,
    FILE_LOG_MAX_BYTES,
)


class CustomFormatter(logging.Formatter):
    def format(self, record):
        record.levelname = record.levelname.ljust(8)
        return super().format(record)


def configure_logger(log_level: int = logging.DEBUG, log_file: Path | None = None):
    """Configures the root logger so emitter activity can be traced

    The emitter only ever logs at debug level on its module logger, which propagates to
    the root logger, and never sets up handlers on its own. Applications that want to see registrations and emits call
    this once at startup.

    There are two formatters, one for the console and one for the log file. The console
    formatter is a bit simpler and removes the date and time as it's quite long and noisy.
    The log file will hold all of the detailed information on time and date.

    Args:
        log_level (int): The log level to log at. logging.[DEBUG | INFO | ERROR | CRITICAL | WARN ].
            Defaults to logging.DEBUG.
        log_file (Path | None): Optional file to log to as well. Rotated at 10MB.

    Example:
        ```python
        from emitlet import configure_logger
        configure_logger(logging.DEBUG, Path("/tmp/events.log"))
        ```
    """
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter(CONSOLE_LOG_FORMAT))
    handlers: list[logging.Handler] = [stream_handler]

    if log_file is not None:
        log_file.parent.mkdir(exist_ok=True, parents=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=FILE_LOG_MAX_BYTES, backupCount=FILE_LOG_BACKUP_COUNT
        )
        file_handler.setFormatter(CustomFormatter(FILE_LOG_FORMAT, datefmt=FILE_LOG_DATE_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)
    return handlers
