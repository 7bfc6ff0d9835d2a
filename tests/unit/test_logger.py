"""Tests for the logging helper."""

import logging

from emitlet import Emitter, configure_logger
from emitlet.lib.logger import CustomFormatter


def test_configure_logger_console_only(restore_root_logger):
    """Test that only a stream handler is installed without a log file."""
    handlers = configure_logger(logging.INFO)

    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.StreamHandler)
    assert restore_root_logger.level == logging.INFO
    assert restore_root_logger.handlers == handlers


def test_configure_logger_writes_emitter_activity_to_file(tmp_path, restore_root_logger):
    """Test that debug messages from the emitter end up in the log file."""
    log_file = tmp_path / "logs" / "events.log"
    handlers = configure_logger(logging.DEBUG, log_file=log_file)

    Emitter().emit("foo", 1)
    for handler in handlers:
        handler.flush()

    contents = log_file.read_text()
    assert "DEBUG    Emitting event: 'foo'" in contents


def test_custom_formatter_pads_level_name():
    """Test that level names are padded so messages line up."""
    formatter = CustomFormatter("%(levelname)s|%(message)s")
    record = logging.LogRecord("emitlet", logging.INFO, __file__, 1, "hello", None, None)

    assert formatter.format(record) == "INFO    |hello"
