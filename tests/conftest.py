"""Pytest fixtures for emitlet tests."""

import logging

import pytest

from emitlet import Emitter


class Recorder:
    """Collects handler calls in the order they happen."""

    def __init__(self):
        self.calls: list[tuple] = []

    def handler(self, name):
        return lambda event: self.calls.append((name, event))

    def wildcard(self, name):
        return lambda type, event: self.calls.append((name, type, event))


@pytest.fixture
def emitter():
    """Create an Emitter with an empty registry."""
    return Emitter()


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def restore_root_logger():
    """Put back the root logger's handlers and level after a test reconfigures it."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
