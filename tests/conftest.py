"""Shared fixtures for log_facade tests"""

import pytest

from log_facade import Logger, reset_config
from log_facade.core import log_level, logger as logger_module


class RecordingListener:
    """Listener that keeps every event it receives."""

    def __init__(self):
        self.events = []

    def __call__(self, event) -> None:
        self.events.append(event)

    def clear(self) -> None:
        self.events.clear()


@pytest.fixture(autouse=True)
def default_config():
    """Run every test against the default process-wide switches."""
    reset_config()
    yield
    reset_config()


@pytest.fixture(autouse=True)
def restore_levels():
    """Undo level registrations and generated Logger methods after each test."""
    levels = dict(log_level._LEVELS_BY_NAME)
    level_methods = dict(logger_module._LEVEL_METHODS)
    generated = set(logger_module._GENERATED_ATTRS)
    attributes = {name: vars(Logger)[name] for name in generated}
    yield

    for name in logger_module._GENERATED_ATTRS - generated:
        if name in vars(Logger):
            delattr(Logger, name)
    for name, function in attributes.items():
        setattr(Logger, name, function)

    logger_module._GENERATED_ATTRS.clear()
    logger_module._GENERATED_ATTRS.update(generated)
    logger_module._LEVEL_METHODS.clear()
    logger_module._LEVEL_METHODS.update(level_methods)
    log_level._LEVELS_BY_NAME.clear()
    log_level._LEVELS_BY_NAME.update(levels)


@pytest.fixture
def recorder():
    return RecordingListener()
