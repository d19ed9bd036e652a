"""Logger builder pattern"""

from typing import Any, List, Optional

from log_facade.core.logger import Logger
from log_facade.core.notifier import Listener


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._category: Optional[str] = None
        self._level: Any = None
        self._listeners: List[Listener] = []

    def with_category(self, category: str) -> "LoggerBuilder":
        """Set logger category."""
        self._category = category
        return self

    def with_level(self, level: Any) -> "LoggerBuilder":
        """Set threshold (Level, level name or level value)."""
        self._level = level
        return self

    def with_listener(self, listener: Listener) -> "LoggerBuilder":
        """
        Add a listener for the logger's events.

        Args:
            listener: Callable receiving each LoggingEvent

        Returns:
            Self for method chaining

        Raises:
            TypeError: If listener is not callable

        Example:
            events = []
            logger = (LoggerBuilder()
                .with_category("app")
                .with_listener(events.append)
                .build())
        """
        if not callable(listener):
            raise TypeError("listener must be callable")
        self._listeners.append(listener)
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        logger = Logger(self._category, self._level)

        for listener in self._listeners:
            logger.add_listener(listener)

        return logger
