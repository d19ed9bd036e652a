"""
Main Logger class - level filtering and event emission

Per-level convenience methods (``info``, ``is_info_enabled`` ...) are
generated by ``add_level_methods`` and attached to the Logger class.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Set
import keyword
import re

from log_facade.core import log_level
from log_facade.core.call_site import capture_call_site
from log_facade.core.log_level import InvalidLevelError, Level, to_level
from log_facade.core.logger_config import get_config
from log_facade.core.logging_event import LoggingEvent
from log_facade.core.notifier import EventNotifier, Listener

LOG_TOPIC = "log"

# Generated logging method name -> level it logs at
_LEVEL_METHODS: Dict[str, Level] = {}
# Every attribute add_level_methods has set on Logger
_GENERATED_ATTRS: Set[str] = set()


class Logger:
    """
    Logger for one category.

    Calls below the threshold are discarded before any event is built.
    Accepted calls are published as LoggingEvent objects to the listeners
    registered with ``add_listener``.

    Example:
        logger = Logger("app", "info")
        logger.add_listener(lambda event: print(event.level, event.data))
        logger.warn("disk almost full", {"free": 0.02})
    """

    DEFAULT_CATEGORY = "[default]"
    DEFAULT_LEVEL = log_level.TRACE

    def __init__(self, category: Optional[str] = None, level: Any = None):
        self.category = category or self.DEFAULT_CATEGORY
        self._level: Optional[Level] = None
        self._notifier = EventNotifier()

        if level is not None:
            self.set_level(level)

    @property
    def level(self) -> Level:
        """Effective threshold; DEFAULT_LEVEL while none is set."""
        if self._level is None:
            return type(self).DEFAULT_LEVEL
        return self._level

    @level.setter
    def level(self, level: Any) -> None:
        self.set_level(level)

    @property
    def has_level(self) -> bool:
        """Whether an explicit threshold is set."""
        return self._level is not None

    def set_level(self, level: Any) -> None:
        """
        Set the threshold.

        Args:
            level: Level, level name or level value. Unknown input keeps
                   the current threshold.

        Raises:
            InvalidLevelError: If ``level`` is unknown and strict level
                               checking is configured
        """
        resolved = to_level(level)
        if resolved is None:
            if get_config().strict_levels:
                raise InvalidLevelError(f"Invalid log level: {level!r}")
            resolved = self.level
        self._level = resolved

    def remove_level(self) -> None:
        """Clear the threshold so that DEFAULT_LEVEL applies again."""
        self._level = None

    def is_level_enabled(self, level: Any) -> bool:
        """Check whether ``level`` is at least as severe as the threshold."""
        return self.level.is_less_than_or_equal_to(level)

    def log(self, level: Any, *data: Any) -> None:
        """
        Log at an arbitrary level.

        Unknown levels are logged at INFO. Only the threshold applies here;
        the process-wide write switch gates the per-level methods alone.

        Args:
            level: Level, level name or level value
            *data: Payload values

        Raises:
            InvalidLevelError: If ``level`` is unknown and strict level
                               checking is configured
        """
        resolved = to_level(level)
        if resolved is None:
            if get_config().strict_levels:
                raise InvalidLevelError(f"Invalid log level: {level!r}")
            resolved = log_level.INFO

        if not self.is_level_enabled(resolved):
            return
        self._log(resolved, data)

    def _log(self, level: Level, data: tuple) -> None:
        config = get_config()
        location = None
        if config.trace_enabled:
            location = capture_call_site(config.trace_skip_frames)

        event = LoggingEvent(
            category_name=self.category,
            level=level,
            data=data,
            logger=self,
            location=location,
        )
        self._notifier.publish(LOG_TOPIC, event)

    def add_listener(self, listener: Listener) -> None:
        """
        Subscribe a listener to this logger's events.

        Args:
            listener: Callable receiving each LoggingEvent

        Raises:
            TypeError: If listener is not callable
        """
        self._notifier.subscribe(LOG_TOPIC, listener)

    def remove_listener(self, listener: Listener) -> bool:
        """Unsubscribe a listener. Returns False if it was not subscribed."""
        return self._notifier.unsubscribe(LOG_TOPIC, listener)

    @property
    def listeners(self) -> List[Listener]:
        return self._notifier.listeners(LOG_TOPIC)

    @property
    def notifier(self) -> EventNotifier:
        return self._notifier

    def get_metrics(self) -> dict:
        """Get publish metrics."""
        return self._notifier.get_metrics()

    def __repr__(self) -> str:
        return f"Logger(category={self.category!r}, level={self.level})"


def _method_name(level: Level) -> str:
    name = re.sub(r"[^0-9a-z_]", "_", str(level).lower())
    if not name.isidentifier() or keyword.iskeyword(name):
        raise InvalidLevelError(f"Level {level} cannot be used as a method name")
    return name


def add_level_methods(level: Any) -> str:
    """
    Generate the per-level methods of a level on Logger.

    Attaches ``<name>(*data)`` and ``is_<name>_enabled()``, where ``<name>``
    is the lower-cased level name. Calling it again for the same level
    replaces the existing pair.

    Args:
        level: Level, or name/value of a registered level

    Returns:
        Name of the generated logging method

    Raises:
        InvalidLevelError: If the level is unknown or its name clashes
                           with a Logger attribute

    Example:
        add_levels({"AUDIT": 35})
        add_level_methods("AUDIT")
        logger.audit("login", user)
    """
    resolved = to_level(level)
    if resolved is None:
        raise InvalidLevelError(f"Invalid log level: {level!r}")

    method_name = _method_name(resolved)
    enabled_name = f"is_{method_name}_enabled"
    for attr in (method_name, enabled_name):
        if hasattr(Logger, attr) and attr not in _GENERATED_ATTRS:
            raise InvalidLevelError(f"Level {resolved} would replace Logger.{attr}")

    def is_enabled(self: Logger) -> bool:
        return self.is_level_enabled(resolved)

    def log_at_level(self: Logger, *data: Any) -> None:
        if get_config().write_enabled and self.is_level_enabled(resolved):
            self._log(resolved, data)

    is_enabled.__name__ = enabled_name
    is_enabled.__qualname__ = f"Logger.{enabled_name}"
    is_enabled.__doc__ = f"Check whether {resolved} is enabled."
    log_at_level.__name__ = method_name
    log_at_level.__qualname__ = f"Logger.{method_name}"
    log_at_level.__doc__ = f"Log at {resolved} unless writes are disabled."

    setattr(Logger, enabled_name, is_enabled)
    setattr(Logger, method_name, log_at_level)
    _GENERATED_ATTRS.update((method_name, enabled_name))
    _LEVEL_METHODS[method_name] = resolved
    return method_name


def level_method_names() -> List[str]:
    """Return the names of the generated logging methods."""
    return sorted(_LEVEL_METHODS)


for _name in log_level.WELL_KNOWN_LEVEL_NAMES:
    add_level_methods(_name)
del _name
