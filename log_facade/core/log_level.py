"""
Log levels and the level registry

Levels are ordered by their integer value. Values of the well-known levels
are compatible with Python's logging module.
"""

from functools import total_ordering
from typing import Any, Dict, List, Optional
import threading


class InvalidLevelError(ValueError):
    """Raised when a level cannot be resolved or registered."""


@total_ordering
class Level:
    """
    A named, totally ordered severity.

    Instances are immutable; two levels are equal when their values are.
    """

    __slots__ = ("_value", "_name")

    def __init__(self, value: int, name: str):
        self._value = value
        self._name = name.upper()

    @property
    def value(self) -> int:
        return self._value

    @property
    def name(self) -> str:
        return self._name

    def is_less_than_or_equal_to(self, other: Any) -> bool:
        """
        Check whether this level is at most as severe as ``other``.

        Args:
            other: Level, level name or level value

        Returns:
            False when ``other`` cannot be resolved
        """
        other_level = to_level(other)
        if other_level is None:
            return False
        return self._value <= other_level.value

    def is_greater_than_or_equal_to(self, other: Any) -> bool:
        """Check whether this level is at least as severe as ``other``."""
        other_level = to_level(other)
        if other_level is None:
            return False
        return self._value >= other_level.value

    def is_equal_to(self, other: Any) -> bool:
        """Check whether ``other`` resolves to a level of the same value."""
        other_level = to_level(other)
        if other_level is None:
            return False
        return self._value == other_level.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        """Canonical name of the level."""
        return self._name

    def __repr__(self) -> str:
        return f"Level({self._value}, {self._name!r})"


ALL = Level(0, "ALL")
TRACE = Level(5, "TRACE")        # Most verbose, detailed tracing
DEBUG = Level(10, "DEBUG")
INFO = Level(20, "INFO")
WARN = Level(30, "WARN")
ERROR = Level(40, "ERROR")
FATAL = Level(50, "FATAL")
MARK = Level(90, "MARK")         # Always-interesting markers, above FATAL
OFF = Level(100, "OFF")          # Logging disabled

# Names used to generate the per-level Logger methods at import time
WELL_KNOWN_LEVEL_NAMES = ("Trace", "Debug", "Info", "Warn", "Error", "Fatal", "Mark")

_registry_lock = threading.Lock()

# Levels the Logger defaults are bound to; add_levels() refuses to redefine them
BUILTIN_LEVELS: Dict[str, Level] = {
    level.name: level
    for level in (ALL, TRACE, DEBUG, INFO, WARN, ERROR, FATAL, MARK, OFF)
}

_LEVELS_BY_NAME: Dict[str, Level] = dict(BUILTIN_LEVELS)

# Alternative spellings accepted by to_level()
LEVEL_ALIASES: Dict[str, str] = {
    "WARNING": "WARN",
    "CRITICAL": "FATAL",
}


def to_level(level_like: Any, default: Optional[Level] = None) -> Optional[Level]:
    """
    Resolve a level-like value to a registered Level.

    Args:
        level_like: Level instance, level name (case-insensitive) or
                    exact level value
        default: Returned when ``level_like`` cannot be resolved

    Returns:
        The resolved Level, or ``default``

    Example:
        to_level("warn")            # WARN
        to_level(40)                # ERROR
        to_level("nope", INFO)      # INFO
    """
    if isinstance(level_like, Level):
        return level_like

    if isinstance(level_like, str):
        name = level_like.strip().upper()
        name = LEVEL_ALIASES.get(name, name)
        with _registry_lock:
            return _LEVELS_BY_NAME.get(name, default)

    # bool is an int subclass but never a level value
    if isinstance(level_like, int) and not isinstance(level_like, bool):
        with _registry_lock:
            for level in _LEVELS_BY_NAME.values():
                if level.value == level_like:
                    return level

    return default


def add_levels(levels: Dict[str, int]) -> List[Level]:
    """
    Register custom levels.

    Args:
        levels: Mapping of level name to integer value

    Returns:
        The registered Level objects, in mapping order

    Raises:
        InvalidLevelError: If a name is empty, a value is not an int, or
                           a built-in level or alias would be redefined

    Example:
        add_levels({"AUDIT": 35})
    """
    registered = []
    for name, value in levels.items():
        if not isinstance(name, str) or not name.strip():
            raise InvalidLevelError(f"Invalid level name: {name!r}")
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidLevelError(f"Invalid value for level {name!r}: {value!r}")
        level = Level(value, name.strip())
        if level.name in BUILTIN_LEVELS or level.name in LEVEL_ALIASES:
            raise InvalidLevelError(f"Built-in level {level.name} cannot be redefined")
        registered.append(level)

    with _registry_lock:
        for level in registered:
            _LEVELS_BY_NAME[level.name] = level

    return registered


def get_levels() -> List[Level]:
    """Return all registered levels ordered by value."""
    with _registry_lock:
        return sorted(_LEVELS_BY_NAME.values())
