"""
Core module for the logging facade

This module contains the fundamental classes:
- Logger: Level filtering and event emission
- LoggerBuilder: Builder pattern for logger construction
- LoggingEvent: Immutable record of one accepted log call
- Level: Ordered severity
- LoggerConfig: Process-wide switches
"""

from log_facade.core.log_level import Level, InvalidLevelError
from log_facade.core.logging_event import LoggingEvent
from log_facade.core.call_site import CallSite
from log_facade.core.notifier import EventNotifier
from log_facade.core.logger_config import LoggerConfig
from log_facade.core.logger import Logger
from log_facade.core.logger_builder import LoggerBuilder

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LoggingEvent",
    "CallSite",
    "EventNotifier",
    "Level",
    "InvalidLevelError",
    "LoggerConfig",
]
