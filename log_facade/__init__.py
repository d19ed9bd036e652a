"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Python Log Facade - severity-levelled loggers that publish logging events
to registered listeners
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from log_facade.core.log_level import (
    Level,
    InvalidLevelError,
    ALL,
    TRACE,
    DEBUG,
    INFO,
    WARN,
    ERROR,
    FATAL,
    MARK,
    OFF,
    to_level,
    add_levels,
    get_levels,
)
from log_facade.core.logging_event import LoggingEvent
from log_facade.core.call_site import CallSite, capture_call_site
from log_facade.core.notifier import EventNotifier
from log_facade.core.logger_config import (
    LoggerConfig,
    configure,
    get_config,
    reset_config,
    enable_all_log_writes,
    disable_all_log_writes,
    is_log_writes_enabled,
    enable_log_tracing,
    disable_log_tracing,
    is_log_tracing_enabled,
)
from log_facade.core.logger import Logger, LOG_TOPIC, add_level_methods, level_method_names
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
    "LOG_TOPIC",
    "ALL",
    "TRACE",
    "DEBUG",
    "INFO",
    "WARN",
    "ERROR",
    "FATAL",
    "MARK",
    "OFF",
    "to_level",
    "add_levels",
    "get_levels",
    "capture_call_site",
    "configure",
    "get_config",
    "reset_config",
    "enable_all_log_writes",
    "disable_all_log_writes",
    "is_log_writes_enabled",
    "enable_log_tracing",
    "disable_log_tracing",
    "is_log_tracing_enabled",
    "add_level_methods",
    "level_method_names",
]
