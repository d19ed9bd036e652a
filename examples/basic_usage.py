#!/usr/bin/env python3
"""Basic usage example"""

from log_facade import (
    LoggerBuilder,
    add_levels,
    add_level_methods,
    enable_log_tracing,
    disable_all_log_writes,
)


def print_event(event):
    location = f" ({event.location.file}:{event.location.line})" if event.location else ""
    print(f"[{event.timestamp:%H:%M:%S}] [{event.level}] {event.category_name} -", *event.data, location)


def main():
    # Create logger with builder pattern
    logger = (LoggerBuilder()
        .with_category("example")
        .with_level("debug")
        .with_listener(print_event)
        .build())

    # Log messages
    logger.trace("This is trace")   # below threshold, dropped
    logger.debug("This is debug")
    logger.info("Application started")
    logger.warn("This is warning")
    logger.error("This is error", {"code": 42})

    # Custom level with generated methods
    add_levels({"AUDIT": 35})
    add_level_methods("AUDIT")
    logger.audit("user logged in", "alice")

    # Capture file/line of each call
    enable_log_tracing()
    logger.fatal("This is fatal")

    # Per-level methods are switched off, log() still goes through
    disable_all_log_writes()
    logger.info("Not written")
    logger.log("mark", "Written through log()")


if __name__ == "__main__":
    main()
