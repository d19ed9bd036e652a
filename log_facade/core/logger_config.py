"""
Process-wide logger configuration

A single LoggerConfig instance holds the switches shared by every Logger.
"""

from dataclasses import dataclass


@dataclass
class LoggerConfig:
    """
    Process-wide logger switches.

    Attributes:
        write_enabled: Gate for the generated per-level methods
                       (``logger.info(...)`` etc.); ``Logger.log`` ignores it
        trace_enabled: Capture the call site of every emitted event
        trace_skip_frames: Extra frames to skip past the first caller
                           outside this package when capturing call sites
        strict_levels: Raise InvalidLevelError instead of falling back when
                       ``set_level``/``log`` receive an unknown level
    """

    write_enabled: bool = True
    trace_enabled: bool = False
    trace_skip_frames: int = 0
    strict_levels: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.trace_skip_frames < 0:
            raise ValueError("trace_skip_frames cannot be negative")

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging (call sites captured)."""
        return cls(trace_enabled=True)

    @classmethod
    def silent_config(cls) -> "LoggerConfig":
        """Create configuration with per-level writes disabled."""
        return cls(write_enabled=False)


_config = LoggerConfig.default()


def get_config() -> LoggerConfig:
    """Return the live process-wide configuration."""
    return _config


def configure(config: LoggerConfig) -> None:
    """Replace the process-wide configuration."""
    global _config
    if not isinstance(config, LoggerConfig):
        raise TypeError("config must be a LoggerConfig")
    _config = config


def reset_config() -> None:
    """Restore the default configuration."""
    configure(LoggerConfig.default())


def enable_all_log_writes() -> None:
    """Enable the generated per-level log methods on all loggers."""
    _config.write_enabled = True


def disable_all_log_writes() -> None:
    """Disable the generated per-level log methods on all loggers."""
    _config.write_enabled = False


def is_log_writes_enabled() -> bool:
    return _config.write_enabled


def enable_log_tracing() -> None:
    """Enable call-site capture (path, file, function, line, column)."""
    _config.trace_enabled = True


def disable_log_tracing() -> None:
    """Disable call-site capture."""
    _config.trace_enabled = False


def is_log_tracing_enabled() -> bool:
    return _config.trace_enabled
