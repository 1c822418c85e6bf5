from internal.logging import get_logger, LogLevel, StructuredLogger
from utils.timestamp import now_micros, format_timestamp
from core.errors import SuidError, ClockBeforeEpochError, LayoutError, ConfigError

__all__ = [
    "get_logger",
    "LogLevel",
    "StructuredLogger",
    "now_micros",
    "format_timestamp",
    "SuidError",
    "ClockBeforeEpochError",
    "LayoutError",
    "ConfigError",
]
