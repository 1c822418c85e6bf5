"""Custom errors with tracking IDs."""

import secrets

from utils.timestamp import format_timestamp


class SuidError(Exception):
    """Base error with unique ID and timestamp for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        # Not a SUID: the clock may be the thing that failed.
        self.error_id = secrets.token_hex(8)
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        return f"[{self.error_id}] {super().__str__()}"


class ClockBeforeEpochError(SuidError):
    """Clock reported a time before 1970-01-01T00:00:00Z. Fatal."""

    def __init__(self, message, clock_ns=None, width=None, **kwargs):
        context = kwargs.pop("context", {})
        if clock_ns is not None:
            context["clock_ns"] = clock_ns
        if width is not None:
            context["width"] = width
        super().__init__(message, context=context, **kwargs)


class LayoutError(SuidError, ValueError):
    """Unknown width or inconsistent bit layout."""

    def __init__(self, message, width=None, **kwargs):
        context = kwargs.pop("context", {})
        if width is not None:
            context["width"] = width
        super().__init__(message, context=context, **kwargs)


class ConfigError(SuidError, ValueError):
    """Invalid configuration value."""

    def __init__(self, message, key=None, **kwargs):
        context = kwargs.pop("context", {})
        if key:
            context["key"] = key
        super().__init__(message, context=context, **kwargs)
