"""Pytest fixtures for all tests."""

import io

import pytest

from internal.logging import LogLevel, StructuredLogger
from suid.layout import NANOS_PER_HOUR


class FrozenClock:
    """Clock that only moves when told to."""

    def __init__(self, ns=0):
        self.ns = ns

    def now_ns(self):
        return self.ns

    def advance(self, ns):
        self.ns += ns


class FixedRandom:
    """Random source returning queued values, repeating the last one."""

    def __init__(self, *values):
        self.values = list(values)
        self.requested = []

    def randbits(self, n):
        self.requested.append(n)
        if len(self.values) > 1:
            return self.values.pop(0)
        return self.values[0]


class FailingRandom:
    def randbits(self, n):
        raise OSError("entropy source unavailable")


@pytest.fixture
def clock():
    """Clock frozen at exactly one hour after the epoch."""
    return FrozenClock(NANOS_PER_HOUR)


@pytest.fixture
def ones():
    """Random source returning all ones for any width."""
    return FixedRandom((1 << 128) - 1)


@pytest.fixture
def log_stream():
    """Route the process logger into a buffer for the duration of a test."""
    stream = io.StringIO()
    StructuredLogger.configure(LogLevel.DEBUG, stream)
    yield stream
    StructuredLogger.configure()
