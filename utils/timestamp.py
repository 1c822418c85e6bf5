"""Microsecond timestamp utilities."""

import time
from datetime import datetime, timedelta, timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def now_micros():
    """Current time in microseconds since Unix epoch."""
    return time.time_ns() // 1_000


def format_timestamp(epoch_us=None):
    """Format timestamp as ISO 8601 with microseconds."""
    if epoch_us is None:
        epoch_us = now_micros()

    # timedelta arithmetic also handles instants before the epoch
    dt = _EPOCH + timedelta(microseconds=epoch_us)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.%f") + "Z"
