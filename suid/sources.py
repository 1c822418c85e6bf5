"""Clock and random sources injected into generators.

Anything with `now_ns()` works as a clock and anything with `randbits(n)`
works as a random source (`random.Random` included).
"""

import secrets
import time


class SystemClock:
    """Wall clock, nanoseconds since the Unix epoch."""

    def now_ns(self):
        return time.time_ns()


class SystemRandom:
    """OS entropy. Safe to share between threads and tasks."""

    def randbits(self, n):
        return secrets.randbits(n)
