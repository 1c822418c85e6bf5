"""
Sortable unique identifier generation.

    generate_32()   16 bit hours since epoch        + 16 random bits
    generate_64()   40 bit seconds since epoch      + 24 random bits
    generate_128()  64 bit milliseconds since epoch + 64 random bits

The `_signed` variants return the same bit pattern read as two's complement.
"""

from core.errors import ClockBeforeEpochError
from internal.logging import get_logger
from suid.layout import LAYOUT_32, LAYOUT_64, LAYOUT_128, get_layout
from suid.sources import SystemClock, SystemRandom


class SuidGenerator:
    """Stateless generator for one layout. Calls share nothing but the sources."""

    def __init__(self, layout, clock=None, random_source=None):
        self.layout = layout
        self.clock = clock if clock is not None else SystemClock()
        self.random_source = random_source if random_source is not None else SystemRandom()

    def generate(self):
        ns = self.clock.now_ns()
        if ns < 0:
            get_logger().error("clock before unix epoch", clock_ns=ns, width=self.layout.width)
            raise ClockBeforeEpochError("clock reports a time before 1970-01-01T00:00:00Z",
                                        clock_ns=ns, width=self.layout.width)
        rando = self.random_source.randbits(self.layout.width)
        return self.layout.pack(self.layout.counter(ns), rando)

    def generate_signed(self):
        return self.layout.to_signed(self.generate())


_default_generators = {
    layout.width: SuidGenerator(layout) for layout in (LAYOUT_32, LAYOUT_64, LAYOUT_128)
}


def get_generator(width):
    """Default generator for `width`, backed by the system clock and OS entropy."""
    return _default_generators[get_layout(width).width]


def generate_32():
    return _default_generators[32].generate()


def generate_32_signed():
    return _default_generators[32].generate_signed()


def generate_64():
    return _default_generators[64].generate()


def generate_64_signed():
    return _default_generators[64].generate_signed()


def generate_128():
    return _default_generators[128].generate()


def generate_128_signed():
    return _default_generators[128].generate_signed()
