"""
Bit layouts for each supported identifier width.

A layout splits a fixed-width integer into two fields:

    | timestamp (high-order bits) | random (low-order bits) |

The timestamp field holds a counter of `unit_ns` ticks since
1970-01-01T00:00:00Z, truncated to `timestamp_bits` (it wraps silently).
"""

from core.errors import LayoutError

NANOS_PER_MILLI = 1_000_000
NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_HOUR = 3600 * NANOS_PER_SECOND


class Layout:
    __slots__ = ("width", "timestamp_bits", "random_bits", "unit_ns", "width_mask", "random_mask")

    def __init__(self, width, timestamp_bits, random_bits, unit_ns):
        if width % 8 or timestamp_bits <= 0 or random_bits <= 0:
            raise LayoutError("invalid layout", width=width)
        if timestamp_bits + random_bits != width:
            raise LayoutError(f"fields do not fill {width} bits: {timestamp_bits} + {random_bits}", width=width)
        self.width = width
        self.timestamp_bits = timestamp_bits
        self.random_bits = random_bits
        self.unit_ns = unit_ns
        self.width_mask = (1 << width) - 1
        self.random_mask = (1 << random_bits) - 1

    def __repr__(self):
        return f"Layout(width={self.width}, timestamp_bits={self.timestamp_bits}, random_bits={self.random_bits})"

    @property
    def byte_length(self):
        return self.width // 8

    def counter(self, ns):
        """Ticks of this layout's resolution elapsed in `ns` nanoseconds."""
        return ns // self.unit_ns

    def pack(self, counter, rando):
        """Combine a timestamp counter and a random draw into one value."""
        timestamp = (counter << self.random_bits) & self.width_mask
        return timestamp | (rando & self.random_mask)

    def split(self, value):
        """Return `(timestamp_field, random_field)` of an unsigned value."""
        value = self.to_unsigned(value)
        return value >> self.random_bits, value & self.random_mask

    def to_signed(self, value):
        """Reinterpret the unsigned bit pattern as two's complement."""
        value &= self.width_mask
        if value >> (self.width - 1):
            return value - (1 << self.width)
        return value

    def to_unsigned(self, value):
        return value & self.width_mask

    def to_bytes(self, value):
        """Big-endian bytes; byte order matches unsigned numeric order."""
        return self.to_unsigned(value).to_bytes(self.byte_length, "big")


LAYOUT_32 = Layout(32, 16, 16, NANOS_PER_HOUR)
LAYOUT_64 = Layout(64, 40, 24, NANOS_PER_SECOND)
LAYOUT_128 = Layout(128, 64, 64, NANOS_PER_MILLI)

LAYOUTS = {layout.width: layout for layout in (LAYOUT_32, LAYOUT_64, LAYOUT_128)}


def get_layout(width):
    try:
        return LAYOUTS[width]
    except KeyError:
        raise LayoutError(f"unsupported width {width}, expected one of {sorted(LAYOUTS)}", width=width) from None
