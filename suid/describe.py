"""Decode an identifier back into its fields."""

from utils.timestamp import format_timestamp


def describe(value, layout):
    """Break `value` (signed or unsigned view) into its timestamp and random fields.

    `created` is the instant encoded in the timestamp field. Once the field has
    wrapped it names the wrapped instant, and it is None when the instant falls
    outside the range a datetime can represent.
    """
    unsigned = layout.to_unsigned(value)
    timestamp_field, random_field = layout.split(unsigned)
    try:
        created = format_timestamp(timestamp_field * layout.unit_ns // 1_000)
    except OverflowError:
        created = None
    return {
        "value": unsigned,
        "hex": f"{unsigned:0{layout.width // 4}x}",
        "timestamp_field": timestamp_field,
        "random_field": random_field,
        "created": created,
    }
