"""Text renderings of identifiers."""

FORMATS = ("decimal", "padded_binary", "binary", "hex", "bytes")


def render(value, layout, fmt="decimal"):
    """Render an identifier. Signed values render as their unsigned bits.

    padded_binary is zero padded to the layout width, bytes is the big-endian
    byte list, e.g. `[0, 1, 255, 255]`.
    """
    value = layout.to_unsigned(value)
    if fmt == "decimal":
        return str(value)
    if fmt == "padded_binary":
        return format(value, f"0{layout.width}b")
    if fmt == "binary":
        return format(value, "b")
    if fmt == "hex":
        return format(value, "x")
    if fmt == "bytes":
        return str(list(layout.to_bytes(value)))
    raise ValueError(f"unknown format {fmt!r}, expected one of {FORMATS}")
