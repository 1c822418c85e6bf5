from suid.generator import (
    SuidGenerator,
    get_generator,
    generate_32,
    generate_32_signed,
    generate_64,
    generate_64_signed,
    generate_128,
    generate_128_signed,
)
from suid.layout import Layout, LAYOUT_32, LAYOUT_64, LAYOUT_128, LAYOUTS, get_layout
from suid.describe import describe

__all__ = [
    "SuidGenerator",
    "get_generator",
    "generate_32",
    "generate_32_signed",
    "generate_64",
    "generate_64_signed",
    "generate_128",
    "generate_128_signed",
    "Layout",
    "LAYOUT_32",
    "LAYOUT_64",
    "LAYOUT_128",
    "LAYOUTS",
    "get_layout",
    "describe",
]
