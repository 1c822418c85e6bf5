"""SUID demo - prints fresh identifiers in each configured format."""

import sys

from config import load_config
from internal.logging import LogLevel, StructuredLogger, get_logger
from suid.generator import get_generator
from utils.crash import configure as configure_crash, install_crash_handler
from utils.formatting import render


def run(config, out=None):
    """One line per width, a blank line after each format group."""
    out = out or sys.stdout
    log = get_logger()
    for fmt in config.formats:
        for width in config.widths:
            generator = get_generator(width)
            value = generator.generate()
            log.debug("generated", width=width, fmt=fmt, value=value)
            print(render(value, generator.layout, fmt), file=out)
        print(file=out)


def main():
    config = load_config()
    configure_crash(config.logging.crash_file)
    install_crash_handler()
    StructuredLogger.configure(LogLevel.parse(config.logging.level))

    get_logger().info("suid demo start", widths=list(config.demo.widths), formats=list(config.demo.formats))
    run(config.demo)


if __name__ == "__main__":
    main()
