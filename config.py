import json
from pathlib import Path

from core.errors import ConfigError
from internal.logging import LogLevel
from suid.layout import LAYOUTS
from utils.formatting import FORMATS

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


class LoggingConfig:
    __slots__ = ("level", "crash_file")

    def __init__(self, level="INFO", crash_file="logs/crash.log"):
        try:
            LogLevel.parse(level)
        except KeyError:
            raise ConfigError(f"unknown log level {level!r}", key="logging.level") from None
        self.level = level
        self.crash_file = crash_file


class DemoConfig:
    __slots__ = ("widths", "formats")

    def __init__(self, widths=(32, 64, 128), formats=FORMATS):
        for width in widths:
            if width not in LAYOUTS:
                raise ConfigError(f"unsupported width {width!r}", key="demo.widths")
        for fmt in formats:
            if fmt not in FORMATS:
                raise ConfigError(f"unknown format {fmt!r}", key="demo.formats")
        self.widths = tuple(widths)
        self.formats = tuple(formats)


class Config:
    __slots__ = ("logging", "demo")

    def __init__(self, logging=None, demo=None):
        self.logging = logging or LoggingConfig()
        self.demo = demo or DemoConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            LoggingConfig(**d.get("logging", {})),
            DemoConfig(**d.get("demo", {})),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))
