from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)


@dataclass
class FormatConfig:
    # Empty means the shortest text that round-trips the single precision value.
    component_format: str = ""
    separator: str = ", "
    use_locale: bool = False


@dataclass
class NumdotConfig:
    format: FormatConfig = field(default_factory=FormatConfig)

    @staticmethod
    def from_yaml(path: Path) -> "NumdotConfig":
        data = yaml.safe_load(Path(path).read_text()) or {}
        logger.debug("loaded numdot config from %s", path)
        return load_config(data)


def load_config(raw: dict) -> NumdotConfig:
    fmt = FormatConfig(**(raw.get("format") or {}))
    values = {k: v for k, v in raw.items() if k != "format"}
    return NumdotConfig(format=fmt, **values)


_active = NumdotConfig()


def get_config() -> NumdotConfig:
    return _active


def configure(config: NumdotConfig) -> NumdotConfig:
    """Replace the active configuration and return the previous one."""
    global _active
    previous = _active
    _active = config
    logger.debug("numdot config activated: %s", config)
    return previous
