"""Configuration management for Kanboard."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .core.board import DEFAULT_PRIORITY, URGENT_PRIORITY

logger = logging.getLogger(__name__)

KANBOARD_HOME = Path(os.environ.get("KANBOARD_HOME", Path.home() / "kanboard"))
CONFIG_FILE = KANBOARD_HOME / "config" / "kanboard.conf"


@dataclass
class Config:
    """Kanboard configuration."""

    seed_file: str = ""
    default_priority: int = DEFAULT_PRIORITY
    urgent_priority: int = URGENT_PRIORITY


def _parse_int(key: str, value: str, default: int) -> int:
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid integer for {key.upper()}: {value!r}, using {default}")
        return default


def load_config(path: Path | None = None) -> Config:
    """Load configuration from kanboard.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = value.strip()

        # Handle quoted values with inline comments: "value" # comment
        if value[:1] in ('"', "'"):
            quote = value[0]
            end_quote = value.find(quote, 1)
            value = value[1:end_quote] if end_quote != -1 else value[1:]
        elif "#" in value:
            value = value.split("#")[0].strip()

        match key:
            case "seed_file":
                config.seed_file = value
            case "default_priority":
                config.default_priority = _parse_int(key, value, config.default_priority)
            case "urgent_priority":
                config.urgent_priority = _parse_int(key, value, config.urgent_priority)
            case _:
                logger.debug(f"Ignoring unknown config key {key!r}")

    return config
