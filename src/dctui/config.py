"""Configuration for dctui. Stored as JSON at ~/.dctui/config.json."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "DCTUI_CONFIG_DIR"
CONFIG_FILE_NAME = "config.json"
LOG_LEVELS = ("debug", "info", "warning", "error")


@dataclass
class Config:
    """Client configuration."""

    debug: bool = False
    log_level: str = "info"
    log_file: str | None = None
    keybindings: dict[str, Any] = field(default_factory=dict)


def get_config_dir() -> Path:
    return Path(os.environ.get(CONFIG_DIR_ENV, Path.home() / ".dctui")).expanduser()


def get_config_path() -> Path:
    return get_config_dir() / CONFIG_FILE_NAME


def config_from_dict(data: dict[str, Any]) -> Config:
    """Build a :class:`Config`, ignoring unknown keys and ill-typed values."""
    config = Config()
    if isinstance(data.get("debug"), bool):
        config.debug = data["debug"]
    level = data.get("logLevel")
    if isinstance(level, str) and level.lower() in LOG_LEVELS:
        config.log_level = level.lower()
    if isinstance(data.get("logFile"), str):
        config.log_file = data["logFile"]
    keybindings = data.get("keybindings")
    if isinstance(keybindings, dict):
        config.keybindings = {
            action: keys
            for action, keys in keybindings.items()
            if isinstance(keys, str) or (isinstance(keys, list) and all(isinstance(k, str) for k in keys))
        }
    return config


def load_config(path: str | Path | None = None) -> Config:
    """Load the config file; a missing or broken file yields the defaults."""
    config_path = Path(path).expanduser() if path is not None else get_config_path()
    if not config_path.exists():
        return Config()
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Error reading config %s: %s", config_path, e)
        return Config()
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: expected a JSON object", config_path)
        return Config()
    return config_from_dict(data)
