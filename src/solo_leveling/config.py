"""Configuration loading from config.toml."""
from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config.toml"

DEFAULT_DB_PATH = "saves/solo_leveling.db"
DEFAULT_USER_ID = "local"
DEFAULT_LOG_LEVEL = "WARNING"


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load config.toml; a missing file means all defaults."""
    config_path = path or DEFAULT_CONFIG_PATH
    if config_path.exists():
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    return {}


def db_path(config: dict[str, Any]) -> str:
    return config.get("storage", {}).get("db_path", DEFAULT_DB_PATH)


def user_id(config: dict[str, Any]) -> str:
    return config.get("player", {}).get("user_id", DEFAULT_USER_ID)


def configure_logging(config: dict[str, Any]) -> None:
    """Set up root logging at the configured level."""
    level_name = str(config.get("logging", {}).get("level", DEFAULT_LOG_LEVEL)).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
