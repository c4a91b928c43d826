"""Logic for loading and validating resolver configuration files."""

import copy
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from src.deep_merge import deep_merge
from src.errors import ConfigurationError

DEFAULT_CONFIG: dict[str, Any] = {
    "output": {
        "separator_width": 80,
    },
    "session": {
        # None detects a terminal from the attached streams
        "interactive": None,
    },
    "logging": {
        "level": "INFO",
    },
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ResolverSettings:
    """Validated view of the configuration values the resolver consumes."""

    separator_width: int
    interactive: bool | None
    log_level: int


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if not p.exists():
            msg = f"Configuration file not found: {path}"
            raise ConfigurationError(msg)
        try:
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            msg = f"Invalid YAML in configuration file {path}: {exc}"
            raise ConfigurationError(msg) from exc
        if not isinstance(user_config, dict):
            msg = f"Configuration file {path} must contain a mapping"
            raise ConfigurationError(msg)
        config = deep_merge(config, user_config)
    return config


def resolver_settings(config: dict[str, Any]) -> ResolverSettings:
    """Validate ``config`` and extract the resolver settings."""
    width = config.get("output", {}).get("separator_width")
    if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
        msg = f"output.separator_width must be a positive integer, got {width!r}"
        raise ConfigurationError(msg)

    interactive = config.get("session", {}).get("interactive")
    if interactive is not None and not isinstance(interactive, bool):
        msg = f"session.interactive must be true, false or null, got {interactive!r}"
        raise ConfigurationError(msg)

    level_name = str(config.get("logging", {}).get("level", "")).upper()
    if level_name not in LOG_LEVELS:
        levels = ", ".join(LOG_LEVELS)
        msg = f"logging.level must be one of {levels}, got {level_name!r}"
        raise ConfigurationError(msg)

    return ResolverSettings(
        separator_width=width,
        interactive=interactive,
        log_level=getattr(logging, level_name),
    )
