"""User-level configuration for perchance-helper.

Reads from ~/.config/perchance-helper/config.yaml and provides the defaults
used by the MCP server and the CLI (output label, default seed, log level).
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from perchance_helper.interpreter import OUTPUT_LABEL
from perchance_helper.models import LogLevel

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "perchance-helper"
CONFIG_FILE = CONFIG_DIR / "config.yaml"

CONFIG_KEYS = ("output_label", "seed", "log_level")

# Keys that map to enum types for validation
_ENUM_FIELDS: dict[str, type[Enum]] = {
    "log_level": LogLevel,
}


def get_config_path() -> Path:
    """Return the path to the user config file."""
    return CONFIG_FILE


def load_user_config() -> dict[str, Any]:
    """Load user configuration from disk.

    Returns an empty dict if the file doesn't exist or is invalid.
    """
    config_path = get_config_path()
    if not config_path.exists():
        return {}

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except Exception as e:
        logger.warning(f"Failed to load user config from {config_path}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"User config is not a mapping: {config_path}")
        return {}

    validated: dict[str, Any] = {}
    for key, value in data.items():
        if key in _ENUM_FIELDS and value is not None:
            try:
                _ENUM_FIELDS[key](value)
            except ValueError:
                valid = [e.value for e in _ENUM_FIELDS[key]]
                logger.warning(
                    f"Invalid value '{value}' for '{key}' in user config. Valid: {valid}"
                )
                continue
        if key == "seed" and value is not None and (
            isinstance(value, bool) or not isinstance(value, int)
        ):
            logger.warning(f"Invalid seed '{value}' in user config, expected an integer")
            continue
        if key == "output_label" and not isinstance(value, str):
            logger.warning(f"Invalid output_label '{value}' in user config, expected a string")
            continue
        validated[key] = value

    return validated


def parse_config_value(key: str, value: str) -> Any:
    """Convert a command-line string into the value stored for *key*.

    Raises:
        ValueError: If the key is unknown or the value does not fit it.
    """
    if key not in CONFIG_KEYS:
        raise ValueError(f"Unknown config key '{key}'. Valid: {list(CONFIG_KEYS)}")

    if key in _ENUM_FIELDS:
        try:
            return _ENUM_FIELDS[key](value.lower()).value
        except ValueError:
            valid = [e.value for e in _ENUM_FIELDS[key]]
            raise ValueError(f"Invalid value '{value}' for '{key}'. Valid: {valid}") from None

    if key == "seed":
        if value.lower() in ("", "none", "null"):
            return None
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"Invalid seed '{value}', expected an integer") from None

    return value


def save_user_config(config: dict[str, Any]) -> Path:
    """Save configuration to the user config file.

    Returns the path written to.
    """
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        yaml.safe_dump(config, f, default_flow_style=False, sort_keys=False)
    return config_path


def get_default_config_template() -> dict[str, Any]:
    """Return the starter config written by ``config init``."""
    return {
        "output_label": OUTPUT_LABEL,
        "seed": None,
        "log_level": LogLevel.WARNING.value,
    }


def get_output_label() -> str:
    """Label prefixed to generated output."""
    return load_user_config().get("output_label", OUTPUT_LABEL)


def get_default_seed() -> int | None:
    """Seed applied when a caller does not supply one, or None for random output."""
    return load_user_config().get("seed")


def get_log_level() -> int:
    """Resolve the configured log level to a ``logging`` constant."""
    level = load_user_config().get("log_level") or LogLevel.WARNING.value
    return logging.getLevelName(level.upper())
