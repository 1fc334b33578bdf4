"""Configuration module for edconf.

This module provides access to user configuration stored in one of these locations:
1. $EDCONF_CONFIG_DIR/edconfrc if $EDCONF_CONFIG_DIR is defined
2. $XDG_CONFIG_HOME/edconf/edconfrc if $XDG_CONFIG_HOME is defined
3. $HOME/.edconfrc

The configuration is stored in TOML format.
"""

import copy
import os
import sys
from pathlib import Path
from typing import Any, List

import tomli

__all__ = [
    "DEFAULT_CONFIG",
    "get_config_path",
    "load_config",
    "get_logger_verbosity",
    "get_logger_path",
    "get_config_filename",
    "get_stop_dirs",
]

# Default configuration values
DEFAULT_CONFIG: dict[str, Any] = {
    "logger": {
        "verbosity": "WARNING",  # Default logging level
        "path": str(Path.home() / ".edconf"),  # Empty string disables the log file
    },
    "resolver": {
        "config_filename": ".editorconfig",
        "stop_dirs": [],
    },
}


def get_config_path() -> Path:
    """Return the path to the user's config file.

    Checks the following locations in order:
    1. $EDCONF_CONFIG_DIR/edconfrc if $EDCONF_CONFIG_DIR is defined
    2. $XDG_CONFIG_HOME/edconf/edconfrc if $XDG_CONFIG_HOME is defined
    3. Fallback to $HOME/.edconfrc

    Returns:
        Path to the config file
    """
    if "EDCONF_CONFIG_DIR" in os.environ:
        path = Path(os.environ["EDCONF_CONFIG_DIR"]) / "edconfrc"
        if path.exists():
            return path

    if "XDG_CONFIG_HOME" in os.environ:
        path = Path(os.environ["XDG_CONFIG_HOME"]) / "edconf" / "edconfrc"
        if path.exists():
            return path

    return Path.home() / ".edconfrc"


def load_config() -> dict[str, Any]:
    """Load configuration from the config file.

    Returns:
        Dict containing the merged configuration (defaults + user config).
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    config_path = get_config_path()

    if config_path.exists():
        try:
            with open(config_path, "rb") as f:
                user_config = tomli.load(f)

            _merge_configs(config, user_config)
        except (OSError, tomli.TOMLDecodeError) as e:
            print(f"Error loading config from {config_path}: {e}", file=sys.stderr)

    return config


def _merge_configs(base: dict[str, Any], override: dict[str, Any]) -> None:
    """Recursively merge override dict into base dict.

    Args:
        base: The base configuration dictionary to merge into.
        override: The override configuration dictionary to merge from.

    """
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            nested_value: dict[str, Any] = value
            _merge_configs(base[key], nested_value)
        else:
            base[key] = value


def get_logger_verbosity() -> str:
    """Get the configured logger verbosity level.

    Returns:
        String representing the logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).

    """
    config = load_config()
    return config["logger"]["verbosity"]


def get_logger_path() -> str:
    """Get the configured logger path.

    Returns:
        Directory where edconf.log is written, or "" for no log file.

    """
    config = load_config()
    return os.path.expanduser(config["logger"]["path"])


def get_config_filename() -> str:
    """Get the name of the per-directory config file (normally .editorconfig)."""
    config = load_config()
    return config["resolver"]["config_filename"]


def get_stop_dirs() -> List[str]:
    """Get directories where every resolution stops walking up."""
    config = load_config()
    return [os.path.expanduser(d) for d in config["resolver"]["stop_dirs"]]
