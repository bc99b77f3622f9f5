"""CLI settings management.

Handles optional settings stored in <config-dir>/config.yaml.
Supports environment variable overrides and CLI flag precedence.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .errors import SettingsError
from .shared.logging import configure_logging, level_from_verbosity
from .shared.paths import get_settings_file

# Default values
DEFAULT_CADDY_BINARY = "caddy"
DEFAULT_LOG_LEVEL = "warning"

SETTING_KEYS = ("caddy_binary", "log_level")

# Environment variable mappings
ENV_VARS = {
    "caddy_binary": "CADDYGEN_CADDY_BIN",
    "log_level": "CADDYGEN_LOG_LEVEL",
}


@dataclass
class CLIConfig:
    """CLI settings."""

    caddy_binary: str = DEFAULT_CADDY_BINARY
    log_level: str = DEFAULT_LOG_LEVEL

    # Track where each value came from
    _sources: dict[str, str] = field(default_factory=dict)

    def get_source(self, key: str) -> str:
        """Get the source of a setting."""
        return self._sources.get(key, "default")

    def set_override(self, key: str, value: str) -> None:
        """Apply a value given on the command line."""
        setattr(self, key, value)
        self._sources[key] = "flag"


def _read_settings_file(settings_path: Path) -> dict[str, Any]:
    """Read the YAML settings file.

    Raises:
        SettingsError: If the file cannot be read or is not a YAML mapping
    """
    try:
        with open(settings_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise SettingsError(f"Error reading settings '{settings_path}': {e}") from e
    except yaml.YAMLError as e:
        raise SettingsError(f"Invalid YAML in settings '{settings_path}': {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SettingsError(f"Settings '{settings_path}' must be a mapping of key: value")
    return data


def load_config(config_dir: Path | None = None) -> CLIConfig:
    """Load CLI settings.

    Precedence (highest to lowest):
    1. Environment variables
    2. Settings file (<config-dir>/config.yaml)
    3. Defaults

    Command-line flags are applied afterwards by the caller through
    CLIConfig.set_override.

    Args:
        config_dir: Configuration directory (resolved if not given)

    Returns:
        CLIConfig with values and sources

    Raises:
        SettingsError: If the settings file exists but is malformed
    """
    config = CLIConfig()
    sources: dict[str, str] = {key: "default" for key in SETTING_KEYS}

    settings_path = get_settings_file(config_dir)
    if settings_path.exists():
        file_config = _read_settings_file(settings_path)
        for key in SETTING_KEYS:
            if key in file_config:
                setattr(config, key, str(file_config[key]))
                sources[key] = "settings file"

    for key in SETTING_KEYS:
        value = os.environ.get(ENV_VARS[key])
        if value:
            setattr(config, key, value)
            sources[key] = "environment"

    config._sources = sources
    return config


def resolve_settings(obj: dict[str, Any]) -> CLIConfig:
    """Load settings for the current invocation on first use.

    Only commands that need settings call this, so commands like generate
    never touch the settings file. Flags stored on the click context object
    are applied on top, and logging is reconfigured to the final level.

    Args:
        obj: click context object populated by the cli group

    Returns:
        CLIConfig for this invocation

    Raises:
        SettingsError: If the settings file exists but is malformed
    """
    settings = obj.get("settings")
    if settings is not None:
        return settings

    settings = load_config(obj["config_dir"])
    if obj.get("caddy_bin"):
        settings.set_override("caddy_binary", obj["caddy_bin"])
    if obj.get("verbose"):
        settings.set_override("log_level", level_from_verbosity(obj["verbose"]))

    configure_logging(settings.log_level)
    obj["settings"] = settings
    return settings
