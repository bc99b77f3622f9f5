"""Path resolution for caddygen.

All paths are computed on demand from the current environment. Nothing is
cached at import time, so every caller sees the same answer for the same
environment and tests can redirect HOME freely.
"""

import os
import platform
from pathlib import Path

TOOL_NAME = "caddygen"

# Relative to the home directory
CONFIG_SUBDIR = Path(".config") / TOOL_NAME

# Used when neither a home directory nor a platform config dir is available
FALLBACK_CONFIG_DIR = Path("/tmp") / TOOL_NAME

CONFIG_FILENAME = "Caddyfile"
SETTINGS_FILENAME = "config.yaml"


def get_home_dir() -> Path | None:
    """Get the user's home directory.

    Returns:
        Home directory, or None if it cannot be determined
    """
    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        return None
    # expanduser() hands "~" back unchanged when it has nothing to go on
    if str(home) in ("", "~"):
        return None
    return home


def _platform_config_dir() -> Path | None:
    """Get the platform's config directory when there is no home directory."""
    if platform.system().lower() == "windows":
        base = os.environ.get("APPDATA")
    else:
        base = os.environ.get("XDG_CONFIG_HOME")
    if not base:
        return None
    return Path(base) / TOOL_NAME


def get_config_dir() -> Path:
    """Get the caddygen configuration directory.

    Resolution order:
    1. ~/.config/caddygen (same on every platform)
    2. %APPDATA%/caddygen or $XDG_CONFIG_HOME/caddygen
    3. /tmp/caddygen

    Returns:
        Absolute path to the configuration directory
    """
    home = get_home_dir()
    if home is not None:
        return home / CONFIG_SUBDIR

    platform_dir = _platform_config_dir()
    if platform_dir is not None:
        return platform_dir

    return FALLBACK_CONFIG_DIR


def get_config_file(config_dir: Path | None = None) -> Path:
    """Get path to the persisted import-list Caddyfile.

    Args:
        config_dir: Configuration directory (resolved if not given)

    Returns:
        Path to <config-dir>/Caddyfile
    """
    return (config_dir or get_config_dir()) / CONFIG_FILENAME


def get_settings_file(config_dir: Path | None = None) -> Path:
    """Get path to the YAML settings file."""
    return (config_dir or get_config_dir()) / SETTINGS_FILENAME
