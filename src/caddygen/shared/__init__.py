"""Shared modules for caddygen.

This module provides functionality used by every command:
- Path resolution for the configuration directory
- Logging setup
- Whole-file writes
"""

from .files import atomic_write_text
from .logging import configure_logging, get_logger, level_from_verbosity
from .paths import (
    CONFIG_FILENAME,
    TOOL_NAME,
    get_config_dir,
    get_config_file,
    get_home_dir,
    get_settings_file,
)

__all__ = [
    # Paths
    "TOOL_NAME",
    "CONFIG_FILENAME",
    "get_home_dir",
    "get_config_dir",
    "get_config_file",
    "get_settings_file",
    # Files
    "atomic_write_text",
    # Logging
    "configure_logging",
    "get_logger",
    "level_from_verbosity",
]
