"""Init package for building the persisted import-list Caddyfile.

This package backs the `caddygen init` command which:
1. Prompts for folders or glob patterns, one per line
2. Expands a leading ~ to the home directory
3. Writes <config-dir>/Caddyfile with one import directive per entry
"""

from .imports import (
    DEV_FILE_SUFFIX,
    HEADER,
    ImportEntry,
    build_entry,
    collect_entries,
    ensure_config_dir,
    expand_home,
    render_import_file,
    write_import_file,
)
from .prompter import ClickPrompter, InputProvider

__all__ = [
    "DEV_FILE_SUFFIX",
    "HEADER",
    "ImportEntry",
    "build_entry",
    "collect_entries",
    "ensure_config_dir",
    "expand_home",
    "render_import_file",
    "write_import_file",
    "ClickPrompter",
    "InputProvider",
]
