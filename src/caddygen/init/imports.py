"""Import-list builder for the persisted Caddyfile.

Turns the folders and glob patterns collected by ``caddygen init`` into a
Caddyfile made only of ``import`` directives, and writes it.
"""

from __future__ import annotations

import platform
from dataclasses import dataclass
from pathlib import Path

from ..errors import ConfigDirectoryError, FileWriteError
from ..shared.files import atomic_write_text
from ..shared.logging import get_logger
from .prompter import InputProvider

# Caddy's import globs do not support "**", so plain folders get one level
DEV_FILE_SUFFIX = "/*/Caddyfile.dev"

WILDCARDS = ("*", "?")

HEADER = (
    "# Generated by caddygen init. Do not edit by hand.\n"
    "# Run 'caddygen init' again to change the imported folders.\n"
)

FOLDER_PROMPT = "Folder path or glob pattern (empty to finish)"

logger = get_logger(__name__)


@dataclass
class ImportEntry:
    """One folder or glob pattern entered by the user."""

    pattern: str
    path: str

    @property
    def has_wildcard(self) -> bool:
        """Check if the (trailing-slash-trimmed) path is already a glob."""
        trimmed = self.path.rstrip("/")
        return any(char in trimmed for char in WILDCARDS)

    @property
    def target(self) -> str:
        """Path or glob handed to Caddy's import directive."""
        if self.has_wildcard:
            return self.path
        return self.path.rstrip("/") + DEV_FILE_SUFFIX

    def render(self) -> str:
        """Render the comment and import lines for this entry."""
        return f"# Pattern: {self.pattern}\nimport {self.target}\n"


def expand_home(entry: str, home: Path | None) -> str:
    """Expand a leading ~ using the given home directory.

    Only a bare ``~`` or ``~/...`` is expanded (``~\\...`` too on Windows);
    ``~user`` forms and entries without a home directory are returned as is.

    Args:
        entry: Folder or pattern as typed
        home: Resolved home directory, or None

    Returns:
        Expanded entry
    """
    if home is None or not entry.startswith("~"):
        return entry

    rest = entry[1:]
    separators = ("/", "\\") if platform.system().lower() == "windows" else ("/",)
    if rest == "" or rest[0] in separators:
        return str(home) + rest
    return entry


def build_entry(raw: str, home: Path | None) -> ImportEntry:
    """Build an ImportEntry from a trimmed user answer."""
    return ImportEntry(pattern=raw, path=expand_home(raw, home))


def collect_entries(prompter: InputProvider, home: Path | None) -> list[ImportEntry]:
    """Prompt for folders until an empty answer.

    Args:
        prompter: Source of answers
        home: Resolved home directory used for ~ expansion

    Returns:
        Entries in the order they were entered
    """
    entries: list[ImportEntry] = []
    while True:
        answer = prompter.read_line(FOLDER_PROMPT).strip()
        if not answer:
            break
        entries.append(build_entry(answer, home))
    return entries


def render_import_file(entries: list[ImportEntry]) -> str:
    """Render the full persisted Caddyfile content."""
    return HEADER + "\n" + "\n".join(entry.render() for entry in entries)


def ensure_config_dir(config_dir: Path) -> None:
    """Create the configuration directory if missing.

    Raises:
        ConfigDirectoryError: If the directory cannot be created
    """
    try:
        config_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigDirectoryError(f"Failed to create config directory '{config_dir}': {e}") from e


def write_import_file(config_file: Path, entries: list[ImportEntry]) -> None:
    """Write the import-list Caddyfile, replacing any previous content.

    Raises:
        FileWriteError: If the file cannot be written
    """
    try:
        atomic_write_text(config_file, render_import_file(entries))
    except OSError as e:
        raise FileWriteError(f"Error writing '{config_file}': {e}") from e

    logger.info("import_file_written", path=str(config_file), entries=len(entries))
