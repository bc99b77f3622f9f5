"""Error types for caddygen.

Every fatal condition is raised as a CaddygenError subclass. Library code
only raises; the command layer reports the message once and exits with
status 1 (see decorators.handle_errors).
"""

from dataclasses import dataclass


@dataclass
class CaddygenError(Exception):
    """Base error class for caddygen errors."""

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class VariableFormatError(CaddygenError):
    """A --var argument is not in KEY=VALUE form."""


@dataclass
class OutputDirectoryError(CaddygenError):
    """Output directory is missing or not a directory."""


@dataclass
class TemplateReadError(CaddygenError):
    """Template file cannot be read or decoded."""


@dataclass
class FileWriteError(CaddygenError):
    """A generated file cannot be written."""


@dataclass
class ConfigDirectoryError(CaddygenError):
    """Configuration directory cannot be created."""


@dataclass
class InputReadError(CaddygenError):
    """Interactive input cannot be read from the terminal."""

    message: str = "Failed to read input"


@dataclass
class ConfigNotFoundError(CaddygenError):
    """Persisted Caddyfile does not exist yet."""


@dataclass
class ReloadError(CaddygenError):
    """Caddy reload could not be run or reported failure."""

    exit_code: int | None = None


@dataclass
class SettingsError(CaddygenError):
    """Settings file is unreadable or malformed."""
