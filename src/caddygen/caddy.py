"""Caddy process integration.

Runs ``caddy reload --config <file>`` against the persisted import-list
Caddyfile. Process spawning goes through a CommandRunner so it can be
replaced in tests.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Protocol

from .errors import ConfigNotFoundError, ReloadError
from .shared.logging import get_logger

logger = get_logger(__name__)


class CommandRunner(Protocol):
    """Runs an external command and reports its exit status."""

    def run(self, argv: list[str]) -> int | None:
        """Run argv to completion.

        Returns:
            Exit status, or None if the process ended without one
        """
        ...


class SubprocessRunner:
    """CommandRunner backed by subprocess.run."""

    def run(self, argv: list[str]) -> int | None:
        try:
            result = subprocess.run(argv)
        except FileNotFoundError as e:
            raise ReloadError(f"Caddy executable '{argv[0]}' not found. Is Caddy installed?") from e
        except OSError as e:
            raise ReloadError(f"Failed to run '{argv[0]}': {e}") from e

        # Negative return codes mean the process was killed by a signal
        if result.returncode < 0:
            return None
        return result.returncode


def build_reload_command(caddy_binary: str, config_file: Path) -> list[str]:
    """Build the argv for reloading Caddy with a config file."""
    return [caddy_binary, "reload", "--config", str(config_file)]


def reload_caddy(config_file: Path, runner: CommandRunner, caddy_binary: str = "caddy") -> None:
    """Reload the running Caddy with the persisted Caddyfile.

    Args:
        config_file: Persisted import-list Caddyfile
        runner: CommandRunner used to spawn Caddy
        caddy_binary: Caddy executable name or path

    Raises:
        ConfigNotFoundError: If config_file does not exist (nothing is spawned)
        ReloadError: If Caddy cannot be run or exits unsuccessfully
    """
    if not config_file.is_file():
        raise ConfigNotFoundError(
            f"No configuration found at '{config_file}'. Run 'caddygen init' first."
        )

    argv = build_reload_command(caddy_binary, config_file)
    logger.info("reload_invoked", argv=argv)

    exit_code = runner.run(argv)
    if exit_code is None:
        raise ReloadError("Caddy reload terminated without an exit code")
    if exit_code != 0:
        raise ReloadError(f"Caddy reload failed with exit code {exit_code}", exit_code=exit_code)

    logger.debug("reload_succeeded", config=str(config_file))
