"""Shared test fixtures for caddygen tests.

This module provides fixtures that stand in for the outside world:
- ScriptedPrompter: answers init prompts from a fixed script
- RecordingRunner: records Caddy invocations instead of spawning them
- home: points HOME at a temporary directory
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pytest
from click.testing import CliRunner

from caddygen.errors import InputReadError

# =============================================================================
# Input provider
# =============================================================================


@dataclass
class ScriptedPrompter:
    """InputProvider that replays scripted answers.

    Running out of lines behaves like end of input on a terminal.
    """

    lines: list[str] = field(default_factory=list)
    confirm_answer: bool = False

    # Tracking
    prompts: list[str] = field(default_factory=list)
    confirms: list[str] = field(default_factory=list)

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise InputReadError()
        return self.lines.pop(0)

    def confirm(self, prompt: str, default: bool = False) -> bool:
        self.confirms.append(prompt)
        return self.confirm_answer


# =============================================================================
# Command runner
# =============================================================================


@dataclass
class RecordingRunner:
    """CommandRunner that records argv and returns a fixed exit code."""

    exit_code: int | None = 0
    calls: list[list[str]] = field(default_factory=list)

    def run(self, argv: list[str]) -> int | None:
        self.calls.append(list(argv))
        return self.exit_code


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's caddygen environment out of tests."""
    monkeypatch.delenv("CADDYGEN_CADDY_BIN", raising=False)
    monkeypatch.delenv("CADDYGEN_LOG_LEVEL", raising=False)


@pytest.fixture
def home(tmp_path, monkeypatch) -> Path:
    """Use a temporary directory as HOME."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setenv("USERPROFILE", str(home_dir))
    return home_dir


@pytest.fixture
def config_file(home) -> Path:
    """Default import-list Caddyfile location under the temporary HOME."""
    return home / ".config" / "caddygen" / "Caddyfile"


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI runner."""
    return CliRunner()


@pytest.fixture
def prompter() -> ScriptedPrompter:
    """Prompter with no answers queued."""
    return ScriptedPrompter()


@pytest.fixture
def command_runner() -> RecordingRunner:
    """Command runner that reports success."""
    return RecordingRunner()


@pytest.fixture
def make_prompter():
    """Factory for ScriptedPrompter instances."""
    return ScriptedPrompter


@pytest.fixture
def make_runner():
    """Factory for RecordingRunner instances."""
    return RecordingRunner
