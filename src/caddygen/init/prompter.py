"""Input providers for the interactive init flow.

The init flow only ever needs two kinds of answer: a line of text and a
yes/no confirmation. Anything implementing InputProvider can drive it, which
lets tests feed scripted answers without a terminal.
"""

from __future__ import annotations

from typing import Protocol

import click

from ..errors import InputReadError


class InputProvider(Protocol):
    """Source of interactive answers."""

    def read_line(self, prompt: str) -> str:
        """Read one line of text. An empty answer is allowed."""
        ...

    def confirm(self, prompt: str, default: bool = False) -> bool:
        """Ask a yes/no question."""
        ...


class ClickPrompter:
    """InputProvider backed by click's terminal prompts."""

    def read_line(self, prompt: str) -> str:
        try:
            return click.prompt(prompt, default="", show_default=False)
        except (click.Abort, EOFError) as e:
            raise InputReadError() from e

    def confirm(self, prompt: str, default: bool = False) -> bool:
        try:
            return click.confirm(prompt, default=default)
        except (click.Abort, EOFError) as e:
            raise InputReadError() from e
