"""Init command - Build the import-list Caddyfile interactively.

Implements `caddygen init`, which collects folders and glob patterns and
writes them as Caddy import directives to <config-dir>/Caddyfile.
"""

from __future__ import annotations

from pathlib import Path

import click

from ..decorators import handle_errors
from ..init import (
    ClickPrompter,
    InputProvider,
    collect_entries,
    ensure_config_dir,
    write_import_file,
)
from ..shared.paths import get_home_dir


@click.command("init")
@click.pass_context
@handle_errors
def init_command(ctx: click.Context) -> None:
    """Choose the folders Caddy imports Caddyfile.dev files from.

    Enter one folder or glob pattern per line and an empty line to finish.
    A plain folder imports <folder>/*/Caddyfile.dev; a pattern containing
    * or ? is imported as written.

    \b
    Examples:
      ~/projects              -> import /home/you/projects/*/Caddyfile.dev
      ~/work/*/dev/Caddyfile  -> import /home/you/work/*/dev/Caddyfile
    """
    prompter: InputProvider = ctx.obj.get("prompter") or ClickPrompter()
    _run_init_flow(ctx.obj["config_file"], prompter, get_home_dir())


def _run_init_flow(config_file: Path, prompter: InputProvider, home: Path | None) -> None:
    """Execute the init flow against an explicit config file."""
    # Step 1: Make sure the config directory exists
    ensure_config_dir(config_file.parent)

    # Step 2: Confirm before replacing an existing file
    if config_file.exists():
        click.echo(f"A configuration already exists at {config_file}")
        if not prompter.confirm("Overwrite it?", default=False):
            click.echo("Keeping existing configuration.")
            return

    # Step 3: Collect folders
    click.echo("Enter folders or glob patterns to import, one per line.")
    click.echo("Press Enter on an empty line to finish.")
    entries = collect_entries(prompter, home)

    if not entries:
        click.echo("No folders entered. Nothing was saved.")
        return

    # Step 4: Write the import list
    write_import_file(config_file, entries)

    noun = "entry" if len(entries) == 1 else "entries"
    click.echo(f"✓ Saved {len(entries)} {noun} to {config_file}")
    click.echo("Apply it with: caddygen reload")
