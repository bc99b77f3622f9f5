"""Reload command - Ask the running Caddy to load the import list."""

from __future__ import annotations

import click

from ..caddy import CommandRunner, SubprocessRunner, reload_caddy
from ..config import resolve_settings
from ..decorators import handle_errors


@click.command("reload")
@click.pass_context
@handle_errors
def reload_command(ctx: click.Context) -> None:
    """Reload Caddy with the Caddyfile written by 'caddygen init'.

    Runs: caddy reload --config <config-dir>/Caddyfile
    """
    config_file = ctx.obj["config_file"]
    settings = resolve_settings(ctx.obj)
    runner: CommandRunner = ctx.obj.get("command_runner") or SubprocessRunner()

    reload_caddy(config_file, runner, caddy_binary=settings.caddy_binary)

    click.echo(f"✓ Caddy reloaded using {config_file}")
