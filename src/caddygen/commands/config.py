"""Config command - Show resolved caddygen settings."""

from __future__ import annotations

import json

import click

from ..config import resolve_settings
from ..decorators import handle_errors


@click.command("config")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.pass_context
@handle_errors
def config_command(ctx: click.Context, json_output: bool) -> None:
    """Show where caddygen keeps its files and which settings are in effect."""
    settings = resolve_settings(ctx.obj)
    values = {
        "config_dir": str(ctx.obj["config_dir"]),
        "config_file": str(ctx.obj["config_file"]),
        "caddy_binary": settings.caddy_binary,
        "log_level": settings.log_level,
    }
    sources = {
        "config_dir": "resolved",
        "config_file": ctx.obj["config_file_source"],
        "caddy_binary": settings.get_source("caddy_binary"),
        "log_level": settings.get_source("log_level"),
    }

    if json_output:
        click.echo(json.dumps({"values": values, "sources": sources}, indent=2))
        return

    click.echo("caddygen configuration")
    click.echo()
    for key, value in values.items():
        click.echo(f"  {key:<13s} {value}  ({sources[key]})")
    click.echo()
    exists = "exists" if ctx.obj["config_file"].exists() else "not created yet, run 'caddygen init'"
    click.echo(f"Import list: {exists}")
