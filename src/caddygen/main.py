"""CLI main entry point."""

from __future__ import annotations

import os
from pathlib import Path

import click

from .commands.config import config_command
from .commands.generate import generate_command
from .commands.init import init_command
from .commands.reload import reload_command
from .config import DEFAULT_LOG_LEVEL, ENV_VARS
from .shared.logging import configure_logging, level_from_verbosity
from .shared.paths import get_config_dir, get_config_file


@click.group()
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Import-list Caddyfile (default: ~/.config/caddygen/Caddyfile)",
)
@click.option("--caddy-bin", default=None, help="Caddy executable (default: caddy)")
@click.option("-v", "--verbose", count=True, help="Increase verbosity")
@click.version_option(package_name="caddygen", prog_name="caddygen")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, caddy_bin: str | None, verbose: int) -> None:
    """Generate Caddyfile.dev files and manage Caddy's import list."""
    ctx.ensure_object(dict)

    # Settings are read lazily by the commands that need them
    default_level = os.environ.get(ENV_VARS["log_level"]) or DEFAULT_LOG_LEVEL
    configure_logging(level_from_verbosity(verbose, default=default_level))

    config_dir = get_config_dir()
    ctx.obj["config_dir"] = config_dir
    ctx.obj["config_file"] = config_path or get_config_file(config_dir)
    ctx.obj["config_file_source"] = "flag" if config_path else "resolved"
    ctx.obj["caddy_bin"] = caddy_bin
    ctx.obj["verbose"] = verbose


cli.add_command(generate_command)
cli.add_command(init_command)
cli.add_command(reload_command)
cli.add_command(config_command)


def main() -> None:
    """Main entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
