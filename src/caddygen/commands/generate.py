"""Generate command - Render Caddyfile.dev from a template."""

from __future__ import annotations

from pathlib import Path

import click

from ..decorators import handle_errors
from ..template import OUTPUT_FILENAME, TEMPLATE_FILENAME, generate
from ..utils import parse_variables


@click.command("generate")
@click.option(
    "-o",
    "--output-dir",
    type=click.Path(path_type=Path),
    default=Path("."),
    help=f"Directory where {OUTPUT_FILENAME} is created (default: current directory)",
)
@click.option(
    "-t",
    "--template",
    "template_path",
    type=click.Path(path_type=Path),
    default=None,
    help=f"Template file (default: <output-dir>/{TEMPLATE_FILENAME})",
)
@click.option(
    "--var",
    "var_flags",
    multiple=True,
    metavar="KEY=VALUE",
    help="Template variable, replaces {{KEY}} (repeatable)",
)
@handle_errors
def generate_command(output_dir: Path, template_path: Path | None, var_flags: tuple[str, ...]) -> None:
    """Generate Caddyfile.dev from a template.

    Every {{KEY}} in the template is replaced with VALUE. Placeholders
    without a --var are left untouched.

    \b
    Examples:
      caddygen generate --var port=8080
      caddygen generate -o ./site -t ./templates/Caddyfile.template --var host=app.localhost
    """
    # Parse before touching the filesystem
    variables = parse_variables(var_flags)

    result = generate(output_dir, template_path, variables)

    click.echo(f"{OUTPUT_FILENAME} successfully generated at: {result.output_path}")
    if result.applied:
        click.echo(f"Applied variables: {', '.join(result.applied)}")
    else:
        click.echo("No variables provided → template copied without changes.")
    click.echo("Reload Caddy with: caddygen reload (or run caddy with --watch)")
