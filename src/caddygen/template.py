"""Template renderer for Caddyfile.dev.

Reads a template, replaces every literal {{key}} placeholder with its value
and writes the result next to the template as Caddyfile.dev.

Each key is applied as its own full-string pass in variable order. A value
that itself contains {{other}} is therefore substituted again if "other" is
applied later in the same run. Placeholders without a variable are left as
they are.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .errors import FileWriteError, OutputDirectoryError, TemplateReadError
from .shared.files import atomic_write_text
from .shared.logging import get_logger

TEMPLATE_FILENAME = "Caddyfile.template"
OUTPUT_FILENAME = "Caddyfile.dev"

logger = get_logger(__name__)


@dataclass
class GenerateResult:
    """Result of a generate run."""

    output_path: Path
    applied: list[str] = field(default_factory=list)


def placeholder(key: str) -> str:
    """Return the placeholder token for a key, e.g. ``{{port}}``."""
    return "{{" + key + "}}"


def render_string(template: str, variables: dict[str, str]) -> str:
    """Substitute variables into template text."""
    content = template
    for key, value in variables.items():
        content = content.replace(placeholder(key), value)
    return content


def render_template(template_path: Path, variables: dict[str, str]) -> str:
    """Read a template file and substitute variables into it.

    Args:
        template_path: Path to the template file
        variables: Placeholder name to value mapping

    Returns:
        Rendered text

    Raises:
        TemplateReadError: If the file cannot be read as UTF-8 text
    """
    try:
        content = template_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateReadError(f"Error reading template '{template_path}': {e}") from e

    return render_string(content, variables)


def generate(
    output_dir: Path,
    template_path: Path | None,
    variables: dict[str, str],
) -> GenerateResult:
    """Render a template into <output_dir>/Caddyfile.dev.

    Args:
        output_dir: Existing directory that receives Caddyfile.dev
        template_path: Template file (default: <output_dir>/Caddyfile.template)
        variables: Placeholder name to value mapping

    Returns:
        GenerateResult with the written path and applied variable names

    Raises:
        OutputDirectoryError: If output_dir is not an existing directory
        TemplateReadError: If the template cannot be read
        FileWriteError: If Caddyfile.dev cannot be written
    """
    if not output_dir.is_dir():
        raise OutputDirectoryError(
            f"Output directory '{output_dir}' does not exist or is not a directory."
        )

    if template_path is None:
        template_path = output_dir / TEMPLATE_FILENAME

    rendered = render_template(template_path, variables)

    output_path = output_dir / OUTPUT_FILENAME
    try:
        atomic_write_text(output_path, rendered)
    except OSError as e:
        raise FileWriteError(f"Error writing '{output_path}': {e}") from e

    logger.info(
        "template_rendered",
        template=str(template_path),
        output=str(output_path),
        variables=len(variables),
    )
    return GenerateResult(output_path=output_path, applied=list(variables))
