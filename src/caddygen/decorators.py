"""Command decorators.

Provides the single place where caddygen errors are turned into a
message on stderr and a non-zero exit status.
"""

from functools import wraps
from typing import Callable

from rich.console import Console
from rich.markup import escape

from .errors import CaddygenError
from .shared.logging import get_logger

console = Console(stderr=True, soft_wrap=True, emoji=False, highlight=False)

logger = get_logger(__name__)


def handle_errors(func: Callable):
    """Decorator that reports CaddygenError and exits with status 1.

    Args:
        func: Click command callback

    Returns:
        Wrapped callback
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except CaddygenError as e:
            logger.debug("command_failed", error_type=type(e).__name__, error=e.message)
            console.print(f"[red]Error:[/red] {escape(e.message)}")
            raise SystemExit(1) from e

    return wrapper
