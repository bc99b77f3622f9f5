"""Logging for caddygen.

Diagnostics are structlog events routed through the standard logging
module to stderr. Messages meant for the user are printed by the commands
with click and never go through here.
"""

import logging
import sys

import structlog

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def configure_logging(level: str = "warning") -> None:
    """Route caddygen diagnostics to stderr at the given level.

    Safe to call more than once; the last call wins. Unknown level names
    fall back to warning.

    Args:
        level: One of LOG_LEVELS
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    logging.basicConfig(level=log_level, handlers=[handler], format="%(message)s", force=True)

    structlog.configure(
        processors=[*_SHARED_PROCESSORS, structlog.dev.ConsoleRenderer(colors=False)],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def level_from_verbosity(verbose: int, default: str = "warning") -> str:
    """Turn the number of -v flags into a level name."""
    if verbose >= 2:
        return "debug"
    if verbose == 1:
        return "info"
    return default


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return the structlog logger for a module."""
    return structlog.get_logger(name)
