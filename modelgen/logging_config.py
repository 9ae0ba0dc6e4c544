"""
Logging configuration for modelgen.

Modules obtain loggers through ``get_logger(__name__)``; only the CLI
calls ``configure_logging`` so that importing the library never touches
the host application's logging setup.
"""

from __future__ import annotations

import logging
import logging.config

from rich.console import Console

LOGGER_NAME = "modelgen"

# Log records go to stderr so generated code on stdout stays clean
STDERR_CONSOLE = Console(stderr=True)


def configure_logging(level: str = "WARNING", rich_tracebacks: bool = True) -> None:
    """Install a rich console handler on the package logger.

    Args:
        level: Logging level name (e.g. "DEBUG", "INFO").
        rich_tracebacks: Whether exceptions are rendered by rich.
    """
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "rich": {"format": "%(name)s: %(message)s", "datefmt": "[%X]"},
            },
            "handlers": {
                "console": {
                    "class": "rich.logging.RichHandler",
                    "console": "ext://modelgen.logging_config.STDERR_CONSOLE",
                    "formatter": "rich",
                    "level": level,
                    "rich_tracebacks": rich_tracebacks,
                    "show_path": False,
                }
            },
            "loggers": {
                LOGGER_NAME: {
                    "handlers": ["console"],
                    "level": level,
                    "propagate": False,
                }
            },
        }
    )


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the package namespace."""
    if not name:
        return logging.getLogger(LOGGER_NAME)
    if name != LOGGER_NAME and not name.startswith(f"{LOGGER_NAME}."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
