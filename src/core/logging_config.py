"""Structured logging configuration.

This module initializes structlog with a stable JSON event format
so registry and store events can be parsed by log tooling.
"""

from __future__ import annotations

from typing import Any

import structlog

_CONFIGURED = False


def configure_logging() -> None:
    """Install the JSON processor chain once per process."""
    global _CONFIGURED
    if _CONFIGURED:
        return
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        cache_logger_on_first_use=True,
    )
    _CONFIGURED = True


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    configure_logging()
    return structlog.get_logger(name)
