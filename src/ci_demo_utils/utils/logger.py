"""Structured logging configuration built on structlog.

Logs are written to stderr (and optionally a file) so that command output on
stdout stays clean.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from ci_demo_utils.utils.settings import LoggingSettings

_HANDLER_NAME = "ci_demo_utils"


def _build_renderer(log_format: str) -> Any:
    """Return the final structlog processor for the configured format."""
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=True)
    return structlog.dev.ConsoleRenderer(colors=False)


def _build_handlers(log_file_path: str | None) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file_path:
        handlers.append(logging.FileHandler(log_file_path, encoding="utf-8"))
    for handler in handlers:
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter("%(message)s"))
    return handlers


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Configure stdlib logging and structlog from ``LoggingSettings``.

    Calling this again replaces the handlers installed by a previous call.
    """
    if settings is None:
        from ci_demo_utils.utils.settings import get_settings

        settings = get_settings()

    log_level = getattr(logging, settings.log_level, logging.INFO)

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in _build_handlers(settings.log_file_path):
        root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _build_renderer(settings.log_format),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str = "ci_demo_utils") -> structlog.stdlib.BoundLogger:
    """Get a structlog logger for ``name``."""
    return structlog.get_logger(name)


__all__ = ["configure_logging", "get_logger"]
