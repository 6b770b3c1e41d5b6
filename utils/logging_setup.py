"""
utils/logging_setup.py
----------------------

Central logging configuration for Semantik Phrasing.

Goals:
- Provide a single place to configure logging format and level.
- Make it easy to get a logger in any module:
      from utils.logging_setup import get_logger
      log = get_logger(__name__)
- Allow overrides via environment variables:
      PHRASING_LOG_LEVEL   (e.g. DEBUG, INFO, WARNING, ERROR)
      PHRASING_LOG_FILE    (path to a log file; if unset, log to stderr only)

Usage
=====

In your module:

    from utils.logging_setup import get_logger

    log = get_logger(__name__)

    log.info("render_started", marker="@")
    log.warning("person_out_of_range", person=7)

In your CLI script (optional):

    from utils.logging_setup import init_logging

    if __name__ == "__main__":
        init_logging()  # ensures consistent global config

Implementation notes
====================

- Handlers and levels live in Python's built-in `logging` module.
- Events are emitted through `structlog`, rendered as JSON or as console
  text depending on `settings.LOG_FORMAT`.
- `init_logging` is idempotent; calling it multiple times is safe.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

import structlog

from app.shared.config import settings

# Internal flag to avoid re-configuring logging multiple times
_INITIALIZED = False

DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _get_env_log_level() -> int:
    """
    Read PHRASING_LOG_LEVEL (falling back to settings.LOG_LEVEL) and map it
    to a logging level. Defaults to logging.INFO if invalid.
    """
    level_name = os.getenv("PHRASING_LOG_LEVEL", settings.LOG_LEVEL).upper()
    return getattr(logging, level_name, logging.INFO)


def init_logging(
    level: Optional[int] = None,
    *,
    log_format: Optional[str] = None,
    filename: Optional[str] = None,
    force: bool = False,
) -> None:
    """
    Initialize stdlib logging and structlog.

    Args:
        level:
            Logging level (e.g. logging.DEBUG). If None, it is read from
            PHRASING_LOG_LEVEL, then settings.LOG_LEVEL.
        log_format:
            "json" or "console". Defaults to settings.LOG_FORMAT.
        filename:
            Optional log file, also read from PHRASING_LOG_FILE.
        force:
            If True, reconfigure logging even if it was already initialized.
    """
    global _INITIALIZED

    if _INITIALIZED and not force:
        return

    if level is None:
        level = _get_env_log_level()
    if log_format is None:
        log_format = settings.LOG_FORMAT

    filename = os.getenv("PHRASING_LOG_FILE") or filename

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if filename:
        handlers.append(logging.FileHandler(filename, encoding="utf-8"))

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt=DEFAULT_DATE_FORMAT,
        handlers=handlers,
        force=True,  # reset any previous basicConfig
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )

    _INITIALIZED = True


def get_logger(name: str):
    """
    Get a structlog logger with the given name, ensuring logging is
    initialized.

    Args:
        name:
            Logger name, usually __name__ of the calling module.
    """
    if not _INITIALIZED:
        init_logging()
    return structlog.get_logger(name)


__all__ = ["init_logging", "get_logger"]
