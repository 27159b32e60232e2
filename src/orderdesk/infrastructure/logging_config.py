"""Centralized logging configuration for orderdesk.

All modules log through ``logging.getLogger(__name__)``, so every logger
lives under the ``orderdesk`` namespace and inherits the handler set up
here.  Console output goes to stderr so CLI output on stdout stays clean.

Log Format:
    2026-10-19 10:15:30 [INFO    ] orderdesk.application.compose_draft - Draft #1: added Bread (1 lines)
"""

from __future__ import annotations

import logging
import sys

APP_LOGGER = "orderdesk"


def setup_logging(log_level: int | str = logging.WARNING) -> logging.Logger:
    """Configure the ``orderdesk`` logger; safe to call more than once."""
    if isinstance(log_level, str):
        log_level = logging.getLevelName(log_level.upper())
        if not isinstance(log_level, int):
            log_level = logging.WARNING

    logger = logging.getLogger(APP_LOGGER)
    logger.setLevel(log_level)
    logger.propagate = False  # Prevent duplicate logs to root logger

    # Remove any existing handlers (allows re-configuration)
    logger.handlers.clear()

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)-8s] %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    logger.debug("Logging configured at level %s", logging.getLevelName(log_level))
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the application namespace."""
    if not name.startswith(APP_LOGGER):
        name = f"{APP_LOGGER}.{name}"
    return logging.getLogger(name)
