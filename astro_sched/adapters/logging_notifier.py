"""Conflict observer forwarding notifications to the ``logging`` module."""

from __future__ import annotations

import logging
import sys

from astro_sched.ports.notifications import ConflictObserver


LOGGER_NAME = "astro_sched.conflicts"


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Attach a single stderr handler to the conflict logger."""

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Repeated calls must not stack handlers.
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
    return logger


class LoggingConflictNotifier(ConflictObserver):
    """Records conflicts as warnings on a named logger."""

    __slots__ = ("_logger",)

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(LOGGER_NAME)

    def receive(self, message: str) -> None:
        self._logger.warning(message)
