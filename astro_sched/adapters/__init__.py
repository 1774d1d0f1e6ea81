"""Infrastructure adapters for the schedule manager."""

from astro_sched.adapters.console_notifier import ConsoleConflictNotifier
from astro_sched.adapters.logging_notifier import (
    LOGGER_NAME,
    LoggingConflictNotifier,
    configure_logging,
)

__all__ = [
    "LOGGER_NAME",
    "ConsoleConflictNotifier",
    "LoggingConflictNotifier",
    "configure_logging",
]
