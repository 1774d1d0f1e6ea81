"""Shell host wiring one schedule manager to its observers and the console."""

from __future__ import annotations

from typing import Callable, TextIO

from astro_sched.adapters.console_notifier import ConsoleConflictNotifier
from astro_sched.adapters.logging_notifier import LoggingConflictNotifier, configure_logging
from astro_sched.application.runtime import ScheduleManager
from astro_sched.ports.notifications import ConflictObserver
from astro_sched.shell.config import ShellConfig
from astro_sched.shell.console import ScheduleConsole


def available_notifiers() -> tuple[str, ...]:
    return ("console", "logging")


def create_observer(name: str, *, config: ShellConfig, stream: TextIO | None = None) -> ConflictObserver:
    normalized = name.strip().lower()

    if normalized == "console":
        return ConsoleConflictNotifier(enable_bell=config.enable_bell, stream=stream)
    if normalized == "logging":
        return LoggingConflictNotifier(configure_logging(config.log_level_value))

    options = ", ".join(available_notifiers())
    raise ValueError(f"Unknown SCHEDULE_NOTIFIERS entry {name!r}. Supported notifiers: {options}")


class ShellHost:
    """Bootstraps the schedule manager, its observers, and the console shell."""

    __slots__ = ("config", "manager", "console")

    def __init__(
        self,
        config: ShellConfig,
        *,
        input_func: Callable[[str], str] = input,
        stream: TextIO | None = None,
    ) -> None:
        self.config = config
        self.manager = ScheduleManager()
        for name in config.notifiers:
            self.manager.add_observer(create_observer(name, config=config, stream=stream))
        self.console = ScheduleConsole(
            self.manager,
            title=config.title,
            input_func=input_func,
            stream=stream,
        )

    def start(self) -> None:
        self.console.start()

    def stop(self) -> None:
        self.console.stop()
