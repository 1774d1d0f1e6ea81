"""Console conflict observer printing to stdout with an optional bell."""

from __future__ import annotations

from typing import TextIO

from astro_sched.ports.notifications import ConflictObserver


class ConsoleConflictNotifier(ConflictObserver):
    """Prints each conflict as a warning line on the terminal."""

    __slots__ = ("_enable_bell", "_stream")

    def __init__(self, enable_bell: bool = False, stream: TextIO | None = None) -> None:
        self._enable_bell = enable_bell
        self._stream = stream

    def receive(self, message: str) -> None:
        print(f"⚠ Notification: {message}", file=self._stream)
        if self._enable_bell:
            print("\a", end="", file=self._stream)
