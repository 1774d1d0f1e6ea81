"""Notification port for conflict observers."""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class ConflictObserver(Protocol):
    """Sink notified synchronously when a new task collides with a scheduled one."""

    def receive(self, message: str) -> None:
        """Accept a human-readable conflict message."""


class CallableObserver(ConflictObserver):
    """Adapts a plain ``message -> None`` callable to the observer port."""

    __slots__ = ("_callback",)

    def __init__(self, callback: Callable[[str], None]) -> None:
        self._callback = callback

    def receive(self, message: str) -> None:
        self._callback(message)
