"""Task domain entity occupying one interval of the day."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import time

from .time_interval import TimeInterval


@dataclass(slots=True)
class Task:
    """One scheduled task. Built by ``TaskFactory``, owned by ``ScheduleManager``."""

    description: str
    interval: TimeInterval
    priority: str
    completed: bool = False

    @property
    def start(self) -> time:
        return self.interval.start

    @property
    def end(self) -> time:
        return self.interval.end

    def mark_completed(self) -> None:
        self.completed = True

    def matches(self, description: str) -> bool:
        return self.description.casefold() == description.casefold()

    def __str__(self) -> str:
        text = f"{self.interval}: {self.description} [{self.priority}]"
        if self.completed:
            text += " (Done)"
        return text
