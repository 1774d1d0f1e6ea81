"""Use case: remove a task by description."""

from __future__ import annotations

from astro_sched.application.runtime import ScheduleManager
from astro_sched.domain.outcomes import ScheduleOutcome


class RemoveTask:
    """Application use case removing the first task matching a description."""

    def __init__(self, manager: ScheduleManager) -> None:
        self._manager = manager

    def execute(self, description: str) -> ScheduleOutcome:
        return self._manager.remove_task(description)
