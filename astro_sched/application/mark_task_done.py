"""Use case: mark a task completed."""

from __future__ import annotations

from astro_sched.application.runtime import ScheduleManager
from astro_sched.domain.outcomes import ScheduleOutcome


class MarkTaskDone:
    """Application use case completing the first task matching a description."""

    def __init__(self, manager: ScheduleManager) -> None:
        self._manager = manager

    def execute(self, description: str) -> ScheduleOutcome:
        return self._manager.mark_task_done(description)
