"""Use case: list the day's tasks in start-time order."""

from __future__ import annotations

from astro_sched.application.runtime import ScheduleManager, TaskListing


class ListTasks:
    def __init__(self, manager: ScheduleManager) -> None:
        self._manager = manager

    def execute(self) -> TaskListing:
        return self._manager.list_tasks()
