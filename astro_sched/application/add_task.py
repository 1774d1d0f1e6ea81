"""Use case: validate raw input and add the task to the schedule."""

from __future__ import annotations

from astro_sched.application.runtime import ScheduleManager
from astro_sched.application.task_factory import TaskFactory
from astro_sched.domain.outcomes import AddTaskResult, TaskCreation


class AddTask:
    """Application use case chaining the task factory into the manager."""

    def __init__(self, manager: ScheduleManager, factory: TaskFactory | None = None) -> None:
        self._manager = manager
        self._factory = factory or TaskFactory()

    def execute(
        self,
        *,
        description: str,
        start_text: str,
        end_text: str,
        priority: str,
    ) -> TaskCreation | AddTaskResult:
        creation = self._factory.create_task(description, start_text, end_text, priority)
        if creation.task is None:
            return creation
        return self._manager.add_task(creation.task)
