"""Application use cases for the daily schedule."""

from astro_sched.application.add_task import AddTask
from astro_sched.application.list_tasks import ListTasks
from astro_sched.application.mark_task_done import MarkTaskDone
from astro_sched.application.remove_task import RemoveTask
from astro_sched.application.runtime import ScheduleManager, TaskListing
from astro_sched.application.task_factory import TaskFactory

__all__ = [
    "AddTask",
    "ListTasks",
    "MarkTaskDone",
    "RemoveTask",
    "ScheduleManager",
    "TaskFactory",
    "TaskListing",
]
