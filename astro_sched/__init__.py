"""Single-day task schedule with conflict detection and notification."""

from astro_sched.application.add_task import AddTask
from astro_sched.application.list_tasks import ListTasks
from astro_sched.application.mark_task_done import MarkTaskDone
from astro_sched.application.remove_task import RemoveTask
from astro_sched.application.runtime import ScheduleManager
from astro_sched.application.task_factory import TaskFactory
from astro_sched.domain.outcomes import InputErrorKind, ScheduleOutcome
from astro_sched.domain.task import Task

__all__ = [
    "AddTask",
    "InputErrorKind",
    "ListTasks",
    "MarkTaskDone",
    "RemoveTask",
    "ScheduleManager",
    "ScheduleOutcome",
    "Task",
    "TaskFactory",
]
