"""Domain entities for the daily task schedule."""

from astro_sched.domain.outcomes import (
    AddTaskResult,
    InputErrorKind,
    ScheduleOutcome,
    TaskCreation,
)
from astro_sched.domain.task import Task
from astro_sched.domain.time_interval import TimeInterval, format_clock_time, parse_clock_time

__all__ = [
    "AddTaskResult",
    "InputErrorKind",
    "ScheduleOutcome",
    "Task",
    "TaskCreation",
    "TimeInterval",
    "format_clock_time",
    "parse_clock_time",
]
