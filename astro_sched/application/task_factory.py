"""Validation of raw text input into ``Task`` entities."""

from __future__ import annotations

from astro_sched.domain.outcomes import InputErrorKind, TaskCreation
from astro_sched.domain.task import Task
from astro_sched.domain.time_interval import TimeInterval, parse_clock_time


class TaskFactory:
    """Builds tasks from text fields, reporting bad input as a result value."""

    @staticmethod
    def create_task(
        description: str,
        start_text: str,
        end_text: str,
        priority: str,
    ) -> TaskCreation:
        try:
            start = parse_clock_time(start_text)
            end = parse_clock_time(end_text)
        except ValueError:
            return TaskCreation.rejected(InputErrorKind.INVALID_TIME_FORMAT)

        if end <= start:
            return TaskCreation.rejected(InputErrorKind.INVALID_INTERVAL)

        if not description.strip():
            return TaskCreation.rejected(InputErrorKind.EMPTY_DESCRIPTION)

        return TaskCreation.created(
            Task(
                description=description,
                interval=TimeInterval(start=start, end=end),
                priority=priority,
            )
        )
