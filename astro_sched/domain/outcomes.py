"""Outcome values returned by the task factory and the schedule manager."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .task import Task


class InputErrorKind(str, Enum):
    """Reasons the task factory rejects raw input."""

    INVALID_TIME_FORMAT = "invalid_time_format"
    INVALID_INTERVAL = "invalid_interval"
    EMPTY_DESCRIPTION = "empty_description"

    @property
    def message(self) -> str:
        return {
            InputErrorKind.INVALID_TIME_FORMAT: "Error: Invalid time format. Use HH:mm",
            InputErrorKind.INVALID_INTERVAL: "Error: End time must be after start time",
            InputErrorKind.EMPTY_DESCRIPTION: "Error: Description must not be empty",
        }[self]


class ScheduleOutcome(str, Enum):
    """Reported result of a schedule manager operation."""

    ADDED = "added"
    CONFLICT = "conflict"
    REMOVED = "removed"
    MARKED = "marked"
    NOT_FOUND = "not_found"

    @property
    def message(self) -> str:
        return {
            ScheduleOutcome.ADDED: "Task added successfully. No conflicts.",
            ScheduleOutcome.CONFLICT: "Task not added due to a time conflict.",
            ScheduleOutcome.REMOVED: "Task removed successfully.",
            ScheduleOutcome.MARKED: "Task marked as completed.",
            ScheduleOutcome.NOT_FOUND: "Error: Task not found.",
        }[self]


@dataclass(frozen=True, slots=True)
class TaskCreation:
    """Either a validated task or the reason it could not be built."""

    task: Task | None = None
    error: InputErrorKind | None = None

    @classmethod
    def created(cls, task: Task) -> TaskCreation:
        return cls(task=task)

    @classmethod
    def rejected(cls, error: InputErrorKind) -> TaskCreation:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.task is not None

    @property
    def message(self) -> str:
        return self.error.message if self.error is not None else ""


@dataclass(frozen=True, slots=True)
class AddTaskResult:
    """Result of ``ScheduleManager.add_task``."""

    outcome: ScheduleOutcome
    task: Task
    conflicting_task: Task | None = None

    @property
    def message(self) -> str:
        return self.outcome.message
