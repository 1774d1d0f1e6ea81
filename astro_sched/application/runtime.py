"""Schedule manager owning the day's tasks and its conflict observers."""

from __future__ import annotations

from dataclasses import replace
from threading import RLock
from typing import Callable, Iterator

from astro_sched.domain.outcomes import AddTaskResult, ScheduleOutcome
from astro_sched.domain.task import Task
from astro_sched.ports.notifications import CallableObserver, ConflictObserver


class TaskListing:
    """Restartable view over the schedule; each iteration reads a fresh snapshot."""

    __slots__ = ("_snapshot",)

    def __init__(self, snapshot: Callable[[], list[Task]]) -> None:
        self._snapshot = snapshot

    def __iter__(self) -> Iterator[Task]:
        yield from self._snapshot()

    def __len__(self) -> int:
        return len(self._snapshot())

    def __bool__(self) -> bool:
        return bool(self._snapshot())


class ScheduleManager:
    """Single-day task schedule keeping tasks sorted and non-overlapping."""

    __slots__ = ("_tasks", "_observers", "_lock")

    def __init__(self, observers: list[ConflictObserver] | None = None) -> None:
        self._tasks: list[Task] = []
        self._observers: list[ConflictObserver] = []
        self._lock = RLock()
        for observer in observers or ():
            self.add_observer(observer)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------
    def add_observer(self, observer: ConflictObserver | Callable[[str], None]) -> None:
        """Register a conflict sink. Duplicates are kept and notified twice."""
        if not isinstance(observer, ConflictObserver):
            observer = CallableObserver(observer)
        with self._lock:
            self._observers.append(observer)

    def notify(self, message: str) -> None:
        with self._lock:
            observers = list(self._observers)
        for observer in observers:
            observer.receive(message)

    # ------------------------------------------------------------------
    # Task operations
    # ------------------------------------------------------------------
    def add_task(self, task: Task) -> AddTaskResult:
        with self._lock:
            conflict = self._find_conflict_unlocked(task)
            if conflict is None:
                # Stored and listed tasks are copies the caller cannot mutate.
                self._tasks.append(replace(task))
                # list.sort is stable, so equal start times keep insertion order.
                self._tasks.sort(key=lambda item: item.start)
                return AddTaskResult(outcome=ScheduleOutcome.ADDED, task=task)
            conflict = replace(conflict)

        self.notify(f'Task conflicts with existing task "{conflict.description}"')
        return AddTaskResult(
            outcome=ScheduleOutcome.CONFLICT,
            task=task,
            conflicting_task=conflict,
        )

    def remove_task(self, description: str) -> ScheduleOutcome:
        with self._lock:
            index = self._index_of_unlocked(description)
            if index is None:
                return ScheduleOutcome.NOT_FOUND
            del self._tasks[index]
            return ScheduleOutcome.REMOVED

    def mark_task_done(self, description: str) -> ScheduleOutcome:
        with self._lock:
            index = self._index_of_unlocked(description)
            if index is None:
                return ScheduleOutcome.NOT_FOUND
            self._tasks[index].mark_completed()
            return ScheduleOutcome.MARKED

    def list_tasks(self) -> TaskListing:
        return TaskListing(self._snapshot)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _snapshot(self) -> list[Task]:
        with self._lock:
            return [replace(task) for task in self._tasks]

    def _find_conflict_unlocked(self, candidate: Task) -> Task | None:
        for existing in self._tasks:
            if candidate.interval.overlaps(existing.interval):
                return existing
        return None

    def _index_of_unlocked(self, description: str) -> int | None:
        for index, task in enumerate(self._tasks):
            if task.matches(description):
                return index
        return None
