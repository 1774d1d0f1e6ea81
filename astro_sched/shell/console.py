"""Interactive numbered-menu console over the schedule manager."""

from __future__ import annotations

from typing import Callable, TextIO

from astro_sched.application.add_task import AddTask
from astro_sched.application.list_tasks import ListTasks
from astro_sched.application.mark_task_done import MarkTaskDone
from astro_sched.application.remove_task import RemoveTask
from astro_sched.application.runtime import ScheduleManager
from astro_sched.domain.outcomes import AddTaskResult, ScheduleOutcome
from astro_sched.shell.config import DEFAULT_TITLE


MENU_OPTIONS = (
    "1. Add Task",
    "2. Remove Task",
    "3. View Tasks",
    "4. Mark Task Completed",
    "5. Exit",
)


class ScheduleConsole:
    """Reads menu choices and fields, delegates to use cases, prints outcomes."""

    __slots__ = (
        "_add_task",
        "_remove_task",
        "_list_tasks",
        "_mark_task_done",
        "_input",
        "_stream",
        "_title",
        "_running",
    )

    def __init__(
        self,
        manager: ScheduleManager,
        *,
        title: str = DEFAULT_TITLE,
        input_func: Callable[[str], str] = input,
        stream: TextIO | None = None,
    ) -> None:
        self._add_task = AddTask(manager)
        self._remove_task = RemoveTask(manager)
        self._list_tasks = ListTasks(manager)
        self._mark_task_done = MarkTaskDone(manager)
        self._input = input_func
        self._stream = stream
        self._title = title
        self._running = False

    def start(self) -> None:
        self._running = True
        while self._running:
            self._print_menu()
            try:
                raw = self._prompt("Choose option: ")
            except (EOFError, KeyboardInterrupt):
                break

            # Plain ASCII digits only; no sign, padding or other scripts.
            if not (raw.isascii() and raw.isdigit()):
                self._echo("Invalid choice. Try again.")
                continue
            choice = int(raw)

            try:
                self._dispatch(choice)
            except (EOFError, KeyboardInterrupt):
                break

        self.stop()

    def stop(self) -> None:
        self._running = False

    def _dispatch(self, choice: int) -> None:
        if choice == 1:
            self._handle_add()
        elif choice == 2:
            description = self._prompt("Enter task description to remove: ")
            self._echo(self._remove_task.execute(description).message)
        elif choice == 3:
            self._handle_view()
        elif choice == 4:
            description = self._prompt("Enter task description to mark done: ")
            self._echo(self._mark_task_done.execute(description).message)
        elif choice == 5:
            self._echo("Exiting... Goodbye!")
            self._running = False
        else:
            self._echo("Invalid choice. Try again.")

    def _handle_add(self) -> None:
        description = self._prompt("Description: ")
        start_text = self._prompt("Start time (HH:mm): ")
        end_text = self._prompt("End time (HH:mm): ")
        priority = self._prompt("Priority (High/Medium/Low): ")

        result = self._add_task.execute(
            description=description,
            start_text=start_text,
            end_text=end_text,
            priority=priority,
        )
        # Conflicts are already reported through the registered observers.
        if isinstance(result, AddTaskResult) and result.outcome is ScheduleOutcome.CONFLICT:
            return
        self._echo(result.message)

    def _handle_view(self) -> None:
        tasks = self._list_tasks.execute()
        if not tasks:
            self._echo("No tasks scheduled for the day.")
            return
        for task in tasks:
            self._echo(str(task))

    def _print_menu(self) -> None:
        self._echo(f"\n--- {self._title} ---")
        for option in MENU_OPTIONS:
            self._echo(option)

    def _prompt(self, text: str) -> str:
        return self._input(text)

    def _echo(self, text: str) -> None:
        print(text, file=self._stream)
