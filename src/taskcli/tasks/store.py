"""In-memory ordered task collection.

Tasks are kept in insertion order. Commands address tasks by zero-based
position; deleting a task shifts every later position down by one. The
stored ``id`` is assigned once at creation and never renumbered.

Expected failures (out-of-range positions, malformed status directives) are
returned as Result values and logged where they are detected.

Usage:
    store = TaskStore(tasks_loaded_from_disk)
    store.add("Write report")

    result = store.set_status("mark:done", 0)
    if result.is_err:
        print(result.error)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from rich.table import Table

from taskcli.config.models import DEFAULT_TIMESTAMP_FORMAT
from taskcli.core.errors import DirectiveFormatError, InvalidIndexError
from taskcli.core.types import Result
from taskcli.observability.logging import get_logger
from taskcli.tasks.directives import parse_status_directive
from taskcli.tasks.models import Task, TaskStatus, now
from taskcli.tasks.render import render_tasks

log = get_logger(__name__)


class TaskStore:
    """Ordered, mutable sequence of tasks for a single invocation."""

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks) if tasks is not None else []

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __getitem__(self, index: int) -> Task:
        return self._tasks[index]

    @property
    def tasks(self) -> list[Task]:
        """Snapshot of the tasks in order (the list is a copy, tasks are not)."""
        return list(self._tasks)

    def add(self, description: str) -> Task:
        """Append a new task with status "todo" and return it.

        Any description is accepted, including an empty one.
        """
        task = Task(
            id=len(self._tasks) + 1,
            description=description,
            status=TaskStatus.TODO.value,
            created_at=now(),
        )
        self._tasks.append(task)
        log.info("tasks.task.added", index=len(self._tasks) - 1, task_id=task.id)
        return task

    def validate_index(self, index: int) -> Result[None, InvalidIndexError]:
        """Check that ``index`` addresses a task (0 <= index < len)."""
        if index < 0 or index >= len(self._tasks):
            error = InvalidIndexError(index, len(self._tasks))
            log.warning("tasks.index.invalid", index=index, length=len(self._tasks))
            return Result.err(error)
        return Result.ok(None)

    def delete(self, index: int) -> Result[Task, InvalidIndexError]:
        """Remove the task at ``index`` and return it."""
        return self.validate_index(index).map(lambda _: self._pop(index))

    def _pop(self, index: int) -> Task:
        task = self._tasks.pop(index)
        log.info("tasks.task.deleted", index=index, task_id=task.id)
        return task

    def update(self, description: str, index: int) -> Result[Task, InvalidIndexError]:
        """Replace the description of the task at ``index``.

        Status and timestamps are left as they are.
        """
        return self.validate_index(index).map(lambda _: self._describe(index, description))

    def _describe(self, index: int, description: str) -> Task:
        task = self._tasks[index]
        task.description = description
        log.info("tasks.task.updated", index=index, task_id=task.id)
        return task

    def set_status(
        self, directive: str, index: int
    ) -> Result[Task, DirectiveFormatError | InvalidIndexError]:
        """Apply a ``"mark:<status>"`` directive to the task at ``index``.

        The directive is parsed before the index is checked, so malformed input
        is rejected without touching the store. The new status is taken
        verbatim and ``updated_at`` is set to now.
        """
        parsed = parse_status_directive(directive)
        if parsed.is_err:
            log.warning("tasks.directive.invalid", directive=directive)
            return Result.err(parsed.error)

        checked = self.validate_index(index)
        if checked.is_err:
            return Result.err(checked.error)

        task = self._tasks[index]
        task.status = parsed.value
        task.updated_at = now()
        log.info("tasks.task.status_changed", index=index, task_id=task.id, status=task.status)
        return Result.ok(task)

    def positions_with_status(self, status: str) -> list[int]:
        """Positions of the tasks whose status equals ``status``."""
        return [i for i, task in enumerate(self._tasks) if task.status == status]

    def filter_by_status(self, status: str) -> list[Task]:
        """Tasks whose status equals ``status``, in store order."""
        return [self._tasks[i] for i in self.positions_with_status(status)]

    def render(
        self,
        *,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
        show_lines: bool = False,
        status: str | None = None,
    ) -> Table:
        """Build the task table, optionally limited to one status.

        Filtered rows keep their real positions in the id column.
        """
        if status is None:
            return render_tasks(
                self._tasks, timestamp_format=timestamp_format, show_lines=show_lines
            )

        positions = self.positions_with_status(status)
        return render_tasks(
            self.filter_by_status(status),
            timestamp_format=timestamp_format,
            show_lines=show_lines,
            positions=positions,
        )
