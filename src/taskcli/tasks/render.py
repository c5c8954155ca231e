"""Tabular rendering of a task list with Rich."""

from collections.abc import Iterable
from datetime import datetime

from rich.table import Table
from rich.text import Text

from taskcli.config.models import DEFAULT_TIMESTAMP_FORMAT
from taskcli.tasks.models import Task, TaskStatus

HEADERS = ("id", "Description", "Status", "Created At", "Updated At")

STATUS_STYLES = {
    TaskStatus.TODO.value: "yellow",
    TaskStatus.IN_PROGRESS.value: "blue",
    TaskStatus.DONE.value: "green",
}


def format_timestamp(value: datetime | None, fmt: str = DEFAULT_TIMESTAMP_FORMAT) -> str:
    """Format a timestamp for display; None renders as an empty cell."""
    if value is None:
        return ""
    return value.strftime(fmt)


def render_tasks(
    tasks: Iterable[Task],
    *,
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
    show_lines: bool = False,
    title: str | None = None,
    positions: Iterable[int] | None = None,
) -> Table:
    """Build a table of tasks.

    The ``id`` column shows each task's position, which is the address the
    update/status/delete commands take, not the stored ``id`` field.

    Args:
        tasks: Tasks in display order.
        timestamp_format: strftime format for both timestamp columns.
        show_lines: Draw lines between rows.
        title: Optional table title.
        positions: Positions to show in the id column when ``tasks`` is a
            filtered subset. Defaults to 0, 1, 2, ...

    Returns:
        A Rich Table; rendering never mutates the tasks.
    """
    table = Table(
        title=title,
        show_lines=show_lines,
        border_style="blue",
        header_style="bold cyan",
    )
    table.add_column(HEADERS[0], style="dim", justify="right", no_wrap=True)
    table.add_column(HEADERS[1])
    table.add_column(HEADERS[2], justify="center")
    table.add_column(HEADERS[3], no_wrap=True)
    table.add_column(HEADERS[4], no_wrap=True)

    task_list = list(tasks)
    position_list = list(positions) if positions is not None else range(len(task_list))

    for position, task in zip(position_list, task_list, strict=True):
        table.add_row(
            str(position),
            Text(task.description),
            Text(task.status, style=STATUS_STYLES.get(task.status, "")),
            format_timestamp(task.created_at, timestamp_format),
            format_timestamp(task.updated_at, timestamp_format),
        )

    return table
