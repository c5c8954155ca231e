"""Task commands: add, list, update, status and delete.

Every mutating command loads the task file, applies one change, prints the
table and saves the file back. ``list`` only prints.
"""

from typing import Annotated, NoReturn

import typer

from taskcli.cli.context import TaskCliContext
from taskcli.cli.formatters.panels import print_error
from taskcli.cli.formatters.tables import print_table
from taskcli.core.errors import DirectiveFormatError, InvalidIndexError
from taskcli.persistence.json_storage import JsonStorage
from taskcli.tasks.directives import parse_index, parse_indexed_directive, status_directive
from taskcli.tasks.models import Task
from taskcli.tasks.store import TaskStore


def _state(ctx: typer.Context) -> TaskCliContext:
    return ctx.obj


def _open_store(state: TaskCliContext) -> tuple[TaskStore, JsonStorage[list[Task]]]:
    """Load the task file into a store.

    A missing file starts an empty store. Any other load failure aborts the
    command before anything can be written back.
    """
    storage: JsonStorage[list[Task]] = JsonStorage(
        state.task_file,
        list[Task],
        indent=state.config.storage.indent,
        atomic=state.config.storage.atomic_writes,
    )
    loaded = storage.load()
    if loaded.is_ok:
        return TaskStore(loaded.value), storage

    if not storage.path.exists():
        return TaskStore(), storage

    print_error(str(loaded.error), title="Cannot load tasks")
    raise typer.Exit(1)


def _print_tasks(store: TaskStore, state: TaskCliContext, status: str | None = None) -> None:
    display = state.config.display
    print_table(
        store.render(
            timestamp_format=display.timestamp_format,
            show_lines=display.show_lines,
            status=status,
        )
    )


def _finish(store: TaskStore, storage: JsonStorage[list[Task]], state: TaskCliContext) -> None:
    _print_tasks(store, state)
    saved = storage.save(store.tasks)
    if saved.is_err:
        print_error(str(saved.error), title="Cannot save tasks")
        raise typer.Exit(1)


def _fail_format(error: DirectiveFormatError) -> NoReturn:
    print_error(error.message)
    raise typer.Exit(1)


def _report_index_error(error: InvalidIndexError, state: TaskCliContext) -> bool:
    """Print an index error; return True when it should fail the command."""
    print_error(f"{error.message}: {error.index} (have {error.length} tasks)")
    return state.config.cli.strict_exit


def add(
    ctx: typer.Context,
    description: Annotated[str, typer.Argument(help="Task description.")],
) -> None:
    """Add a new task with status [yellow]todo[/]."""
    state = _state(ctx)
    store, storage = _open_store(state)
    store.add(description)
    _finish(store, storage, state)


def list_tasks(
    ctx: typer.Context,
    status: Annotated[
        str | None,
        typer.Option("--status", "-s", help="Only show tasks with this status."),
    ] = None,
) -> None:
    """List tasks. The id column is the index other commands take."""
    state = _state(ctx)
    store, _ = _open_store(state)
    _print_tasks(store, state, status)


def update(
    ctx: typer.Context,
    directive: Annotated[
        str, typer.Argument(metavar="INDEX:DESCRIPTION", help="e.g. 0:Buy oat milk")
    ],
) -> None:
    """Replace the description of the task at INDEX."""
    parsed = parse_indexed_directive(directive, value_name="description")
    if parsed.is_err:
        _fail_format(parsed.error)

    state = _state(ctx)
    store, storage = _open_store(state)
    result = store.update(parsed.value.value, parsed.value.index)
    failed = result.is_err and _report_index_error(result.error, state)
    _finish(store, storage, state)
    if failed:
        raise typer.Exit(1)


def status(
    ctx: typer.Context,
    directive: Annotated[
        str, typer.Argument(metavar="INDEX:STATUS", help="e.g. 0:done or 0:mark:done")
    ],
) -> None:
    """Set the status of the task at INDEX."""
    parsed = parse_indexed_directive(directive, value_name="status")
    if parsed.is_err:
        _fail_format(parsed.error)

    state = _state(ctx)
    store, storage = _open_store(state)
    result = store.set_status(status_directive(parsed.value.value), parsed.value.index)
    failed = False
    if result.is_err:
        assert isinstance(result.error, InvalidIndexError)
        failed = _report_index_error(result.error, state)
    _finish(store, storage, state)
    if failed:
        raise typer.Exit(1)


def delete(
    ctx: typer.Context,
    index: Annotated[str, typer.Argument(metavar="INDEX", help="Position of the task.")],
) -> None:
    """Delete the task at INDEX. Later tasks move up by one."""
    parsed = parse_index(index)
    if parsed.is_err:
        _fail_format(parsed.error)

    state = _state(ctx)
    store, storage = _open_store(state)
    result = store.delete(parsed.value)
    failed = result.is_err and _report_index_error(result.error, state)
    _finish(store, storage, state)
    if failed:
        raise typer.Exit(1)


__all__ = ["add", "list_tasks", "update", "status", "delete"]
