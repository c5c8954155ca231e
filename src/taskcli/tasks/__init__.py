"""Task domain: the Task record, the in-memory store and directive parsing."""

from taskcli.tasks.directives import (
    IndexedDirective,
    parse_index,
    parse_indexed_directive,
    parse_status_directive,
    status_directive,
)
from taskcli.tasks.models import Task, TaskStatus
from taskcli.tasks.render import render_tasks
from taskcli.tasks.store import TaskStore

__all__ = [
    "Task",
    "TaskStatus",
    "TaskStore",
    "IndexedDirective",
    "parse_index",
    "parse_indexed_directive",
    "parse_status_directive",
    "status_directive",
    "render_tasks",
]
