"""Per-invocation state shared between the root callback and commands."""

from dataclasses import dataclass
from pathlib import Path

from taskcli.config.models import TaskCliConfig


@dataclass(frozen=True, slots=True)
class TaskCliContext:
    """Stored on ``typer.Context.obj`` by the root callback.

    Attributes:
        config: Loaded configuration.
        task_file: Resolved task file for this invocation.
        config_file: Explicit --config path, if one was given.
    """

    config: TaskCliConfig
    task_file: Path
    config_file: Path | None = None
