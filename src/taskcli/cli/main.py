"""taskcli CLI main entry point.

This module defines the main Typer application, loads configuration once per
invocation in the root callback and registers the task and config commands.
"""

import os
from pathlib import Path
from typing import Annotated

import typer

from taskcli import __version__
from taskcli.cli.commands import config, tasks
from taskcli.cli.context import TaskCliContext
from taskcli.cli.formatters import console
from taskcli.cli.formatters.panels import print_error, print_warning
from taskcli.config.loader import load_config, resolve_task_file
from taskcli.config.models import TaskCliConfig, get_config_dir, get_default_config
from taskcli.core.errors import ConfigError
from taskcli.observability.logging import LoggingConfig as LogSettings
from taskcli.observability.logging import (
    LogMode,
    bind_context,
    clear_context,
    configure_logging,
    get_mode_from_env,
)

app = typer.Typer(
    name="taskcli",
    help="taskcli - track tasks in a JSON file",
    rich_markup_mode="rich",
)

# Lets a signed index such as -1 through as an argument.
INDEXED_COMMAND_SETTINGS = {"ignore_unknown_options": True}

app.command("add")(tasks.add)
app.command("list")(tasks.list_tasks)
app.command("update", context_settings=INDEXED_COMMAND_SETTINGS)(tasks.update)
app.command("status", context_settings=INDEXED_COMMAND_SETTINGS)(tasks.status)
app.command("delete", context_settings=INDEXED_COMMAND_SETTINGS)(tasks.delete)
app.add_typer(config.app, name="config")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold cyan]taskcli[/] version [green]{__version__}[/]")
        raise typer.Exit()


def _setup_logging(app_config: TaskCliConfig) -> None:
    settings = app_config.logging
    log_dir = Path(settings.log_path).expanduser()
    if not log_dir.is_absolute():
        log_dir = get_config_dir() / log_dir

    if "TASKCLI_LOG_MODE" in os.environ:
        mode = get_mode_from_env()
    else:
        mode = LogMode(settings.mode)

    configure_logging(
        LogSettings(
            mode=mode,
            log_level=settings.level.upper(),
            log_dir=log_dir,
            max_log_days=settings.max_log_days,
            enable_file_logging=settings.enable_file_logging,
        )
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    task_file: Annotated[
        Path | None,
        typer.Option(
            "--file",
            "-f",
            dir_okay=False,
            help="Task file to use (overrides $TASKCLI_FILE and config).",
        ),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            dir_okay=False,
            help="Configuration file (default: ~/.taskcli/config.yaml).",
        ),
    ] = None,
) -> None:
    """taskcli - track tasks in a JSON file.

    Tasks are addressed by the index shown in the [bold cyan]id[/] column.

    Use [bold cyan]taskcli COMMAND --help[/] for command-specific help.
    """
    try:
        settings = load_config(config_file)
    except ConfigError as e:
        if ctx.invoked_subcommand != "config":
            print_error(e.message, title="Configuration error")
            raise typer.Exit(1) from e
        print_warning(f"{e.message}\nUsing default configuration.")
        settings = get_default_config()

    _setup_logging(settings)
    resolved = resolve_task_file(settings, task_file)

    clear_context()
    bind_context(task_file=str(resolved))
    ctx.obj = TaskCliContext(config=settings, task_file=resolved, config_file=config_file)

    if ctx.invoked_subcommand is None:
        print_error("Invalid command. Run taskcli --help for usage.")


__all__ = ["app", "main"]
