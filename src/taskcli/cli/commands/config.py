"""Config command group for taskcli.

Show the effective configuration or write the default config.yaml.
"""

from typing import Annotated, Any

import typer

from taskcli.cli.context import TaskCliContext
from taskcli.cli.formatters.panels import print_error, print_success
from taskcli.cli.formatters.tables import create_key_value_table, print_table
from taskcli.config.loader import CONFIG_FILE_NAME, create_default_config
from taskcli.config.models import get_config_dir
from taskcli.core.errors import ConfigError

app = typer.Typer(
    name="config",
    help="Manage taskcli configuration.",
    no_args_is_help=True,
)


@app.command()
def show(ctx: typer.Context) -> None:
    """Display the effective configuration.

    Includes the task file this invocation would use.
    """
    state: TaskCliContext = ctx.obj
    config_file = state.config_file or get_config_dir() / CONFIG_FILE_NAME

    data: dict[str, Any] = {
        "config_file": config_file,
        "task_file": state.task_file,
    }
    for section, values in state.config.model_dump().items():
        for key, value in values.items():
            data[f"{section}.{key}"] = value

    print_table(create_key_value_table(data, "Current Configuration"))


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config.yaml."),
    ] = False,
) -> None:
    """Write the default configuration file.

    The file is created in ~/.taskcli/ (or $TASKCLI_CONFIG_DIR).
    """
    try:
        path = create_default_config(overwrite=force)
    except ConfigError as e:
        print_error(f"{e.message}. Use --force to overwrite.")
        raise typer.Exit(1) from e

    print_success(f"Created configuration at {path}")


__all__ = ["app"]
