"""taskcli - a small command-line task tracker backed by a JSON file.

Example:
    # Using CLI
    taskcli add "Buy milk"
    taskcli status 0:done
    taskcli list --status done

    # Using Python
    from taskcli.tasks import Task, TaskStore
    from taskcli.persistence import JsonStorage
"""

__version__ = "0.1.0"

__all__ = ["__version__", "main"]


def main() -> None:
    """Main entry point for the taskcli CLI.

    This function invokes the Typer app from taskcli.cli.main.
    """
    from taskcli.cli.main import app

    app()
