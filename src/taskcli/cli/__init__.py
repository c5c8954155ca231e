"""taskcli CLI module.

This module provides the command-line interface for taskcli,
built with Typer for CLI framework and Rich for terminal output.
"""

from taskcli.cli.main import app

__all__ = ["app"]
