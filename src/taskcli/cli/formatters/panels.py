"""Rich panels for important messages.

Provides panel templates for displaying warning, error
and success messages with consistent styling. Message text is escaped, so
user input such as ``[done]`` is printed literally.
"""

from rich.markup import escape
from rich.panel import Panel

from taskcli.cli.formatters import console


def warning_panel(
    message: str,
    title: str = "Warning",
    *,
    expand: bool = False,
) -> Panel:
    """Create a warning panel with yellow styling."""
    return Panel(
        f"[warning]{escape(message)}[/]",
        title=f"[bold yellow]{title}[/]",
        border_style="yellow",
        expand=expand,
    )


def error_panel(
    message: str,
    title: str = "Error",
    *,
    expand: bool = False,
) -> Panel:
    """Create an error panel with red styling."""
    return Panel(
        f"[error]{escape(message)}[/]",
        title=f"[bold red]{title}[/]",
        border_style="red",
        expand=expand,
    )


def success_panel(
    message: str,
    title: str = "Success",
    *,
    expand: bool = False,
) -> Panel:
    """Create a success panel with green styling."""
    return Panel(
        f"[success]{escape(message)}[/]",
        title=f"[bold green]{title}[/]",
        border_style="green",
        expand=expand,
    )


def print_warning(message: str, title: str = "Warning") -> None:
    """Print a warning message in a panel."""
    console.print(warning_panel(message, title))


def print_error(message: str, title: str = "Error") -> None:
    """Print an error message in a panel."""
    console.print(error_panel(message, title))


def print_success(message: str, title: str = "Success") -> None:
    """Print a success message in a panel."""
    console.print(success_panel(message, title))


__all__ = [
    "warning_panel",
    "error_panel",
    "success_panel",
    "print_warning",
    "print_error",
    "print_success",
]
