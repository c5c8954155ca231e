"""Rich tables for structured data display."""

from typing import Any

from rich.table import Table
from rich.text import Text

from taskcli.cli.formatters import console


def create_table(
    title: str | None = None,
    *,
    show_header: bool = True,
    show_lines: bool = False,
    border_style: str = "blue",
    header_style: str = "bold cyan",
) -> Table:
    """Create a Rich Table with the taskcli border and header styling.

    Example:
        table = create_table("Settings")
        table.add_column("Key", style="cyan")
        table.add_row("storage.file_path", "tasks.json")
        print_table(table)
    """
    return Table(
        title=title,
        show_header=show_header,
        show_lines=show_lines,
        border_style=border_style,
        header_style=header_style,
    )


def create_key_value_table(
    data: dict[str, Any],
    title: str | None = None,
    *,
    key_style: str = "cyan",
    value_style: str = "",
) -> Table:
    """Create a two-column table for key-value data.

    Values are rendered as plain text, so brackets in paths or formats are
    shown as typed.

    Args:
        data: Dictionary of key-value pairs to display.
        title: Optional table title.
        key_style: Style for the key column.
        value_style: Style for the value column.

    Returns:
        Rich Table populated with the key-value data.
    """
    table = create_table(title, show_header=False)
    table.add_column("Key", style=key_style, no_wrap=True)
    table.add_column("Value", style=value_style)

    for key, value in data.items():
        table.add_row(str(key), Text(str(value)))

    return table


def print_table(table: Table) -> None:
    """Print a Rich Table to the shared console."""
    console.print(table)


__all__ = [
    "create_table",
    "create_key_value_table",
    "print_table",
]
