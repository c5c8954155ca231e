"""Rich formatters for CLI output.

This module provides a shared Console instance used by every command, so
tables and messages share one theme.

Semantic Colors:
- green: success
- yellow: warning
- red: error
- blue: info
"""

from rich.console import Console
from rich.theme import Theme

TASKCLI_THEME = Theme(
    {
        "success": "green",
        "warning": "yellow",
        "error": "red",
        "info": "blue",
        "muted": "dim",
        "highlight": "bold cyan",
    }
)

# Shared Console instance for all CLI modules
console = Console(theme=TASKCLI_THEME, force_terminal=True)

__all__ = ["console", "TASKCLI_THEME"]
