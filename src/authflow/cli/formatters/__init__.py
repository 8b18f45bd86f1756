"""Rich formatters for CLI output.

A shared Console instance with semantic colours:
- green: success
- red: error
- blue: info
"""

from rich.console import Console
from rich.theme import Theme

AUTHFLOW_THEME = Theme(
    {
        "success": "green",
        "error": "red",
        "info": "blue",
        "muted": "dim",
        "highlight": "bold cyan",
    }
)

console = Console(theme=AUTHFLOW_THEME)

__all__ = ["console", "AUTHFLOW_THEME"]
