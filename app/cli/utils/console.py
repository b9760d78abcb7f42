"""Rich console configuration."""

from rich.console import Console
from rich.theme import Theme

theme = Theme(
    {
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "red bold",
        "word": "bold magenta",
        "pos": "italic blue",
        "root": "bold",
        "translation": "italic dim",
        "dim": "dim",
    }
)

# Main console for output
console = Console(theme=theme)

# Error console for stderr
error_console = Console(theme=theme, stderr=True)
