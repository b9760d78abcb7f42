"""Rich progress utilities."""

from rich.progress import Progress, SpinnerColumn, TextColumn

from app.cli.utils.console import console


def create_simple_progress() -> Progress:
    """Create a transient spinner for a single pending request."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    )
