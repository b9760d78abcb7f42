"""Main CLI application entry point."""

import sys

import typer

from app.cli.commands import lookup, saved
from app.logging_config import setup_logging

app = typer.Typer(
    name="vocabquad",
    help="Look up English words and keep a list of saved words",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def startup() -> None:
    """Route log output to stderr so it does not mix with rendered panels."""
    setup_logging(stream=sys.stderr)


# Register lookup command
app.command(name="lookup", help="Look up a word")(lookup.lookup_word)

# Register saved-words subcommands
app.add_typer(saved.app, name="saved")


@app.command(name="serve", help="Run the web UI")
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind"),
    port: int = typer.Option(8000, "--port", "-p", help="Port to listen on"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Start the FastAPI web UI."""
    from app.main import run

    run(host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
