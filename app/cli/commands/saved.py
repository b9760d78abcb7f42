"""Saved-words management commands."""

import typer
from rich.prompt import Confirm
from rich.table import Table

from app.cli.utils.console import console, error_console
from app.cli.utils.render import render_word
from app.cli.utils.runtime import open_controller, run_async

app = typer.Typer(
    name="saved",
    help="Manage saved words",
    no_args_is_help=True,
)


@app.command(name="list")
def list_saved() -> None:
    """List saved words, newest first."""
    run_async(_list_saved())


async def _list_saved() -> None:
    """Async implementation of list command."""
    controller = await open_controller()
    saved_words = controller.state.saved_words

    if not saved_words:
        console.print("[dim]You haven't saved any words yet.[/]")
        return

    table = Table(title=f"Saved Words ({len(saved_words)})")
    table.add_column("Word", style="word")
    table.add_column("POS", style="pos")
    table.add_column("Meaning")
    table.add_column("Similar Words")

    for saved in saved_words:
        table.add_row(
            saved.word,
            saved.details.pos,
            saved.details.common_meaning,
            ", ".join(saved.similar_words),
        )

    console.print(table)


@app.command(name="show")
def show_saved(
    word: str = typer.Argument(..., help="Saved word to show"),
) -> None:
    """Show the stored breakdown of a saved word."""
    run_async(_show_saved(word))


async def _show_saved(word: str) -> None:
    """Async implementation of show command."""
    controller = await open_controller()

    if not controller.select_saved_word(word):
        error_console.print(f"[error]'{word}' is not in your saved words[/]")
        raise typer.Exit(1)

    state = controller.state
    console.print(render_word(word, state.word_details, state.similar_words, saved=True))


@app.command(name="delete")
def delete_saved(
    word: str = typer.Argument(..., help="Saved word to delete"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Delete a saved word."""
    run_async(_delete_saved(word, force))


async def _delete_saved(word: str, force: bool) -> None:
    """Async implementation of delete command."""
    controller = await open_controller()

    if not any(saved.word == word for saved in controller.state.saved_words):
        error_console.print(f"[error]'{word}' is not in your saved words[/]")
        raise typer.Exit(1)

    if not force and not Confirm.ask(f"Delete '{word}' from your saved words?"):
        console.print("[dim]Cancelled.[/]")
        return

    await controller.delete_saved_word(word)
    console.print(f"[success]Deleted saved word: {word}[/]")
