"""Word lookup command."""

from typing import Optional

import typer

from app.cli.utils.console import console, error_console
from app.cli.utils.progress import create_simple_progress
from app.cli.utils.render import render_word
from app.cli.utils.runtime import open_controller, run_async


def lookup_word(
    word: str = typer.Argument(..., help="English word to look up"),
    save: bool = typer.Option(False, "--save", "-s", help="Save the word after looking it up"),
    similar: Optional[list[str]] = typer.Option(
        None, "--similar", "-l", help="Similar-looking word to note (repeatable)"
    ),
) -> None:
    """Look up a word and show its four-panel breakdown."""
    run_async(_lookup_word(word, save, similar or []))


async def _lookup_word(word: str, save: bool, similar: list[str]) -> None:
    """Async implementation of lookup command."""
    if not word.strip():
        console.print("[dim]Nothing to look up.[/]")
        return

    controller = await open_controller()

    with create_simple_progress() as progress:
        progress.add_task(f"Looking up '{word.strip().lower()}'...", total=None)
        await controller.search(word)

    state = controller.state
    if state.error or state.word_details is None or state.current_word is None:
        error_console.print(f"[error]{state.error or 'No details returned.'}[/]")
        raise typer.Exit(1)

    for text in similar:
        controller.add_similar_word(text)

    if save:
        if await controller.save_current_word():
            console.print(f"[success]Saved '{state.current_word}'[/]")
        else:
            console.print(f"[dim]'{state.current_word}' is already saved.[/]")

    state = controller.state
    console.print(
        render_word(
            state.current_word,
            state.word_details,
            state.similar_words,
            saved=state.is_word_saved,
        )
    )
