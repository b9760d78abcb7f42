"""Render word details as the four Rich panels."""

from collections.abc import Sequence

from rich.columns import Columns
from rich.console import Group, RenderableType
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from app.schemas import WordDetails


def _heading(text: str) -> Text:
    return Text(text, style="bold")


def _example(sentence: str, translation: str) -> Text:
    text = Text(sentence)
    text.append("\n")
    text.append(translation, style="translation")
    return text


def word_details_panel(word: str, details: WordDetails, saved: bool = False) -> Panel:
    title = Text.from_markup(
        f"[word]{escape(word)}[/] [pos]{escape(details.pos)}[/]"
        + (" [success](saved)[/]" if saved else "")
    )

    info = Table(show_header=False, box=None, padding=(0, 1))
    info.add_column("Label", style="bold")
    info.add_column("Value")
    info.add_row("Syllables", details.syllabification)
    info.add_row("Pronunciation", details.pronunciation)
    info.add_row("Common Meaning", details.common_meaning)
    info.add_row("Etymological Meaning", Text(details.etymological_meaning, style="italic"))

    parts: list[RenderableType] = [title, info, _heading("Examples (Primary Form)")]
    parts.extend(_example(f"• {ex.sentence}", f"  {ex.translation}") for ex in details.examples)

    parts.append(_heading("Other Forms"))
    for form in details.forms:
        line = Text.from_markup(f"[word]{escape(form.word)}[/] [pos]({escape(form.pos)})[/]")
        parts.extend([line, Text(f"  {form.definition}")])
        parts.append(_example(f"  {form.example}", f"  {form.example_translation}"))

    return Panel(Group(*parts), title="[bold]Word Details[/]", border_style="blue")


def etymology_panel(details: WordDetails) -> Panel:
    etymology = details.etymology
    root = Text.from_markup(
        f"[root]{escape(etymology.root)}[/] [dim]({escape(etymology.root_source)})[/] "
        f"– [italic]{escape(etymology.root_meaning)}[/]"
    )

    related = Table(box=None, padding=(0, 1))
    related.add_column("Word", style="word")
    related.add_column("Translation", style="translation")
    related.add_column("Breakdown")
    for item in etymology.related_words:
        related.add_row(item.word, item.translation, item.breakdown)

    return Panel(
        Group(
            _heading("Root"),
            root,
            _heading("Root Development"),
            Text(etymology.root_development),
            _heading("Related Words"),
            related,
        ),
        title="[bold]Etymology & Roots[/]",
        border_style="blue",
    )


def synonyms_panel(details: WordDetails) -> Panel:
    parts: list[RenderableType] = []
    for synonym in details.synonyms:
        parts.append(Text(synonym.word, style="word"))
        parts.append(Text(f"  {synonym.usage_difference}"))
        parts.append(_example(f"  {synonym.example}", f"  {synonym.example_translation}"))

    if not parts:
        parts.append(Text("No synonyms with detailed usage were found.", style="dim"))

    return Panel(Group(*parts), title="[bold]Synonyms[/]", border_style="blue")


def similar_words_panel(details: WordDetails, similar_words: Sequence[str]) -> Panel:
    parts: list[RenderableType] = []
    if details.confusable_words:
        parts.append(_heading("Commonly Confused"))
        for item in details.confusable_words:
            parts.append(
                Text.from_markup(
                    f"[word]{escape(item.word)}[/] [pos]({escape(item.pos)})[/] "
                    f"{escape(item.definition)}"
                )
            )

    parts.append(_heading("My List"))
    if similar_words:
        parts.append(Text(", ".join(similar_words), style="yellow"))
    else:
        parts.append(
            Text("Add words that you find visually similar to help with recall.", style="dim")
        )

    return Panel(Group(*parts), title="[bold]Similar Looking Words[/]", border_style="blue")


def render_word(
    word: str,
    details: WordDetails,
    similar_words: Sequence[str] = (),
    saved: bool = False,
) -> RenderableType:
    """Build the full four-panel view for a word."""
    return Columns(
        [
            word_details_panel(word, details, saved=saved),
            etymology_panel(details),
            synonyms_panel(details),
            similar_words_panel(details, similar_words),
        ],
        equal=True,
        expand=True,
    )
