"""UI state container for the lookup screen.

``AppState`` is only ever replaced, never mutated: interaction handlers on
``VocabularyController`` dispatch actions, ``reduce`` computes the next state,
and the rendering layer reads ``controller.state``.
"""

import asyncio
import logging
from dataclasses import dataclass, field, replace
from typing import Literal

from app.exceptions import WordLookupError
from app.schemas import SavedWord, WordDetails
from app.services.lookup import WordLookupService, normalize_word
from app.services.storage import SavedWordStore

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "An unknown error occurred."

View = Literal["welcome", "loading", "error", "results"]


@dataclass(frozen=True)
class AppState:
    search_text: str = ""
    current_word: str | None = None
    word_details: WordDetails | None = None
    similar_words: tuple[str, ...] = ()
    is_loading: bool = False
    error: str | None = None
    saved_words: tuple[SavedWord, ...] = ()
    sidebar_open: bool = False
    # Bumped by every search and saved-word selection; results for an older
    # generation are discarded
    generation: int = 0

    @property
    def is_word_saved(self) -> bool:
        if not self.current_word:
            return False
        return any(saved.word == self.current_word for saved in self.saved_words)

    @property
    def view(self) -> View:
        if self.error:
            return "error"
        if self.is_loading:
            return "loading"
        if self.word_details is not None:
            return "results"
        return "welcome"


# Actions


@dataclass(frozen=True)
class SearchTextChanged:
    text: str


@dataclass(frozen=True)
class SearchStarted:
    word: str
    generation: int


@dataclass(frozen=True)
class SearchSucceeded:
    details: WordDetails
    generation: int


@dataclass(frozen=True)
class SearchFailed:
    message: str
    generation: int


@dataclass(frozen=True)
class SimilarWordAdded:
    word: str


@dataclass(frozen=True)
class WordSaved:
    pass


@dataclass(frozen=True)
class SavedWordSelected:
    word: str
    generation: int


@dataclass(frozen=True)
class SavedWordDeleted:
    word: str


@dataclass(frozen=True)
class SavedWordsLoaded:
    saved_words: tuple[SavedWord, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SidebarToggled:
    open: bool | None = None


Action = (
    SearchTextChanged
    | SearchStarted
    | SearchSucceeded
    | SearchFailed
    | SimilarWordAdded
    | WordSaved
    | SavedWordSelected
    | SavedWordDeleted
    | SavedWordsLoaded
    | SidebarToggled
)


def reduce(state: AppState, action: Action) -> AppState:
    """Return the state that results from applying ``action``."""
    if isinstance(action, SearchTextChanged):
        return replace(state, search_text=action.text)

    if isinstance(action, SearchStarted):
        return replace(
            state,
            is_loading=True,
            error=None,
            word_details=None,
            current_word=action.word,
            similar_words=(),
            generation=action.generation,
        )

    if isinstance(action, SearchSucceeded):
        if action.generation != state.generation:
            return state
        return replace(state, word_details=action.details, is_loading=False)

    if isinstance(action, SearchFailed):
        if action.generation != state.generation:
            return state
        return replace(state, error=action.message, current_word=None, is_loading=False)

    if isinstance(action, SimilarWordAdded):
        word = action.word.strip()
        if not word or word in state.similar_words:
            return state
        return replace(state, similar_words=(*state.similar_words, word))

    if isinstance(action, WordSaved):
        if not state.current_word or state.word_details is None or state.is_word_saved:
            return state
        saved = SavedWord(
            word=state.current_word,
            details=state.word_details,
            similar_words=list(state.similar_words),
        )
        return replace(state, saved_words=(saved, *state.saved_words))

    if isinstance(action, SavedWordSelected):
        saved = next((s for s in state.saved_words if s.word == action.word), None)
        if saved is None:
            return state
        return replace(
            state,
            current_word=saved.word,
            word_details=saved.details,
            similar_words=tuple(saved.similar_words),
            search_text=saved.word,
            sidebar_open=False,
            error=None,
            is_loading=False,
            generation=action.generation,
        )

    if isinstance(action, SavedWordDeleted):
        remaining = tuple(s for s in state.saved_words if s.word != action.word)
        return replace(state, saved_words=remaining)

    if isinstance(action, SavedWordsLoaded):
        return replace(state, saved_words=action.saved_words)

    if isinstance(action, SidebarToggled):
        is_open = not state.sidebar_open if action.open is None else action.open
        return replace(state, sidebar_open=is_open)

    raise TypeError(f"Unknown action: {action!r}")


class VocabularyController:
    """Single owner of the UI state; every interaction goes through here."""

    def __init__(self, lookup: WordLookupService, store: SavedWordStore) -> None:
        self.lookup = lookup
        self.store = store
        self.state = AppState()
        self._tasks: set[asyncio.Task[None]] = set()

    def dispatch(self, action: Action) -> AppState:
        self.state = reduce(self.state, action)
        return self.state

    async def load_saved_words(self) -> None:
        saved = await self.store.load()
        self.dispatch(SavedWordsLoaded(tuple(saved)))
        logger.info(f"Loaded {len(saved)} saved words")

    def set_search_text(self, text: str) -> None:
        self.dispatch(SearchTextChanged(text))

    async def search(self, raw: str) -> None:
        """Run a lookup for ``raw``; blank input is ignored."""
        started = self._start(raw)
        if started is not None:
            await self._fetch(*started)

    def search_in_background(self, raw: str) -> asyncio.Task[None] | None:
        """Enter the loading state now and let the lookup finish in a tracked task."""
        started = self._start(raw)
        if started is None:
            return None

        task: asyncio.Task[None] = asyncio.create_task(self._fetch(*started))
        self._tasks.add(task)
        task.add_done_callback(self._task_done)
        return task

    def _task_done(self, task: asyncio.Task[None]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error(f"Background lookup failed: {exc}", exc_info=exc)

    async def wait_pending(self) -> None:
        """Wait until every background lookup has finished."""
        while self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    def cancel_pending(self) -> None:
        for task in self._tasks:
            task.cancel()

    def _start(self, raw: str) -> tuple[str, int] | None:
        if not raw.strip():
            return None

        word = normalize_word(raw)
        generation = self.state.generation + 1
        self.dispatch(SearchStarted(word, generation))
        return word, generation

    async def _fetch(self, word: str, generation: int) -> None:
        try:
            details = await self.lookup.fetch(word)
        except WordLookupError as e:
            self._finish(SearchFailed(str(e) or UNKNOWN_ERROR, generation), word)
            return

        self._finish(SearchSucceeded(details, generation), word)

    def _finish(self, action: SearchSucceeded | SearchFailed, word: str) -> None:
        if action.generation != self.state.generation:
            logger.info(f"Discarding stale result for '{word}'")
            return
        self.dispatch(action)

    def double_click(self, word: str) -> asyncio.Task[None] | None:
        """Re-search a word referenced inside the current results."""
        if not word.strip():
            return None
        self.set_search_text(word)
        return self.search_in_background(word)

    def add_similar_word(self, text: str) -> None:
        self.dispatch(SimilarWordAdded(text))

    async def save_current_word(self) -> bool:
        """Bookmark the displayed word. Returns False when nothing changed."""
        before = self.state.saved_words
        self.dispatch(WordSaved())
        if self.state.saved_words is before:
            return False
        await self.store.save(self.state.saved_words)
        return True

    def select_saved_word(self, word: str) -> bool:
        before = self.state
        self.dispatch(SavedWordSelected(word, self.state.generation + 1))
        return self.state is not before

    async def delete_saved_word(self, word: str) -> bool:
        before = self.state.saved_words
        self.dispatch(SavedWordDeleted(word))
        if len(self.state.saved_words) == len(before):
            return False
        await self.store.save(self.state.saved_words)
        return True

    def toggle_sidebar(self, open: bool | None = None) -> None:
        self.dispatch(SidebarToggled(open))
