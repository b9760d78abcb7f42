"""Helpers for running async services from synchronous CLI code."""

import asyncio
from collections.abc import Coroutine
from typing import Any, TypeVar

from app.config import settings
from app.database import init_db
from app.services.lookup import WordLookupService
from app.services.storage import LocalStorage, SavedWordStore
from app.state import VocabularyController

T = TypeVar("T")


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    """Run an async coroutine from synchronous CLI code."""
    return asyncio.run(coro)


async def open_controller() -> VocabularyController:
    """Prepare storage and return a controller with saved words loaded."""
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    await init_db()

    controller = VocabularyController(WordLookupService(), SavedWordStore(LocalStorage()))
    await controller.load_saved_words()
    return controller
