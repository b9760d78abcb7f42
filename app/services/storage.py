"""Local persistence for the saved-words collection."""

import json
import logging
from collections.abc import Sequence

from pydantic import TypeAdapter, ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.config import settings
from app.exceptions import PersistenceReadFailure
from app.models import StorageItem
from app.schemas import SavedWord

logger = logging.getLogger(__name__)

SAVED_WORDS_KEY = settings.saved_words_key

_saved_words_adapter = TypeAdapter(list[SavedWord])


class LocalStorage:
    """Durable string key/value store backed by the ``local_storage`` table."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession] | None = None) -> None:
        if session_factory is None:
            from app.database import async_session

            session_factory = async_session
        self._session_factory = session_factory

    async def get_item(self, key: str) -> str | None:
        async with self._session_factory() as session:
            item = await session.get(StorageItem, key)
            return item.value if item else None

    async def set_item(self, key: str, value: str) -> None:
        async with self._session_factory() as session:
            item = await session.get(StorageItem, key)
            if item is None:
                session.add(StorageItem(key=key, value=value))
            else:
                item.value = value
            await session.commit()

    async def remove_item(self, key: str) -> None:
        async with self._session_factory() as session:
            item = await session.get(StorageItem, key)
            if item is not None:
                await session.delete(item)
                await session.commit()


class SavedWordStore:
    """Read and write the ordered saved-words collection under a fixed key."""

    def __init__(self, storage: LocalStorage, key: str = SAVED_WORDS_KEY) -> None:
        self.storage = storage
        self.key = key

    async def load(self) -> list[SavedWord]:
        """
        Load the saved collection.

        Returns an empty list when nothing is stored or the stored data
        cannot be read; such failures are logged and never raised.
        """
        try:
            return await self._read()
        except PersistenceReadFailure as e:
            logger.error(f"Failed to load saved words from local storage: {e}")
            return []

    async def _read(self) -> list[SavedWord]:
        try:
            raw = await self.storage.get_item(self.key)
        except SQLAlchemyError as e:
            raise PersistenceReadFailure(f"storage read failed: {e}") from e

        if not raw:
            return []

        try:
            return _saved_words_adapter.validate_json(raw)
        except ValidationError as e:
            raise PersistenceReadFailure(f"stored data is not a saved-word list: {e}") from e

    async def save(self, collection: Sequence[SavedWord]) -> None:
        """Persist the full ordered collection, replacing what was stored."""
        payload = json.dumps(
            [saved.to_json_dict() for saved in collection],
            ensure_ascii=False,
        )
        try:
            await self.storage.set_item(self.key, payload)
        except SQLAlchemyError as e:
            logger.error(f"Failed to save words to local storage: {e}")
            return

        logger.debug(f"Persisted {len(collection)} saved words")
