"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator
from pathlib import Path
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.database import Base
from app.main import app
from app.routes.lookup import get_controller
from app.services.lookup import WordLookupService
from app.services.storage import LocalStorage, SavedWordStore
from app.state import VocabularyController
from tests.fakes import FakeCompletion, make_details


@pytest.fixture
def sample_details() -> dict[str, Any]:
    """Complete model response for 'beautiful'."""
    return make_details()


@pytest.fixture
async def async_engine(tmp_path: Path):
    """Create a test database engine."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(async_engine) -> async_sessionmaker[AsyncSession]:
    """Create a test session factory."""
    return async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
def local_storage(session_factory) -> LocalStorage:
    return LocalStorage(session_factory)


@pytest.fixture
def saved_word_store(local_storage: LocalStorage) -> SavedWordStore:
    return SavedWordStore(local_storage)


@pytest.fixture
def completion(sample_details) -> FakeCompletion:
    """Completion transport that answers every prompt with 'beautiful'."""
    return FakeCompletion(default=sample_details)


@pytest.fixture
def controller(completion: FakeCompletion, saved_word_store: SavedWordStore) -> VocabularyController:
    return VocabularyController(WordLookupService(completion), saved_word_store)


@pytest.fixture
def test_app(controller: VocabularyController) -> FastAPI:
    """Create a test FastAPI application."""
    app.dependency_overrides[get_controller] = lambda: controller
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(test_app: FastAPI) -> TestClient:
    """Create a synchronous test client."""
    return TestClient(test_app)


@pytest.fixture
async def async_client(test_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create an asynchronous test client."""
    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test",
    ) as client:
        yield client
