"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates

from app.config import settings
from app.database import init_db
from app.logging_config import setup_logging
from app.routes import lookup_router, saved_router
from app.services.lookup import WordLookupService
from app.services.storage import LocalStorage, SavedWordStore
from app.state import VocabularyController

# Configure logging
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    logger.info("Starting Vocabulary Quadrant...")

    settings.data_dir.mkdir(parents=True, exist_ok=True)
    await init_db()
    logger.info("Database initialized")

    controller = VocabularyController(WordLookupService(), SavedWordStore(LocalStorage()))
    await controller.load_saved_words()
    app.state.controller = controller

    yield

    logger.info("Shutting down Vocabulary Quadrant...")
    controller.cancel_pending()


app = FastAPI(
    title="Vocabulary Quadrant",
    description="Look up English words and keep a list of saved words",
    version="0.1.0",
    lifespan=lifespan,
)

# Setup templates
templates_dir = Path(__file__).parent / "templates"
app.state.templates = Jinja2Templates(directory=str(templates_dir))

# Include routers
app.include_router(lookup_router)
app.include_router(saved_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": "0.1.0",
    }


def run(host: str = "127.0.0.1", port: int = 8000, reload: bool = False) -> None:
    """Run the web UI with uvicorn."""
    import uvicorn

    uvicorn.run("app.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    run()
