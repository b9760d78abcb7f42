"""Word lookup routes."""

import logging

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from app.exceptions import ModelReportedError, WordLookupError
from app.schemas import WordDetails
from app.services.lookup import normalize_word
from app.state import VocabularyController

logger = logging.getLogger(__name__)

router = APIRouter(tags=["lookup"])


def get_controller(request: Request) -> VocabularyController:
    """Get the application's UI controller for dependency injection."""
    controller: VocabularyController = request.app.state.controller
    return controller


def redirect_home() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=303)


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    controller: VocabularyController = Depends(get_controller),
) -> Response:
    """Render the lookup screen for the current state."""
    return request.app.state.templates.TemplateResponse(
        request,
        "index.html",
        {"state": controller.state},
    )


@router.post("/search")
async def search(
    word: str = Form(""),
    controller: VocabularyController = Depends(get_controller),
) -> Response:
    """Submit the search form."""
    if word.strip():
        controller.set_search_text(word)
        controller.search_in_background(word)
    return redirect_home()


@router.get("/search")
async def search_referenced_word(
    word: str = "",
    controller: VocabularyController = Depends(get_controller),
) -> Response:
    """Re-search a word double-clicked inside the current results."""
    controller.double_click(word)
    return redirect_home()


@router.post("/similar")
async def add_similar_word(
    similar_word: str = Form(""),
    controller: VocabularyController = Depends(get_controller),
) -> Response:
    """Add a user annotation to the current word's similar-words list."""
    controller.add_similar_word(similar_word)
    return redirect_home()


@router.post("/sidebar")
async def toggle_sidebar(
    controller: VocabularyController = Depends(get_controller),
) -> Response:
    controller.toggle_sidebar()
    return redirect_home()


@router.get("/api/lookup/{word}")
async def lookup_word(
    word: str,
    controller: VocabularyController = Depends(get_controller),
) -> dict[str, object]:
    """Look up a word as JSON without changing the UI state."""
    normalized = normalize_word(word)
    if not normalized:
        raise HTTPException(status_code=400, detail="Word must not be empty")

    try:
        details: WordDetails = await controller.lookup.fetch(normalized)
    except ModelReportedError as e:
        raise HTTPException(status_code=422, detail=str(e)) from None
    except WordLookupError as e:
        raise HTTPException(status_code=502, detail=str(e)) from None

    return {"word": normalized, "details": details.to_json_dict()}
