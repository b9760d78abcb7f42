"""Saved-words sidebar routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from app.routes.lookup import get_controller, redirect_home
from app.state import VocabularyController

logger = logging.getLogger(__name__)

router = APIRouter(tags=["saved"])


@router.post("/saved")
async def save_current_word(
    controller: VocabularyController = Depends(get_controller),
) -> Response:
    """Bookmark the currently displayed word."""
    if await controller.save_current_word():
        logger.info(f"Saved word '{controller.state.current_word}'")
    return redirect_home()


@router.post("/saved/{word:path}/select")
async def select_saved_word(
    word: str,
    controller: VocabularyController = Depends(get_controller),
) -> Response:
    """Restore a saved word into the results view."""
    if not controller.select_saved_word(word):
        raise HTTPException(status_code=404, detail="Saved word not found")
    return redirect_home()


@router.post("/saved/{word:path}/delete")
async def delete_saved_word(
    word: str,
    controller: VocabularyController = Depends(get_controller),
) -> Response:
    """Remove a word from the saved list."""
    if await controller.delete_saved_word(word):
        logger.info(f"Deleted saved word '{word}'")
    return redirect_home()


@router.get("/api/saved")
async def list_saved_words(
    controller: VocabularyController = Depends(get_controller),
) -> list[dict[str, object]]:
    """Return the saved collection as JSON, newest first."""
    return [saved.to_json_dict() for saved in controller.state.saved_words]
