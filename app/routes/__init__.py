"""Route handlers for Vocabulary Quadrant."""

from app.routes.lookup import router as lookup_router
from app.routes.saved import router as saved_router

__all__ = [
    "lookup_router",
    "saved_router",
]
