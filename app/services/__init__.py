"""Services for word lookup and saved-word persistence."""

from app.services.lookup import WordLookupService
from app.services.storage import LocalStorage, SavedWordStore

__all__ = ["WordLookupService", "LocalStorage", "SavedWordStore"]
