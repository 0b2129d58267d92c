"""API endpoints for connection search."""

from .search import router as search_router
from .records import router as records_router
from .health import router as health_router

__all__ = [
    "search_router",
    "records_router",
    "health_router",
]
