"""Data models for connection search."""

from .record import SearchableRecord
from .response import (
    MatchedField,
    SearchResult,
    SearchResponse,
    LoadRecordsResponse,
    ErrorResponse,
    HealthResponse,
)
from .request import SearchRequest, LoadRecordsRequest

__all__ = [
    "SearchableRecord",
    "MatchedField",
    "SearchResult",
    "SearchResponse",
    "LoadRecordsResponse",
    "ErrorResponse",
    "HealthResponse",
    "SearchRequest",
    "LoadRecordsRequest",
]
