"""
Connection Search - fuzzy matching and relevance ranking for a user's connections.

This package scores connections (display name, tags and a free-text note)
against a search query with typo-tolerant matching, weights each field,
requires every query word to match somewhere, and ranks results best first.
"""

__version__ = "1.0.0"

from .core.engine import SearchEngine
from .core.fuzzy_matcher import fuzzy_match, fuzzy_match_array
from .core.record_scorer import score_record, score_records
from .models.record import SearchableRecord
from .models.response import SearchResult, SearchResponse

__all__ = [
    "SearchEngine",
    "SearchableRecord",
    "SearchResult",
    "SearchResponse",
    "fuzzy_match",
    "fuzzy_match_array",
    "score_record",
    "score_records",
]
