"""Main search engine implementation."""

import time
from typing import Dict, Iterable, Optional

import structlog

from ..models.record import SearchableRecord
from ..models.response import MatchedField, SearchResult, SearchResponse
from .normalizer import TextNormalizer
from .record_scorer import score_records
from .scoring import rank
from .store import RecordStore
from .types import ScoredRecord

logger = structlog.get_logger(__name__)

# Score reported for every record when the query is empty
NEUTRAL_SCORE = 1.0


class SearchEngine:
    """Searches an owner's connections and ranks them by match quality."""

    def __init__(self, store: Optional[RecordStore] = None) -> None:
        """
        Initialize the search engine.

        Args:
            store: Record store to search; a new empty one by default
        """
        self.store = store or RecordStore()
        self.normalizer = TextNormalizer()

        # Performance tracking
        self._stats = self._empty_stats()

    def load_records(
        self,
        owner_id: str,
        records: Iterable[SearchableRecord],
        replace: bool = False
    ) -> int:
        """
        Load records for an owner into the engine.

        Returns:
            Number of records stored for the owner afterwards
        """
        total = self.store.add_records(owner_id, records, replace=replace)
        logger.info("records_loaded", owner_id=owner_id, total_records=total, replace=replace)
        return total

    def search(
        self,
        owner_id: str,
        query: str,
        max_results: Optional[int] = None
    ) -> SearchResponse:
        """
        Search an owner's records.

        An empty query returns every record unranked with a neutral score.
        Otherwise only matching records are returned, best first.

        Args:
            owner_id: Owner whose records are searched
            query: Search query
            max_results: Maximum number of results to return

        Returns:
            SearchResponse with results and metadata
        """
        start_time = time.time()
        query = query or ""
        records = self.store.get_records(owner_id)

        self._stats["total_queries"] += 1

        if self.normalizer.is_blank(query):
            self._stats["empty_queries"] += 1
            results = [
                SearchResult(record=record, score=NEUTRAL_SCORE) for record in records
            ]
        else:
            ranked = rank(score_records(records, query))
            if not ranked:
                self._stats["no_matches"] += 1
            results = [self._to_result(scored) for scored in ranked]

        total_count = len(results)
        if max_results is not None:
            results = results[:max_results]

        execution_time = (time.time() - start_time) * 1000
        self._stats["total_execution_time"] += execution_time

        logger.debug(
            "search_completed",
            owner_id=owner_id,
            words=len(self.normalizer.tokenize(query)),
            candidates=len(records),
            total_count=total_count,
            execution_time_ms=round(execution_time, 3)
        )

        return SearchResponse(
            owner_id=owner_id,
            query=query.strip(),
            total_count=total_count,
            results=results,
            execution_time_ms=execution_time
        )

    def _to_result(self, scored: ScoredRecord) -> SearchResult:
        """Convert a scored record into its API representation."""
        return SearchResult(
            record=scored.record,
            score=scored.scoring.total_score,
            matched_fields=[
                MatchedField(
                    field=match.field.value,
                    match_type=match.tier.kind,
                    score=match.score
                )
                for match in scored.scoring.matches
            ]
        )

    def get_stats(self) -> Dict[str, any]:
        """Get engine statistics."""
        stats = self._stats.copy()

        if stats["total_queries"] > 0:
            stats["average_execution_time_ms"] = (
                stats["total_execution_time"] / stats["total_queries"]
            )
            stats["no_match_rate"] = stats["no_matches"] / stats["total_queries"]
        else:
            stats["average_execution_time_ms"] = 0.0
            stats["no_match_rate"] = 0.0

        stats["store_stats"] = self.store.get_stats()

        return stats

    def clear(self) -> None:
        """Clear all records and reset statistics."""
        self.store.clear()
        self._stats = self._empty_stats()

    @staticmethod
    def _empty_stats() -> Dict[str, any]:
        return {
            "total_queries": 0,
            "empty_queries": 0,
            "no_matches": 0,
            "total_execution_time": 0.0
        }
