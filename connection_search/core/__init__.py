"""Core matching, scoring and search functionality."""

from .distance import levenshtein_distance, max_edit_distance
from .engine import SearchEngine
from .fuzzy_matcher import fuzzy_match, fuzzy_match_array
from .normalizer import TextNormalizer
from .record_scorer import score_record, score_records
from .scoring import combine_field_scores, compare_scores, rank, rank_key, score_field
from .store import RecordStore
from .types import (
    EMPTY_SCORING,
    NO_MATCH,
    FieldKind,
    FieldMatch,
    MatchResult,
    MatchTier,
    ScoredRecord,
    ScoringResult,
)

__all__ = [
    "levenshtein_distance",
    "max_edit_distance",
    "fuzzy_match",
    "fuzzy_match_array",
    "score_field",
    "combine_field_scores",
    "compare_scores",
    "rank",
    "rank_key",
    "score_record",
    "score_records",
    "SearchEngine",
    "RecordStore",
    "TextNormalizer",
    "EMPTY_SCORING",
    "NO_MATCH",
    "FieldKind",
    "FieldMatch",
    "MatchResult",
    "MatchTier",
    "ScoredRecord",
    "ScoringResult",
]
