"""Scoring of whole records against multi-word queries."""

from typing import Iterable, List, Optional, Sequence

from .fuzzy_matcher import fuzzy_match, fuzzy_match_array
from .normalizer import TextNormalizer
from .scoring import MAX_SCORE, score_field
from .types import EMPTY_SCORING, FieldKind, FieldMatch, ScoredRecord, ScoringResult

MULTI_WORD_BONUS = 0.05
MAX_MULTI_WORD_BONUS = 0.2

_normalizer = TextNormalizer()


def score_record(record, query: str) -> ScoringResult:
    """
    Score a record against a search query.

    Every word of the query has to match somewhere in the record (name, tags
    or note, not necessarily the same field). The total score is the mean of
    the per-word best scores plus a bonus of 0.05 per extra word, up to 0.2.

    Args:
        record: Any object exposing ``name``, ``tags`` and ``note``
        query: Raw search query

    Returns:
        ScoringResult; empty when any word fails to match
    """
    words = _normalizer.tokenize(query)
    if not words:
        return EMPTY_SCORING

    name = getattr(record, "name", None) or ""
    tags = getattr(record, "tags", None) or []
    note = getattr(record, "note", None)

    word_scores = []
    for word in words:
        score = _best_word_score(word, name, tags, note)
        if score <= 0:
            return EMPTY_SCORING
        word_scores.append(score)

    average_score = sum(word_scores) / len(word_scores)
    multi_word_bonus = min((len(words) - 1) * MULTI_WORD_BONUS, MAX_MULTI_WORD_BONUS)
    total_score = min(average_score + multi_word_bonus, MAX_SCORE)

    # Attribution uses the whole query, so it can disagree with the per-word total
    return ScoringResult(
        matches=tuple(_attribute_fields(query.strip(), name, tags, note)),
        total_score=total_score,
    )


def score_records(records: Iterable, query: str) -> List[ScoredRecord]:
    """Score each record against the query, preserving input order."""
    return [ScoredRecord(record=record, scoring=score_record(record, query)) for record in records]


def _best_word_score(word: str, name: str, tags: Sequence[str], note: Optional[str]) -> float:
    """Best unweighted score for a single word across all fields of a record."""
    best_score = 0.0

    if name:
        best_score = max(best_score, fuzzy_match(word, name).score)

    if tags:
        best_score = max(best_score, fuzzy_match_array(word, tags).score)

    if note:
        best_score = max(best_score, fuzzy_match(word, note).score)

    return best_score


def _attribute_fields(
    query: str, name: str, tags: Sequence[str], note: Optional[str]
) -> List[FieldMatch]:
    """Weighted matches of the full query per field, in name, tag, note order."""
    field_matches = []

    if name:
        name_match = fuzzy_match(query, name)
        if name_match.score > 0:
            field_matches.append(score_field(FieldKind.NAME, name_match))

    if tags:
        tag_match = fuzzy_match_array(query, tags)
        if tag_match.score > 0:
            field_matches.append(score_field(FieldKind.TAG, tag_match))

    if note:
        note_match = fuzzy_match(query, note)
        if note_match.score > 0:
            field_matches.append(score_field(FieldKind.NOTE, note_match))

    return field_matches
