"""
Field weighting, score combination and ranking of search results.

Name matches are weighted highest, followed by tags, then notes. A record that
matches in several fields gets a bonus on top of its best field score.
"""

from functools import cmp_to_key
from typing import Dict, Iterable, List, Union

from .types import (
    EMPTY_SCORING,
    FieldKind,
    FieldMatch,
    MatchResult,
    MatchTier,
    ScoredRecord,
    ScoringResult,
)

FIELD_WEIGHTS: Dict[FieldKind, float] = {
    FieldKind.NAME: 1.0,
    FieldKind.TAG: 0.9,
    FieldKind.NOTE: 0.7,
}

MULTI_FIELD_BONUS = 0.1
MAX_SCORE = 1.0


def field_weight(field: Union[FieldKind, str]) -> float:
    """Get the weight multiplier for a field kind or its string value."""
    return FIELD_WEIGHTS[FieldKind(field)]


def score_field(field: Union[FieldKind, str], match: MatchResult) -> FieldMatch:
    """
    Apply the field weight to a match result.

    Args:
        field: The field the match came from (name, tag, note)
        match: Result of fuzzy matching against that field

    Returns:
        FieldMatch with weighted score and the original tier
    """
    field = FieldKind(field)
    return FieldMatch(field=field, tier=match.tier, score=match.score * FIELD_WEIGHTS[field])


def combine_field_scores(field_matches: Iterable[FieldMatch]) -> ScoringResult:
    """
    Combine field matches into one relevance score.

    Takes the best field score and adds 0.1 for every additional matching
    field, capped at 1.0. Non-matches are dropped; the rest keep their order.
    """
    valid_matches = tuple(
        match for match in field_matches
        if match.tier is not MatchTier.NONE and match.score > 0
    )

    if not valid_matches:
        return EMPTY_SCORING

    best_score = max(match.score for match in valid_matches)
    bonus = (len(valid_matches) - 1) * MULTI_FIELD_BONUS

    return ScoringResult(
        matches=valid_matches,
        total_score=min(best_score + bonus, MAX_SCORE),
    )


def compare_scores(a: ScoringResult, b: ScoringResult) -> int:
    """
    Compare two scoring results for a best-first sort.

    Returns a negative number if a should come before b. Ties are broken by
    the number of matching fields, then by having an exact match.
    """
    if a.total_score != b.total_score:
        return -1 if a.total_score > b.total_score else 1

    if len(a.matches) != len(b.matches):
        return -1 if len(a.matches) > len(b.matches) else 1

    a_exact = a.has_exact_match
    b_exact = b.has_exact_match
    if a_exact != b_exact:
        return -1 if a_exact else 1

    return 0


rank_key = cmp_to_key(lambda a, b: compare_scores(a.scoring, b.scoring))


def rank(scored: Iterable[ScoredRecord]) -> List[ScoredRecord]:
    """Drop non-matching records and sort the rest best first, keeping input order on ties."""
    return sorted(
        (item for item in scored if item.scoring.total_score > 0),
        key=rank_key,
    )
