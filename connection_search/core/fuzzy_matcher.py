"""Fuzzy matching of a query against record text for typo-tolerant search."""

from typing import Iterable, Optional, Tuple

from .distance import levenshtein_distance, max_edit_distance
from .normalizer import TextNormalizer
from .types import NO_MATCH, MatchResult, MatchTier

EXACT_SCORE = 1.0
WORD_SCORE = 0.95
SUBSTRING_SCORE = 0.8

# Fuzzy scores are scaled into [FUZZY_BASE_SCORE, FUZZY_BASE_SCORE + FUZZY_SCORE_RANGE]
FUZZY_BASE_SCORE = 0.4
FUZZY_SCORE_RANGE = 0.2

_normalizer = TextNormalizer()


def fuzzy_match(query: str, text: str) -> MatchResult:
    """
    Classify how a query matches a text value.

    Match tiers and base scores, first satisfied wins:
    - exact: 1.0 (query equals text)
    - word: 0.95 (query equals one word of text, reported as "exact")
    - substring: 0.8 (query is contained in text)
    - fuzzy: 0.4-0.6 (within the edit distance allowed for the query length)
    - none: 0.0

    Args:
        query: The search query
        text: The text to match against

    Returns:
        MatchResult with tier and score
    """
    if _normalizer.is_blank(query) or _normalizer.is_blank(text):
        return NO_MATCH

    normalized_query = _normalizer.normalize(query)
    normalized_text = _normalizer.normalize(text)

    if normalized_query == normalized_text:
        return MatchResult(MatchTier.EXACT, EXACT_SCORE)

    if normalized_query in _normalizer.tokenize(normalized_text):
        return MatchResult(MatchTier.WORD, WORD_SCORE)

    if normalized_query in normalized_text:
        return MatchResult(MatchTier.SUBSTRING, SUBSTRING_SCORE)

    closest = _closest_within_tolerance(normalized_query, normalized_text)
    if closest is None:
        return NO_MATCH

    distance, candidate = closest
    max_len = max(len(normalized_query), len(candidate))
    similarity = 1.0 - (distance / max_len) if max_len > 0 else 0.0
    return MatchResult(MatchTier.FUZZY, FUZZY_BASE_SCORE + similarity * FUZZY_SCORE_RANGE)


def fuzzy_match_array(query: str, texts: Optional[Iterable[str]]) -> MatchResult:
    """
    Match a query against several texts (e.g. tags).

    Returns the best result; the earliest text wins ties.
    """
    if not texts:
        return NO_MATCH

    best_result = NO_MATCH
    for text in texts:
        result = fuzzy_match(query, text)
        if result.score > best_result.score:
            best_result = result

    return best_result


def _closest_within_tolerance(query: str, text: str) -> Optional[Tuple[int, str]]:
    """
    Find the candidate that qualifies the query as a fuzzy match.

    The whole text is tried first, then each of its words. Returns a tuple of
    (edit_distance, candidate) or None when nothing is close enough.
    """
    allowed = max_edit_distance(len(query))

    distance = levenshtein_distance(query, text)
    if distance <= allowed:
        return distance, text

    best: Optional[Tuple[int, str]] = None
    for token in _normalizer.tokenize(text):
        token_distance = levenshtein_distance(query, token)
        if token_distance <= allowed and (best is None or token_distance < best[0]):
            best = (token_distance, token)

    return best
