"""Value types shared by the matching and scoring functions."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Tuple


class MatchTier(Enum):
    """How a query relates to a single text value."""

    EXACT = "exact"
    WORD = "word"
    SUBSTRING = "substring"
    FUZZY = "fuzzy"
    NONE = "none"

    @property
    def kind(self) -> str:
        """Reported match type; whole-text and whole-word hits are both "exact"."""
        if self is MatchTier.WORD:
            return "exact"
        return self.value

    @property
    def is_exact(self) -> bool:
        return self in (MatchTier.EXACT, MatchTier.WORD)


class FieldKind(str, Enum):
    """Record attribute a match was found in."""

    NAME = "name"
    TAG = "tag"
    NOTE = "note"


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching one query string against one text value."""

    tier: MatchTier
    score: float


@dataclass(frozen=True)
class FieldMatch:
    """A match result after its field weight has been applied."""

    field: FieldKind
    tier: MatchTier
    score: float


@dataclass(frozen=True)
class ScoringResult:
    """
    Per-record outcome of a search.

    Attributes:
        matches: Field-attributed matches, never containing a NONE tier
        total_score: Relevance used for ranking (0-1)
    """

    matches: Tuple[FieldMatch, ...]
    total_score: float

    @property
    def has_exact_match(self) -> bool:
        return any(match.tier.is_exact for match in self.matches)


@dataclass(frozen=True)
class ScoredRecord:
    """A record paired with its scoring result."""

    record: Any
    scoring: ScoringResult


NO_MATCH = MatchResult(MatchTier.NONE, 0.0)
EMPTY_SCORING = ScoringResult(matches=(), total_score=0.0)
