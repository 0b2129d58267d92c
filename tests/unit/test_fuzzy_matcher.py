"""Unit tests for the fuzzy matcher functionality."""

import pytest
from connection_search.core.fuzzy_matcher import fuzzy_match, fuzzy_match_array
from connection_search.core.types import NO_MATCH, MatchTier


class TestFuzzyMatch:
    """Test cases for fuzzy_match."""

    def test_exact_match(self):
        """Test exact matching."""
        result = fuzzy_match("john", "john")

        assert result.tier is MatchTier.EXACT
        assert result.tier.kind == "exact"
        assert result.score == 1.0

    def test_exact_match_ignores_case_and_padding(self):
        """Test exact matching on trimmed, case-insensitive input."""
        assert fuzzy_match("JOHN", "john") == fuzzy_match("john", "john")
        assert fuzzy_match("  John ", "john  ").tier is MatchTier.EXACT

    def test_exact_word_match(self):
        """Test matching a whole word of the text."""
        result = fuzzy_match("john", "john doe")

        assert result.tier is MatchTier.WORD
        assert result.tier.kind == "exact"
        assert result.score == 0.95

    def test_exact_word_match_with_extra_whitespace(self):
        """Test word matching when the text has runs of whitespace."""
        result = fuzzy_match("doe", "John \t  Doe")

        assert result.tier is MatchTier.WORD
        assert result.score == 0.95

    def test_substring_match(self):
        """Test substring matching."""
        result = fuzzy_match("soft", "software")

        assert result.tier is MatchTier.SUBSTRING
        assert result.tier.kind == "substring"
        assert result.score == 0.8

    def test_fuzzy_match(self):
        """Test single character typo correction."""
        result = fuzzy_match("john", "jon")

        assert result.tier is MatchTier.FUZZY
        assert 0.4 < result.score < 0.6
        # distance 1 over length 4
        assert result.score == pytest.approx(0.4 + 0.75 * 0.2)

    def test_fuzzy_match_against_whole_text(self):
        """Test fuzzy matching a single-word text."""
        result = fuzzy_match("smyth", "Smith")

        assert result.tier is MatchTier.FUZZY
        assert result.score == pytest.approx(0.4 + 0.8 * 0.2)

    def test_fuzzy_match_against_word(self):
        """Test fuzzy matching scores against the closest word of the text."""
        result = fuzzy_match("jhn", "John Smith")

        assert result.tier is MatchTier.FUZZY
        # distance 1 against "john", not against the whole name
        assert result.score == pytest.approx(0.4 + 0.75 * 0.2)

    def test_fuzzy_score_bounds(self):
        """Test fuzzy scores stay within 0.4 and 0.6."""
        pairs = [("john", "jon"), ("enginer", "engineer"), ("photograpy", "photography"),
                 ("jhn", "john smith"), ("marathn", "ran a marathon")]

        for query, text in pairs:
            result = fuzzy_match(query, text)
            assert result.tier is MatchTier.FUZZY
            assert 0.4 <= result.score <= 0.6

    def test_no_typos_for_short_queries(self):
        """Test that two-character queries must match exactly."""
        result = fuzzy_match("ab", "cd")

        assert result.tier is MatchTier.NONE
        assert result.score == 0

    def test_too_many_typos(self):
        """Test no match when distance exceeds the budget."""
        assert fuzzy_match("jonh", "john") == NO_MATCH
        assert fuzzy_match("python", "john smith") == NO_MATCH

    @pytest.mark.parametrize("query,text", [
        ("", "john"),
        ("john", ""),
        ("   ", "john"),
        ("john", " \t "),
        (None, "john"),
        ("john", None),
    ])
    def test_empty_input(self, query, text):
        """Test handling of empty and whitespace-only input."""
        result = fuzzy_match(query, text)

        assert result.tier is MatchTier.NONE
        assert result.score == 0

    def test_tier_precedence(self):
        """Test that a whole-word hit beats a substring hit."""
        # "ann" is a word of the text and also a substring of "annabel"
        result = fuzzy_match("ann", "annabel ann")

        assert result.tier is MatchTier.WORD

    def test_deterministic(self):
        """Test repeated calls give identical results."""
        assert fuzzy_match("enginer", "software engineer") == fuzzy_match("enginer", "software engineer")


class TestFuzzyMatchArray:
    """Test cases for fuzzy_match_array."""

    def test_best_match_wins(self):
        """Test the highest scoring text is returned."""
        result = fuzzy_match_array("python", ["pythn", "python developer", "snake"])

        assert result.tier is MatchTier.WORD
        assert result.score == 0.95

    def test_exact_tag(self):
        """Test an exact tag match."""
        result = fuzzy_match_array("engineer", ["Engineer", "friend"])

        assert result.tier is MatchTier.EXACT
        assert result.score == 1.0

    def test_no_match(self):
        """Test no match across all texts."""
        assert fuzzy_match_array("xyz", ["engineer", "friend"]) == NO_MATCH

    @pytest.mark.parametrize("texts", [[], None])
    def test_empty_texts(self, texts):
        """Test handling of empty or absent texts."""
        assert fuzzy_match_array("john", texts) == NO_MATCH

    def test_blank_entries_ignored(self):
        """Test blank entries do not break matching."""
        result = fuzzy_match_array("work", ["", "  ", "work"])

        assert result.tier is MatchTier.EXACT
