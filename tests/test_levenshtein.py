"""Tests for fuzzy line equality and line match costs."""

from fuzzylocate.table import DELETION_COST, INSERTION_COST, REPLACEMENT_COST
from fuzzylocate.utils.levenshtein import fuzzy_eq, line_match_cost, normalized_similarity


def _cost(query_line: str, document_line: str) -> int:
    return line_match_cost(
        query_line, document_line, REPLACEMENT_COST, DELETION_COST + INSERTION_COST
    )


class TestNormalizedSimilarity:
    """Test 1 - distance / longest length."""

    def test_identical(self):
        assert normalized_similarity("abc", "abc") == 1.0

    def test_both_empty(self):
        assert normalized_similarity("", "") == 1.0

    def test_one_empty(self):
        assert normalized_similarity("", "abcd") == 0.0

    def test_single_substitution(self):
        assert normalized_similarity("abcde", "abcdx") == 0.8

    def test_transposition_counts_two_edits(self):
        score = normalized_similarity('println!("world");', 'println!("wrold");')
        assert abs(score - (1 - 2 / 18)) < 1e-9


class TestFuzzyEq:
    """Test the 0.8 similarity boundary and the length-difference shortcut."""

    def test_exactly_at_threshold(self):
        """One edit in five characters is 0.8 similar: equal."""
        assert fuzzy_eq("abcde", "abcdx")

    def test_just_below_threshold(self):
        """One edit in four characters is 0.75 similar: not equal."""
        assert not fuzzy_eq("abcd", "abcx")

    def test_length_difference_rejects(self):
        assert not fuzzy_eq("abcdefghij", "abc")

    def test_length_difference_within_bound(self):
        """An appended character on a long line still matches."""
        assert fuzzy_eq("return value;", "return value;;")

    def test_both_empty(self):
        assert fuzzy_eq("", "")

    def test_custom_threshold(self):
        assert fuzzy_eq("abcd", "abcx", threshold=0.75)
        assert not fuzzy_eq("abcde", "abcdx", threshold=0.9)


class TestLineMatchCost:
    """Test the diagonal cost of pairing two lines."""

    def test_exact_match_is_free(self):
        assert _cost("fn foo() {", "fn foo() {") == 0

    def test_single_edit_is_replacement(self):
        assert _cost("abcde", "abcdx") == REPLACEMENT_COST == 1

    def test_dissimilar_is_full_mismatch(self):
        assert _cost("abcd", "abcx") == DELETION_COST + INSERTION_COST == 13

    def test_empty_lines_match_exactly(self):
        assert _cost("", "") == 0
