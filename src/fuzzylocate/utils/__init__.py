"""Utility functions for fuzzy line matching."""

from .levenshtein import fuzzy_eq, line_match_cost, normalized_similarity

__all__ = [
    "fuzzy_eq",
    "line_match_cost",
    "normalized_similarity",
]
