"""Levenshtein distance utilities for fuzzy line matching."""

import Levenshtein

DEFAULT_THRESHOLD = 0.8


def normalized_similarity(left: str, right: str) -> float:
    """
    Similarity of two strings in [0, 1]: 1 - distance / longest length.

    Two empty strings are identical (1.0).
    """
    max_len = max(len(left), len(right))
    if max_len == 0:
        return 1.0
    return 1.0 - Levenshtein.distance(left, right) / max_len


def fuzzy_eq(left: str, right: str, threshold: float = DEFAULT_THRESHOLD) -> bool:
    """
    Check whether two lines are similar enough to count as the same line.

    The length difference is a lower bound on the edit distance, so pairs
    whose lengths alone rule out reaching the threshold are rejected
    without running the full distance computation.

    Args:
        left: First line (already trimmed by the caller)
        right: Second line (already trimmed by the caller)
        threshold: Minimum normalized similarity

    Returns:
        True if normalized similarity >= threshold
    """
    max_len = max(len(left), len(right))
    if max_len == 0:
        return True

    min_distance = abs(len(left) - len(right))
    if 1.0 - min_distance / max_len < threshold:
        return False

    return normalized_similarity(left, right) >= threshold


def line_match_cost(
    query_line: str,
    document_line: str,
    replacement_cost: int,
    mismatch_cost: int,
    threshold: float = DEFAULT_THRESHOLD,
) -> int:
    """
    Cost of pairing a query line with a document line.

    0 for an exact match, ``replacement_cost`` for a fuzzy match and
    ``mismatch_cost`` otherwise. Both lines must already be trimmed.
    """
    if query_line == document_line:
        return 0
    if fuzzy_eq(query_line, document_line, threshold):
        return replacement_cost
    return mismatch_cost
