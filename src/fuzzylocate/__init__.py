"""Streaming fuzzy line locator."""

from .matcher import StreamingFuzzyMatcher
from .schemas.match import Match
from .snapshot import BaseSnapshot, TextSnapshot
from .table import AlignmentTable, CostCell, Direction

__all__ = [
    "AlignmentTable",
    "BaseSnapshot",
    "CostCell",
    "Direction",
    "Match",
    "StreamingFuzzyMatcher",
    "TextSnapshot",
]
