"""Match candidate schema."""

from pydantic import BaseModel, Field


class Match(BaseModel):
    """A candidate document region for the current query."""

    start: int = Field(description="Byte offset where the region starts")
    end: int = Field(description="Byte offset just past the region (exclusive)")
    start_row: int = Field(description="First document row of the region (0-indexed)")
    end_row: int = Field(description="Row just past the region (exclusive)")
    cost: int = Field(description="Alignment cost of the query against this region")
    matched_lines: int = Field(description="Query lines paired with a document line")

    @property
    def row_count(self) -> int:
        """Number of document rows the region spans."""
        return self.end_row - self.start_row

    def as_slice(self) -> slice:
        """Byte range as a slice, for indexing the encoded document."""
        return slice(self.start, self.end)

    def matched_ratio(self, query_line_count: int) -> float:
        """Paired lines relative to the longer of the region and the query."""
        denominator = max(self.row_count, query_line_count)
        if denominator == 0:
            return 0.0
        return self.matched_lines / denominator
