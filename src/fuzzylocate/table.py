"""Growable dynamic-programming table aligning query lines against document lines."""

from array import array
from enum import IntEnum
from typing import NamedTuple, Sequence

import structlog

from .utils.levenshtein import DEFAULT_THRESHOLD, line_match_cost

logger = structlog.get_logger(__name__)

REPLACEMENT_COST = 1
INSERTION_COST = 3
DELETION_COST = 10


class Direction(IntEnum):
    """Which neighbouring cell a cell's cost was derived from."""

    FROM_ABOVE = 0  # query line left unmatched
    FROM_LEFT = 1  # document line skipped
    DIAGONAL = 2  # query line paired with document line


class CostCell(NamedTuple):
    """Read view of one table cell."""

    cost: int
    direction: Direction


class AlignmentTable:
    """
    Local alignment costs of the first N query lines against the document.

    Row r holds the cost of aligning query lines [0, r); column c the cost
    of ending the alignment just after document line c - 1. Row 0 is free
    everywhere so a match can start at any document line.

    Cells live in two flat buffers indexed by ``row * column_count + col``
    and grow one row at a time. Written cells are never rewritten.
    """

    def __init__(self, column_count: int):
        self.column_count = column_count
        self.row_count = 1
        self._costs = array("L", [0]) * column_count
        self._directions = bytearray([Direction.DIAGONAL]) * column_count

    def _index(self, row: int, col: int) -> int:
        if not (0 <= row < self.row_count and 0 <= col < self.column_count):
            raise IndexError(f"cell ({row}, {col}) outside {self.row_count}x{self.column_count} table")
        return row * self.column_count + col

    def cost(self, row: int, col: int) -> int:
        return self._costs[self._index(row, col)]

    def direction(self, row: int, col: int) -> Direction:
        return Direction(self._directions[self._index(row, col)])

    def cell(self, row: int, col: int) -> CostCell:
        index = self._index(row, col)
        return CostCell(self._costs[index], Direction(self._directions[index]))

    def last_row(self) -> list[int]:
        """Costs of the most recent row."""
        start = (self.row_count - 1) * self.column_count
        return self._costs[start : start + self.column_count].tolist()

    def extend(
        self,
        query_lines: Sequence[str],
        document_lines: Sequence[str],
        fuzzy_threshold: float = DEFAULT_THRESHOLD,
    ) -> int:
        """
        Append a row for every query line not yet in the table.

        Only the new rows are computed; existing rows are read, never written.
        At each cell the cheapest of the three moves wins, and on equal cost
        the earlier of FROM_ABOVE, FROM_LEFT, DIAGONAL is kept.

        Args:
            query_lines: All committed query lines (trimmed), oldest first
            document_lines: Document lines (trimmed); len must be column_count - 1
            fuzzy_threshold: Similarity needed for a fuzzy line match

        Returns:
            Number of rows added
        """
        old_rows = self.row_count - 1
        new_rows = len(query_lines)
        if new_rows <= old_rows:
            return 0

        cols = self.column_count
        costs = self._costs
        mismatch_cost = DELETION_COST + INSERTION_COST

        for row in range(old_rows, new_rows):
            query_line = query_lines[row]
            above = row * cols

            row_costs = array("L", [0]) * cols
            row_directions = bytearray(cols)
            row_costs[0] = (row + 1) * DELETION_COST
            row_directions[0] = Direction.FROM_ABOVE

            for col, document_line in enumerate(document_lines):
                best_cost = costs[above + col + 1] + DELETION_COST
                best_direction = Direction.FROM_ABOVE

                left_cost = row_costs[col] + INSERTION_COST
                if left_cost < best_cost:
                    best_cost = left_cost
                    best_direction = Direction.FROM_LEFT

                diagonal_cost = costs[above + col] + line_match_cost(
                    query_line,
                    document_line,
                    REPLACEMENT_COST,
                    mismatch_cost,
                    fuzzy_threshold,
                )
                if diagonal_cost < best_cost:
                    best_cost = diagonal_cost
                    best_direction = Direction.DIAGONAL

                row_costs[col + 1] = best_cost
                row_directions[col + 1] = best_direction

            costs.extend(row_costs)
            self._directions.extend(row_directions)
            self.row_count += 1

        logger.debug(
            "Extended alignment table",
            old_rows=old_rows,
            new_rows=new_rows,
            columns=cols,
        )
        return new_rows - old_rows

    def backtrace(self, row: int, col: int) -> tuple[int, int]:
        """
        Walk recorded directions from (row, col) back to row 0 or column 0.

        Returns:
            Tuple of (start column, number of diagonal steps taken)
        """
        matched_lines = 0
        while row > 0 and col > 0:
            direction = self._directions[self._index(row, col)]
            if direction == Direction.DIAGONAL:
                row -= 1
                col -= 1
                matched_lines += 1
            elif direction == Direction.FROM_ABOVE:
                row -= 1
            else:
                col -= 1
        return col, matched_lines
