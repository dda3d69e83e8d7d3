"""Streaming fuzzy matcher - locate a streamed, imperfect copy of a document region."""

import structlog

from .config import settings
from .schemas.match import Match
from .snapshot import BaseSnapshot
from .table import AlignmentTable

logger = structlog.get_logger(__name__)


class StreamingFuzzyMatcher:
    """
    Incrementally locate the document region a query reproduces.

    The query arrives in arbitrary chunks (typically LLM output). Complete
    lines are committed as they appear and each commit extends the alignment
    table by the new rows only. After every push the best region found so far
    is available; finish() flushes the trailing partial line and returns all
    equally good regions.

    One matcher serves one query against one snapshot.
    """

    def __init__(
        self,
        snapshot: BaseSnapshot,
        *,
        fuzzy_threshold: float | None = None,
        min_match_ratio: float | None = None,
        line_hint_tolerance: int | None = None,
    ):
        """
        Initialize the matcher.

        Args:
            snapshot: Document to search; never modified
            fuzzy_threshold: Line similarity for a fuzzy match (default: settings)
            min_match_ratio: Minimum matched ratio of a candidate (default: settings)
            line_hint_tolerance: Max rows between candidate and hint (default: settings)
        """
        self.snapshot = snapshot
        self.fuzzy_threshold = (
            settings.fuzzy_threshold if fuzzy_threshold is None else fuzzy_threshold
        )
        self.min_match_ratio = (
            settings.min_match_ratio if min_match_ratio is None else min_match_ratio
        )
        self.line_hint_tolerance = (
            settings.line_hint_tolerance if line_hint_tolerance is None else line_hint_tolerance
        )

        self._document_lines = [
            snapshot.line_text(row).strip() for row in range(snapshot.line_count())
        ]
        self._query_lines: list[str] = []
        self._trimmed_query_lines: list[str] = []
        self._incomplete_line = ""
        self._line_hint: int | None = None
        self._matches: list[Match] = []
        self._finished = False
        self.table = AlignmentTable(len(self._document_lines) + 1)

    def query_lines(self) -> list[str]:
        """Committed query lines, in arrival order."""
        return list(self._query_lines)

    @property
    def candidates(self) -> list[Match]:
        """Current tied best-cost candidates, ordered by end row."""
        return list(self._matches)

    @property
    def line_hint(self) -> int | None:
        return self._line_hint

    @property
    def is_finished(self) -> bool:
        return self._finished

    def push(self, chunk: str, line_hint: int | None = None) -> Match | None:
        """
        Push a new chunk of query text and get the best match found so far.

        Partial lines are buffered until their newline arrives.

        Args:
            chunk: Next piece of the query
            line_hint: Approximate document row of the region; replaces any
                earlier hint when given

        Returns:
            The hint-selected match, else the first tied candidate, else None
        """
        if self._finished:
            logger.warning("Ignoring push after finish", chunk_chars=len(chunk))
            return None

        if line_hint is not None:
            self._line_hint = line_hint

        self._incomplete_line += chunk

        last_newline = self._incomplete_line.rfind("\n")
        if last_newline != -1:
            complete_part = self._incomplete_line[:last_newline]
            self._incomplete_line = self._incomplete_line[last_newline + 1 :]
            self._commit_lines(complete_part.split("\n"))

        best_match = self.select_best_match()
        if best_match is not None:
            return best_match
        return self._matches[0] if self._matches else None

    def finish(self) -> list[Match]:
        """
        Commit any trailing partial line and return all tied best matches.

        The result is not narrowed by the line hint.
        """
        if not self._finished:
            self._finished = True
            if self._incomplete_line:
                self._commit_lines([self._incomplete_line])
                self._incomplete_line = ""

        logger.debug(
            "Finished matching",
            query_lines=len(self._query_lines),
            candidates=len(self._matches),
        )
        return list(self._matches)

    def select_best_match(self) -> Match | None:
        """
        Pick the single best candidate, using the line hint to break ties.

        Returns:
            The only candidate; or, among several, the one starting closest to
            the hint within tolerance; otherwise None
        """
        if not self._matches:
            return None

        if len(self._matches) == 1:
            return self._matches[0]

        if self._line_hint is None:
            logger.debug("Ambiguous matches without line hint", candidates=len(self._matches))
            return None

        best_match = None
        best_distance = None
        for match in self._matches:
            distance = abs(match.start_row - self._line_hint)
            if distance > self.line_hint_tolerance:
                continue
            if best_distance is None or distance < best_distance:
                best_distance = distance
                best_match = match

        if best_match is None:
            logger.debug(
                "No candidate within line hint tolerance",
                line_hint=self._line_hint,
                tolerance=self.line_hint_tolerance,
            )
        return best_match

    def _commit_lines(self, lines: list[str]) -> None:
        """Append completed lines and recompute candidates."""
        for line in lines:
            if line.endswith("\r"):
                line = line[:-1]
            self._query_lines.append(line)
            self._trimmed_query_lines.append(line.strip())

        self.table.extend(self._trimmed_query_lines, self._document_lines, self.fuzzy_threshold)
        self._matches = self._find_matches()

    def _find_matches(self) -> list[Match]:
        """
        Collect every lowest-cost alignment end point that passes the ratio gate.

        Returns:
            Matches ordered by end row
        """
        query_line_count = len(self._trimmed_query_lines)
        last_row = self.table.last_row()

        best_cost = None
        best_columns: list[int] = []
        for col in range(1, len(last_row)):
            cost = last_row[col]
            if best_cost is None or cost < best_cost:
                best_cost = cost
                best_columns = [col]
            elif cost == best_cost:
                best_columns.append(col)

        matches = []
        for end_row in best_columns:
            start_row, matched_lines = self.table.backtrace(query_line_count, end_row)
            ratio = matched_lines / max(end_row - start_row, query_line_count)
            if matched_lines == 0 or ratio < self.min_match_ratio:
                logger.debug(
                    "Rejected candidate",
                    start_row=start_row,
                    end_row=end_row,
                    matched_ratio=round(ratio, 3),
                )
                continue

            matches.append(
                Match(
                    start=self.snapshot.row_start_offset(start_row),
                    end=self.snapshot.row_end_offset(end_row - 1),
                    start_row=start_row,
                    end_row=end_row,
                    cost=best_cost,
                    matched_lines=matched_lines,
                )
            )

        logger.debug(
            "Resolved candidates",
            query_lines=query_line_count,
            best_cost=best_cost,
            tied=len(best_columns),
            accepted=len(matches),
        )
        return matches
