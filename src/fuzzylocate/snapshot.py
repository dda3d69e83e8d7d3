"""Read-only document snapshots the matcher aligns queries against."""

from abc import ABC, abstractmethod
from pathlib import Path

from .schemas.match import Match


class BaseSnapshot(ABC):
    """
    Immutable, line-indexed view of a document.

    Offsets are byte offsets into the document's encoded form and must fall
    on character boundaries.
    """

    @abstractmethod
    def line_count(self) -> int:
        """Number of rows in the document."""

    @abstractmethod
    def line_text(self, row: int) -> str:
        """Text of a row, without its line terminator."""

    @abstractmethod
    def row_start_offset(self, row: int) -> int:
        """Byte offset of the first character of a row."""

    @abstractmethod
    def row_end_offset(self, row: int) -> int:
        """Byte offset just past the last character of a row (terminator excluded)."""


class TextSnapshot(BaseSnapshot):
    """
    In-memory snapshot over a string, with UTF-8 byte offsets.

    Rows are split on "\\n" only, so an empty document has one empty row and
    a trailing newline produces a final empty row, as in an editor buffer.
    """

    def __init__(self, text: str):
        self._text = text
        self._data = text.encode("utf-8")
        self._lines = text.split("\n")

        self._row_starts: list[int] = []
        offset = 0
        for line in self._lines:
            self._row_starts.append(offset)
            offset += len(line.encode("utf-8")) + 1

    @classmethod
    def from_path(cls, path: Path) -> "TextSnapshot":
        """Load a snapshot from a UTF-8 text file."""
        return cls(Path(path).read_text(encoding="utf-8"))

    @property
    def text(self) -> str:
        return self._text

    def line_count(self) -> int:
        return len(self._lines)

    def line_text(self, row: int) -> str:
        return self._lines[row]

    def row_start_offset(self, row: int) -> int:
        return self._row_starts[row]

    def row_end_offset(self, row: int) -> int:
        return self._row_starts[row] + len(self._lines[row].encode("utf-8"))

    def slice(self, start: int, end: int) -> str:
        """Decode the byte range [start, end) back into text."""
        return self._data[start:end].decode("utf-8")

    def text_for(self, match: Match) -> str:
        """Document text covered by a match."""
        return self.slice(match.start, match.end)
