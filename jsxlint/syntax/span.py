"""Source location helpers."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class Span:
    """Half-open ``[start, end)`` range of character offsets into a source text."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid span [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start

    def source_text(self, source: str) -> str:
        return source[self.start:self.end]


class LineIndex:
    """Translate offsets into 1-based line/column pairs."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._line_starts: List[int] = [0]
        for index, char in enumerate(source):
            if char == "\n":
                self._line_starts.append(index + 1)

    def line_col(self, offset: int) -> Tuple[int, int]:
        line = bisect_right(self._line_starts, offset) - 1
        return line + 1, offset - self._line_starts[line] + 1

    def line_text(self, line: int) -> str:
        """Return the text of the 1-based ``line`` without its line terminator."""

        start = self._line_starts[line - 1]
        if line < len(self._line_starts):
            end = self._line_starts[line] - 1
        else:
            end = len(self._source)
        return self._source[start:end].rstrip("\r")
