"""Line/character addressing on top of character offsets."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass

from lspcheck.text.text import TextSize


@dataclass(frozen=True, slots=True, order=True)
class LinePosition:
    """Zero-indexed (line, character) pair, as carried by the language server protocol."""

    line: int
    character: int

    def __post_init__(self):
        if self.line < 0 or self.character < 0:
            raise ValueError("LinePosition cannot be negative")


@dataclass(frozen=True, slots=True, order=True)
class LineColumn:
    """One-indexed (line, column) pair, as shown by the checking framework."""

    line: int
    column: int

    def __post_init__(self):
        if self.line < 1 or self.column < 1:
            raise ValueError("LineColumn is one-indexed")


def to_line_column(position: LinePosition) -> LineColumn:
    return LineColumn(position.line + 1, position.character + 1)


def from_line_column(line_column: LineColumn) -> LinePosition:
    return LinePosition(line_column.line - 1, line_column.column - 1)


class LineIndex:
    """
    Line-start table for one text snapshot.

    Line breaks are `\\n`; a `\\r` right before it belongs to the break, not
    to the line content. Positions past the end of a line clamp to the line
    end, and lines past the end of the text clamp to the end of the text.
    """

    __slots__ = ("_line_starts", "_text")

    def __init__(self, text: str) -> None:
        self._text = text
        starts = [0]
        index = text.find("\n")
        while index >= 0:
            starts.append(index + 1)
            index = text.find("\n", index + 1)
        self._line_starts = starts

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def line_end(self, line: int) -> TextSize:
        """Offset just past the last content character of `line`."""
        if line + 1 < len(self._line_starts):
            end = self._line_starts[line + 1] - 1
            if end > self._line_starts[line] and self._text[end - 1] == "\r":
                end -= 1
            return TextSize(end)
        return TextSize(len(self._text))

    def offset_of(self, position: LinePosition) -> TextSize:
        if position.line >= len(self._line_starts):
            return TextSize(len(self._text))
        start = self._line_starts[position.line]
        end = self.line_end(position.line).value
        return TextSize(min(start + position.character, end))

    def position_of(self, offset: TextSize) -> LinePosition:
        value = min(offset.value, len(self._text))
        line = bisect_right(self._line_starts, value) - 1
        return LinePosition(line, value - self._line_starts[line])
