"""Open documents and the live markers that point into them."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from lspcheck.text import (
    LineColumn,
    LineIndex,
    LinePosition,
    TextRange,
    TextSize,
    to_line_column,
)


class Marker:
    """Live character offset inside one document; follows edits until released."""

    __slots__ = ("_document", "_offset")

    def __init__(self, document: Document, offset: int) -> None:
        self._document: Document | None = document
        self._offset = offset

    @property
    def offset(self) -> TextSize:
        return TextSize(self._offset)

    @property
    def document(self) -> Document | None:
        """Owning document, or None once released."""
        return self._document

    @property
    def is_released(self) -> bool:
        return self._document is None

    def _after_insert(self, at: int, length: int) -> None:
        if at < self._offset:
            self._offset += length

    def _after_delete(self, start: int, end: int) -> None:
        if end <= self._offset:
            self._offset -= end - start
        elif start < self._offset:
            self._offset = start

    def _after_replace(self, start: int, end: int, length: int) -> None:
        if end <= self._offset:
            self._offset += length - (end - start)
        elif start < self._offset:
            self._offset = start

    def __repr__(self) -> str:
        state = "released" if self._document is None else self._document.path.name
        return f"Marker({self._offset}, {state})"


class Document:
    """Text of one open file plus the markers currently pointing into it."""

    def __init__(self, path: Path, text: str = "", *, language_id: str = "text") -> None:
        self.path = path
        self.language_id = language_id
        self._text = text
        self._line_index: LineIndex | None = None
        self._markers: list[Marker] = []

    @property
    def filename(self) -> str:
        return str(self.path)

    @property
    def text(self) -> str:
        return self._text

    @property
    def line_index(self) -> LineIndex:
        if self._line_index is None:
            self._line_index = LineIndex(self._text)
        return self._line_index

    @property
    def marker_count(self) -> int:
        return len(self._markers)

    def marker_at_offset(self, offset: TextSize) -> Marker:
        if offset.value > len(self._text):
            raise ValueError(f"Offset {offset.value} is past the end of {self.path}")
        marker = Marker(self, offset.value)
        self._markers.append(marker)
        return marker

    def marker_at(self, position: LinePosition) -> Marker:
        """Create a marker at a zero-indexed position, clamped into the text."""
        return self.marker_at_offset(self.line_index.offset_of(position))

    def position_of(self, marker: Marker) -> LinePosition:
        self._check_owner(marker)
        return self.line_index.position_of(marker.offset)

    def line_column(self, marker: Marker) -> LineColumn:
        return to_line_column(self.position_of(marker))

    def release_markers(self, markers: Iterable[Marker]) -> None:
        released = {id(marker) for marker in markers if marker.document is self}
        if not released:
            return
        kept: list[Marker] = []
        for marker in self._markers:
            if id(marker) in released:
                marker._document = None
            else:
                kept.append(marker)
        self._markers = kept

    def insert(self, offset: TextSize, text: str) -> None:
        at = offset.value
        if at > len(self._text):
            raise ValueError(f"Offset {at} is past the end of {self.path}")
        if not text:
            return
        self._text = self._text[:at] + text + self._text[at:]
        self._line_index = None
        for marker in self._markers:
            marker._after_insert(at, len(text))

    def delete(self, range: TextRange) -> None:
        start, end = range.as_tuple()
        if end > len(self._text):
            raise ValueError(f"Range {range!r} is past the end of {self.path}")
        if range.is_empty():
            return
        self._text = self._text[:start] + self._text[end:]
        self._line_index = None
        for marker in self._markers:
            marker._after_delete(start, end)

    def replace(self, range: TextRange, text: str) -> None:
        """Swap the text in `range` for `text`; markers at the end of `range` stay after the new text."""
        if range.is_empty():
            self.insert(range.start, text)
            return
        start, end = range.as_tuple()
        if end > len(self._text):
            raise ValueError(f"Range {range!r} is past the end of {self.path}")
        self._text = self._text[:start] + text + self._text[end:]
        self._line_index = None
        for marker in self._markers:
            marker._after_replace(start, end, len(text))

    def _check_owner(self, marker: Marker) -> None:
        if marker.document is not self:
            raise ValueError(f"{marker!r} does not belong to {self.path}")

    def __repr__(self) -> str:
        return f"Document({self.path}, language_id={self.language_id!r})"
