"""Text offsets and line addressing."""

from lspcheck.text.line_index import (
    LineColumn,
    LineIndex,
    LinePosition,
    from_line_column,
    to_line_column,
)
from lspcheck.text.text import TextRange, TextSize

__all__ = [
    "LineColumn",
    "LineIndex",
    "LinePosition",
    "TextRange",
    "TextSize",
    "from_line_column",
    "to_line_column",
]
