import pytest

from lspcheck.text import (
    LineColumn,
    LineIndex,
    LinePosition,
    TextRange,
    TextSize,
    from_line_column,
    to_line_column,
)


def test_zero_indexed_positions_round_trip_through_one_indexed_columns() -> None:
    for line in range(0, 50, 7):
        for character in range(0, 120, 13):
            position = LinePosition(line, character)
            local = to_line_column(position)

            assert local == LineColumn(line + 1, character + 1)
            assert from_line_column(local) == position


def test_line_column_rejects_zero() -> None:
    with pytest.raises(ValueError, match="one-indexed"):
        LineColumn(0, 1)


def test_line_index_maps_offsets_and_positions_both_ways() -> None:
    text = "ab\ncde\n\nf"
    index = LineIndex(text)

    assert index.line_count == 4
    assert index.offset_of(LinePosition(1, 2)) == TextSize(5)
    assert index.position_of(TextSize(5)) == LinePosition(1, 2)
    assert index.offset_of(LinePosition(2, 0)) == TextSize(7)
    assert index.position_of(TextSize(len(text))) == LinePosition(3, 1)


def test_line_index_clamps_out_of_range_positions() -> None:
    text = "ab\ncde\n"
    index = LineIndex(text)

    assert index.offset_of(LinePosition(0, 40)) == TextSize(2)
    assert index.offset_of(LinePosition(9, 0)) == TextSize(len(text))


def test_line_index_excludes_carriage_return_from_line_content() -> None:
    index = LineIndex("ab\r\ncd")

    assert index.line_end(0) == TextSize(2)
    assert index.offset_of(LinePosition(0, 10)) == TextSize(2)
    assert index.offset_of(LinePosition(1, 1)) == TextSize(5)


def test_text_range_rejects_inverted_bounds() -> None:
    assert TextRange(3, 3).is_empty()
    assert TextRange(2, 5).as_tuple() == (2, 5)
    with pytest.raises(ValueError, match="start > end"):
        TextRange(4, 2)
