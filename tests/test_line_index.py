"""Tests for offset to position conversion."""

import pytest

from returntyper.models import Position
from returntyper.syntax.line_index import LineIndex


def test_single_line():
    index = LineIndex("abc")
    assert index.position_at(0) == Position(line=0, character=0)
    assert index.position_at(3) == Position(line=0, character=3)


@pytest.mark.parametrize("newline", ["\n", "\r\n", "\r", "\u2028", "\u2029"])
def test_line_breaks(newline):
    text = f"ab{newline}cd"
    index = LineIndex(text)

    assert index.position_at(0) == Position(line=0, character=0)
    assert index.position_at(text.index("c")) == Position(line=1, character=0)
    assert index.position_at(len(text)) == Position(line=1, character=2)


def test_crlf_is_one_break():
    index = LineIndex("a\r\n\r\nb")
    assert index.position_at(3) == Position(line=1, character=0)
    assert index.position_at(5) == Position(line=2, character=0)


@pytest.mark.parametrize("offset", [-1, 4])
def test_out_of_range(offset):
    with pytest.raises(ValueError):
        LineIndex("abc").position_at(offset)
