"""Character offset to line/character conversion."""

import re
from bisect import bisect_right

from returntyper.models import Position

# CRLF first so it counts as a single break
_LINE_BREAK = re.compile("\r\n|[\n\r\u2028\u2029]")


class LineIndex:
    """Line-start table for a source text."""

    def __init__(self, text: str) -> None:
        self.length = len(text)
        self.line_starts = [0] + [m.end() for m in _LINE_BREAK.finditer(text)]

    def position_at(self, offset: int) -> Position:
        """Convert a character offset into a zero-based position.

        Raises:
            ValueError: If the offset lies outside the text
        """
        if offset < 0 or offset > self.length:
            raise ValueError(f"Offset {offset} outside text of length {self.length}")
        line = bisect_right(self.line_starts, offset) - 1
        return Position(line=line, character=offset - self.line_starts[line])

