"""Parsed source file handed to the annotator."""

from __future__ import annotations

from dataclasses import dataclass, field

from returntyper.models import Position
from returntyper.syntax.line_index import LineIndex
from returntyper.syntax.nodes import SyntaxNode


@dataclass
class SourceFile:
    """A source text together with its syntax tree."""

    path: str
    text: str
    root: SyntaxNode
    line_index: LineIndex = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.line_index = LineIndex(self.text)

    def position_at(self, offset: int) -> Position:
        return self.line_index.position_at(offset)

    def text_of(self, node: SyntaxNode) -> str:
        return self.text[node.start:node.end]
