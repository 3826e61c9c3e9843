"""Syntax tree node model shared by tree providers and the annotator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class NodeKind(str, Enum):
    """Kind of a syntax node."""

    # Function-like declarations and expressions
    FUNCTION_DECLARATION = "function_declaration"
    METHOD_DECLARATION = "method_declaration"
    ARROW_FUNCTION = "arrow_function"
    FUNCTION_EXPRESSION = "function_expression"
    CONSTRUCTOR = "constructor"
    GET_ACCESSOR = "get_accessor"
    SET_ACCESSOR = "set_accessor"

    # Tokens the insertion planner looks at
    OPEN_PAREN_TOKEN = "("
    CLOSE_PAREN_TOKEN = ")"
    COLON_TOKEN = ":"

    SYNTAX_LIST = "syntax_list"
    OTHER = "other"


FUNCTION_LIKE_KINDS: frozenset[NodeKind] = frozenset({
    NodeKind.FUNCTION_DECLARATION,
    NodeKind.METHOD_DECLARATION,
    NodeKind.ARROW_FUNCTION,
    NodeKind.FUNCTION_EXPRESSION,
    NodeKind.CONSTRUCTOR,
    NodeKind.GET_ACCESSOR,
    NodeKind.SET_ACCESSOR,
})


@dataclass(eq=False)
class SyntaxNode:
    """A node of a source file's syntax tree.

    Offsets are character offsets into the file text. Nodes compare by
    identity and are never mutated once a tree provider has built them.
    """

    kind: NodeKind
    start: int
    end: int
    type: str = ""
    children: list[SyntaxNode] = field(default_factory=list)
    name: SyntaxNode | None = None

    def __repr__(self) -> str:
        return f"SyntaxNode({self.kind.name}, {self.type!r}, {self.start}..{self.end})"
