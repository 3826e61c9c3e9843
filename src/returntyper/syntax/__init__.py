"""Syntax trees and source coordinates."""

from returntyper.syntax.line_index import LineIndex
from returntyper.syntax.nodes import FUNCTION_LIKE_KINDS, NodeKind, SyntaxNode
from returntyper.syntax.source import SourceFile
from returntyper.syntax.treesitter import TypeScriptTreeProvider

__all__ = [
    "FUNCTION_LIKE_KINDS",
    "LineIndex",
    "NodeKind",
    "SourceFile",
    "SyntaxNode",
    "TypeScriptTreeProvider",
]
