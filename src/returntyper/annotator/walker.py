"""Discovery of function-like nodes in a syntax tree."""

from returntyper.syntax.nodes import FUNCTION_LIKE_KINDS, SyntaxNode


def discover_function_nodes(root: SyntaxNode) -> list[SyntaxNode]:
    """Find every function-like node under ``root``.

    Nodes are returned in depth-first pre-order, siblings left to right.
    Traversal continues into function-like nodes, so nested functions are
    found as well. The root itself is included when it is function-like.
    """
    found: list[SyntaxNode] = []
    stack = [root]
    while stack:
        node = stack.pop()
        if node.kind in FUNCTION_LIKE_KINDS:
            found.append(node)
        stack.extend(reversed(node.children))
    return found
