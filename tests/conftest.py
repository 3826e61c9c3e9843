"""
Pytest configuration and fixtures.

Includes:
- Syspath patching for local imports.
- A shared tree-sitter provider.
- A fake type oracle answering canned return types, so annotation planning
  can be tested without a TypeScript type checker.
"""

import sys
from pathlib import Path

import pytest

# Add src to path so we can import 'returntyper' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from returntyper.errors import TypeResolutionError  # noqa: E402
from returntyper.oracle.base import Signature, Symbol, TypeOracle  # noqa: E402
from returntyper.syntax.nodes import SyntaxNode  # noqa: E402
from returntyper.syntax.source import SourceFile  # noqa: E402
from returntyper.syntax.treesitter import TypeScriptTreeProvider  # noqa: E402


class FakeOracle(TypeOracle):
    """Oracle returning canned return types keyed by function name.

    ``returns`` maps a declared name to the return type of each signature.
    Functions without an entry get ``default``; a default of None makes
    them unresolvable.
    """

    def __init__(
        self,
        source_file: SourceFile,
        returns: dict[str, list[str]] | None = None,
        default: list[str] | None = None,
    ) -> None:
        self.source_file = source_file
        self.returns = returns or {}
        self.default = default

    def type_at_location(self, node: SyntaxNode) -> tuple[Signature, ...]:
        name = self.source_file.text_of(node.name) if node.name is not None else None
        returns = self.returns.get(name, self.default) if name else self.default
        if returns is None:
            raise TypeResolutionError(f"cannot type {node!r}", node)
        return tuple(Signature(return_type=r) for r in returns)

    def call_signatures(self, type_):
        return list(type_)

    def return_type(self, signature):
        return signature.return_type

    def type_to_string(self, type_):
        return type_

    def symbol_at_location(self, node):
        return Symbol(self.source_file.text_of(node))


def make_node(kind, start=0, end=0, children=None, name=None, type=""):
    """Build a SyntaxNode by hand."""
    return SyntaxNode(kind, start, end, type=type, children=children or [], name=name)


@pytest.fixture(scope="session")
def provider():
    return TypeScriptTreeProvider()


@pytest.fixture
def parse(provider):
    def _parse(text, path="test.ts"):
        return provider.parse(text, path)

    return _parse
