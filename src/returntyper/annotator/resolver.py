"""Resolution of a function's call signatures through a type oracle."""

from __future__ import annotations

from typing import NamedTuple

from returntyper.oracle.base import TypeOracle
from returntyper.syntax.nodes import SyntaxNode


class ResolvedSignature(NamedTuple):
    """Name and rendered return type of one call signature."""

    name: str | None
    inferred_return_type: str


def resolve_name(node: SyntaxNode, oracle: TypeOracle) -> str | None:
    """Resolve the declared name of a function-like node, if it has one."""
    if node.name is None:
        return None
    symbol = oracle.symbol_at_location(node.name)
    return symbol.name if symbol is not None else None


def resolve_signatures(node: SyntaxNode, oracle: TypeOracle) -> list[ResolvedSignature]:
    """Resolve every call signature of a function-like node.

    Overloaded and generic declarations expose several signatures; one
    result is produced per signature, in the oracle's order.

    Raises:
        TypeResolutionError: If the oracle cannot type the node
    """
    function_type = oracle.type_at_location(node)
    signatures = oracle.call_signatures(function_type)
    name = resolve_name(node, oracle)

    return [
        ResolvedSignature(name, oracle.type_to_string(oracle.return_type(signature)))
        for signature in signatures
    ]
