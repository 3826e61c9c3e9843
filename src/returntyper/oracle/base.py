"""Abstract base class for type-resolution oracles."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from returntyper.syntax.nodes import SyntaxNode


@dataclass(frozen=True)
class Signature:
    """A call signature of a function type."""

    return_type: Any
    parameter_types: tuple[Any, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Symbol:
    """A named symbol resolved from a name node."""

    name: str


class TypeOracle(ABC):
    """Computes and renders types for the nodes of one source file.

    Type handles are opaque to callers: whatever ``type_at_location`` and
    ``return_type`` return is only ever passed back into the same oracle.
    """

    @abstractmethod
    def type_at_location(self, node: SyntaxNode) -> Any:
        """Get the type of a node.

        Args:
            node: A node of the file this oracle is bound to

        Returns:
            Type handle

        Raises:
            TypeResolutionError: If no type can be computed for the node
        """
        ...

    @abstractmethod
    def call_signatures(self, type_: Any) -> list[Signature]:
        """Get the call signatures of a type, in declaration order."""
        ...

    @abstractmethod
    def return_type(self, signature: Signature) -> Any:
        """Get the return type of a signature."""
        ...

    @abstractmethod
    def type_to_string(self, type_: Any) -> str:
        """Render a type in its canonical display form."""
        ...

    @abstractmethod
    def symbol_at_location(self, node: SyntaxNode) -> Symbol | None:
        """Resolve a name node to its symbol, or None if there is none."""
        ...
