"""Exceptions raised by returntyper."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from returntyper.syntax.nodes import SyntaxNode


class ReturnTyperError(Exception):
    """Base class for all returntyper errors."""


class TypeResolutionError(ReturnTyperError):
    """The type oracle could not produce a type, signature or rendering for a node."""

    def __init__(self, message: str, node: SyntaxNode | None = None) -> None:
        super().__init__(message)
        self.node = node


class UnsupportedFileError(ReturnTyperError):
    """No grammar is registered for the file's extension."""


class TypeTableError(ReturnTyperError):
    """A type table file could not be read or failed validation."""
