"""Type oracle backed by a precomputed YAML type table.

A type table records the return types a type checker inferred for the
functions of a project, so that annotations can be planned without running
the checker itself::

    functions:
      - name: greet
        returns: string
      - at: "4:10"
        file: src/app.ts
        returns: [string, number]
        parameters: [[string], [number]]

``at`` is the zero-based ``line:character`` where the function node starts.
Location entries take precedence over name entries; ``file`` restricts an
entry to paths ending with the given path components.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from returntyper.errors import TypeResolutionError, TypeTableError
from returntyper.oracle.base import Signature, Symbol, TypeOracle
from returntyper.syntax.nodes import SyntaxNode
from returntyper.syntax.source import SourceFile

logger = logging.getLogger(__name__)

_LOCATION = re.compile(r"^(\d+):(\d+)$")

# Name node types whose text is the symbol name as written
_IDENTIFIER_TYPES = {
    "identifier",
    "property_identifier",
    "private_property_identifier",
    "type_identifier",
}


class TypeTableEntry(BaseModel):
    """Recorded call signatures of one function."""

    name: str | None = Field(default=None, description="Declared function name")
    at: str | None = Field(default=None, description="Zero-based 'line:character' of the function start")
    file: str | None = Field(default=None, description="Restrict the entry to this path")
    returns: list[str] = Field(min_length=1, description="Return type per call signature")
    parameters: list[list[str]] | None = Field(
        default=None, description="Parameter types per call signature"
    )

    @field_validator("returns", mode="before")
    @classmethod
    def single_return(cls, value: Any) -> Any:
        """Accept a bare string for single-signature functions."""
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("at")
    @classmethod
    def check_location(cls, value: str | None) -> str | None:
        if value is not None and not _LOCATION.match(value):
            raise ValueError(f"expected 'line:character', got {value!r}")
        return value

    @model_validator(mode="after")
    def check_keys(self) -> TypeTableEntry:
        if self.name is None and self.at is None:
            raise ValueError("entry needs a 'name' or an 'at' location")
        if self.parameters is not None and len(self.parameters) != len(self.returns):
            raise ValueError(
                f"{len(self.parameters)} parameter lists for {len(self.returns)} signatures"
            )
        return self

    @property
    def location(self) -> tuple[int, int] | None:
        if self.at is None:
            return None
        line, character = self.at.split(":")
        return int(line), int(character)

    def matches_file(self, path: str) -> bool:
        """Check whether the entry applies to ``path``."""
        if self.file is None:
            return True
        wanted = PurePosixPath(Path(self.file).as_posix()).parts
        actual = PurePosixPath(Path(path).as_posix()).parts
        return actual[-len(wanted):] == wanted


class TypeTable(BaseModel):
    """A collection of recorded function types."""

    functions: list[TypeTableEntry] = Field(default_factory=list)

    @classmethod
    def from_yaml(cls, path: Path) -> TypeTable:
        """Load a type table from a YAML file.

        Raises:
            TypeTableError: If the file cannot be read, parsed or validated
        """
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except OSError as e:
            raise TypeTableError(f"Cannot read type table {path}: {e}") from e
        except yaml.YAMLError as e:
            raise TypeTableError(f"Invalid YAML in type table {path}: {e}") from e

        try:
            table = cls.model_validate(data)
        except ValidationError as e:
            raise TypeTableError(f"Invalid type table {path}: {e}") from e

        logger.debug(f"Loaded {len(table.functions)} type table entries from {path}")
        return table


@dataclass(frozen=True)
class TableType:
    """A type as recorded in a type table, identified by its display text."""

    text: str
    signatures: tuple[Signature, ...] = field(default_factory=tuple)


def _render_signature(signature: Signature, arrow: bool) -> str:
    params = ", ".join(
        f"arg{index}: {param.text}" for index, param in enumerate(signature.parameter_types)
    )
    separator = " =>" if arrow else ":"
    return f"({params}){separator} {signature.return_type.text}"


def _function_type(entry: TypeTableEntry) -> TableType:
    parameters = entry.parameters or [[] for _ in entry.returns]
    signatures = tuple(
        Signature(
            return_type=TableType(returns),
            parameter_types=tuple(TableType(p) for p in params),
        )
        for returns, params in zip(entry.returns, parameters)
    )
    if len(signatures) == 1:
        text = _render_signature(signatures[0], arrow=True)
    else:
        text = "{ " + " ".join(f"{_render_signature(s, arrow=False)};" for s in signatures) + " }"
    return TableType(text, signatures)


class TableOracle(TypeOracle):
    """Type oracle answering from a ``TypeTable`` for one source file."""

    def __init__(self, source_file: SourceFile, table: TypeTable) -> None:
        """Initialize the oracle.

        Args:
            source_file: File whose nodes will be queried
            table: Recorded function types; entries for other files are ignored
        """
        self.source_file = source_file
        self._by_location: dict[tuple[int, int], TypeTableEntry] = {}
        self._by_name: dict[str, TypeTableEntry] = {}

        for entry in table.functions:
            if not entry.matches_file(source_file.path):
                continue
            location = entry.location
            if location is not None:
                self._by_location.setdefault(location, entry)
            elif entry.name is not None:
                self._by_name.setdefault(entry.name, entry)

    def _lookup(self, node: SyntaxNode) -> TypeTableEntry | None:
        position = self.source_file.position_at(node.start)
        entry = self._by_location.get((position.line, position.character))
        if entry is not None:
            return entry
        if node.name is not None:
            symbol = self.symbol_at_location(node.name)
            if symbol is not None:
                return self._by_name.get(symbol.name)
        return None

    def type_at_location(self, node: SyntaxNode) -> TableType:
        entry = self._lookup(node)
        if entry is None:
            position = self.source_file.position_at(node.start)
            raise TypeResolutionError(
                f"No type recorded for {node.kind.value} at "
                f"{self.source_file.path}:{position.line}:{position.character}",
                node,
            )
        return _function_type(entry)

    def call_signatures(self, type_: Any) -> list[Signature]:
        if not isinstance(type_, TableType):
            raise TypeResolutionError(f"Not a type table type: {type_!r}")
        return list(type_.signatures)

    def return_type(self, signature: Signature) -> TableType:
        return signature.return_type

    def type_to_string(self, type_: Any) -> str:
        if not isinstance(type_, TableType):
            raise TypeResolutionError(f"Not a type table type: {type_!r}")
        return type_.text

    def symbol_at_location(self, node: SyntaxNode) -> Symbol | None:
        text = self.source_file.text_of(node)
        if node.type in _IDENTIFIER_TYPES:
            return Symbol(text)
        if node.type == "string" and len(text) >= 2:
            return Symbol(text[1:-1])
        if node.type == "number":
            return Symbol(text)
        # Computed names have no statically known symbol
        return None
