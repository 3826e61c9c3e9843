"""Data models for return-type analysis results."""

from typing import Any

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

# Serialized keys follow the camelCase shape consumed by editor tooling
_CAMEL = {"alias_generator": to_camel, "populate_by_name": True, "frozen": True}


class Position(BaseModel):
    """Zero-based line/character coordinate in a source file."""

    line: int = Field(ge=0, description="Zero-based line index")
    character: int = Field(ge=0, description="Zero-based character index within the line")

    model_config = _CAMEL


class TextToInsert(BaseModel):
    """A single point-insertion instruction."""

    position: Position = Field(
        description="Where to insert in the original text; characters are Unicode code points, not UTF-16 units"
    )
    text: str = Field(description="Literal text to insert, separator included")

    model_config = _CAMEL


class VisitedFunction(BaseModel):
    """One resolved call signature of a function-like node."""

    name: str | None = Field(default=None, description="Declared name, unset for anonymous functions")
    inferred_return_type: str = Field(description="Oracle rendering of the signature's return type")
    text_to_insert: TextToInsert | None = Field(
        default=None, description="Annotation to insert, unset when none is needed or placeable"
    )

    model_config = _CAMEL


class ResolutionFailure(BaseModel):
    """A function-like node whose type could not be resolved."""

    kind: str = Field(description="Function-like kind of the node")
    position: Position = Field(description="Start of the node")
    message: str = Field(description="Error reported by the type oracle")

    model_config = _CAMEL


class FileReport(BaseModel):
    """Analysis results for a single source file."""

    path: str = Field(description="Path of the analyzed file")
    functions: list[VisitedFunction] = Field(default_factory=list)
    failures: list[ResolutionFailure] = Field(default_factory=list)

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    @property
    def insertions(self) -> list[TextToInsert]:
        """Insertion instructions in discovery order."""
        return [f.text_to_insert for f in self.functions if f.text_to_insert is not None]

    def to_json_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict, omitting unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
