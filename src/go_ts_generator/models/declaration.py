"""
Type declaration models.

Models representing Go type declarations after they have been translated
into their TypeScript shape.
"""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from go_ts_generator.models.endpoint import EndpointUsage

ALIAS_VALUE_FIELD = "value"


class DeclarationKind(str, Enum):
    """Shape of the emitted declaration."""

    RECORD = "record"  # struct, rendered as an interface
    ALIAS = "alias"    # anything else, rendered as a type alias


class FieldEntry(BaseModel):
    """A single field of a record declaration."""

    name: str = Field(description="External name used in the emitted declaration")
    source_name: str = Field(description="Go identifier of the field")
    type_expression: str = Field(description="TypeScript type text")
    optional: bool = Field(default=False, description="Field may be absent")
    nullable: bool = Field(
        default=False,
        description="Field may carry an explicit null in addition to being optional",
    )
    doc_comment: str = Field(default="", description="Field documentation")
    validation_rules: list[str] = Field(
        default_factory=list,
        description="Validation tag values, rendered as 'key: value'",
    )
    is_exported: bool = Field(default=True, description="Go identifier is exported")

    class Config:
        frozen = True


class TypeDeclaration(BaseModel):
    """A declared Go type and everything needed to render it."""

    name: str = Field(description="Type name, unique within a registry")
    kind: DeclarationKind = Field(description="Record or alias")
    fields: list[FieldEntry] = Field(default_factory=list)
    is_exported: bool = Field(default=True, description="Go identifier is exported")
    is_api_type: bool = Field(
        default=False,
        description="Wire-facing type whose field names are kept verbatim",
    )
    doc_comment: str = Field(default="", description="Declaration documentation")
    endpoints: list[EndpointUsage] = Field(
        default_factory=list,
        description="Endpoints using this type, appended during correlation",
    )
    file_path: Optional[Path] = Field(
        default=None,
        description="File the declaration was found in",
    )
    line_number: Optional[int] = Field(
        default=None,
        description="Line number of the type name",
    )

    @property
    def is_record(self) -> bool:
        return self.kind == DeclarationKind.RECORD

    @property
    def underlying(self) -> Optional[str]:
        """Underlying type expression of an alias declaration."""
        if self.kind != DeclarationKind.ALIAS or not self.fields:
            return None
        return self.fields[0].type_expression

    def add_endpoint(self, usage: EndpointUsage) -> None:
        """Record that an endpoint uses this type."""
        self.endpoints.append(usage)
