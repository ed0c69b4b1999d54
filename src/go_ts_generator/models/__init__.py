"""
Data models for go-ts-generator.

This package contains Pydantic models for representing extracted type
declarations, their fields, and the API endpoints that use them.
"""

from go_ts_generator.models.declaration import (
    ALIAS_VALUE_FIELD,
    DeclarationKind,
    FieldEntry,
    TypeDeclaration,
)
from go_ts_generator.models.endpoint import (
    EndpointUsage,
    UsageDirection,
)

__all__ = [
    # Declaration models
    "ALIAS_VALUE_FIELD",
    "DeclarationKind",
    "FieldEntry",
    "TypeDeclaration",
    # Endpoint models
    "EndpointUsage",
    "UsageDirection",
]
