"""
Endpoint usage models.

Models describing how a declared type is used by a documented API endpoint.
"""

from enum import Enum

from pydantic import BaseModel, Field


class UsageDirection(str, Enum):
    """Whether a type travels in a request body or a response."""

    REQUEST = "Request"
    RESPONSE = "Response"


class EndpointUsage(BaseModel):
    """A single (method, path, direction) usage of a declared type."""

    method: str = Field(description="HTTP method as written in the annotation")
    path: str = Field(description="Route path as written in the annotation")
    direction: UsageDirection = Field(description="Request body or response type")

    class Config:
        frozen = True

    @property
    def key(self) -> str:
        """Grouping key used when rendering endpoint usages."""
        return f"{self.method} {self.path}"
