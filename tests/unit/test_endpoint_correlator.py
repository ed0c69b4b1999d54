"""
Unit tests for swag annotation correlation.
"""

from pathlib import Path
from typing import Callable

import pytest

from go_ts_generator.analyzer.endpoint_correlator import (
    EndpointCorrelator,
    extract_endpoint_facts,
)
from go_ts_generator.analyzer.type_registry import TypeRegistry
from go_ts_generator.models.declaration import DeclarationKind, TypeDeclaration
from go_ts_generator.models.endpoint import UsageDirection
from go_ts_generator.parser.go_parser import SourceScanError


def registry_with(*names: str) -> TypeRegistry:
    registry = TypeRegistry()
    for name in names:
        registry.register(TypeDeclaration(name=name, kind=DeclarationKind.RECORD))
    return registry


class TestExtractEndpointFacts:
    """Tests for reading annotations from one comment block."""

    def test_no_router(self) -> None:
        """Test that blocks without @Router yield nothing."""
        assert extract_endpoint_facts("@Success 200 {object} User") == []

    def test_response_and_request(self) -> None:
        """Test a block with both a response and a body parameter."""
        comment = (
            "CreateUser godoc\n"
            '@Param user body CreateUserRequest true "User data"\n'
            "@Success 201 {object} UserResponse\n"
            "@Router /users [post]"
        )

        facts = extract_endpoint_facts(comment)

        assert [(f.type_name, f.method, f.path, f.direction) for f in facts] == [
            ("UserResponse", "post", "/users", UsageDirection.RESPONSE),
            ("CreateUserRequest", "post", "/users", UsageDirection.REQUEST),
        ]

    def test_array_marker_is_stripped(self) -> None:
        """Test that []Type refers to Type."""
        facts = extract_endpoint_facts("@Success 200 {array} []User\n@Router /users [get]")

        assert facts[0].type_name == "User"

    def test_non_body_params_are_ignored(self) -> None:
        """Test that path and query parameters are not request bodies."""
        comment = '@Param id path int true "ID"\n@Router /users/{id} [get]'

        assert extract_endpoint_facts(comment) == []

    def test_multiple_success_annotations(self) -> None:
        """Test that every @Success line counts."""
        comment = (
            "@Success 200 {object} User\n"
            "@Success 202 {object} Job\n"
            "@Router /users [put]"
        )

        assert [f.type_name for f in extract_endpoint_facts(comment)] == ["User", "Job"]


class TestEndpointCorrelator:
    """Tests for EndpointCorrelator."""

    def test_correlate_comment(self) -> None:
        """Test attaching usages to registered types only."""
        registry = registry_with("User")
        correlator = EndpointCorrelator(registry)

        attached = correlator.correlate_comment(
            "@Success 200 {object} User\n@Success 404 {object} ErrorBody\n@Router /users [get]"
        )

        assert attached == 1
        assert [e.key for e in registry.get("User").endpoints] == ["get /users"]

    def test_qualified_names(self) -> None:
        """Test that model.User resolves to User."""
        registry = registry_with("User")

        EndpointCorrelator(registry).correlate_comment(
            "@Success 200 {object} model.User\n@Router /me [get]"
        )

        assert len(registry.get("User").endpoints) == 1

    def test_correlate_root(
        self,
        handlers_root: Path,
    ) -> None:
        """Test correlating every handler file of a root."""
        registry = registry_with("UserResponse", "CreateUserRequest")

        attached = EndpointCorrelator(registry).correlate_root(handlers_root)

        assert attached == 4
        response = registry.get("UserResponse")
        assert [(e.key, e.direction) for e in response.endpoints] == [
            ("post /users", UsageDirection.RESPONSE),
            ("get /users/{id}", UsageDirection.RESPONSE),
            ("get /users", UsageDirection.RESPONSE),
        ]
        request = registry.get("CreateUserRequest")
        assert [(e.key, e.direction) for e in request.endpoints] == [
            ("post /users", UsageDirection.REQUEST),
        ]

    def test_broken_files_are_skipped(
        self,
        tmp_path: Path,
        write_go: Callable[[Path, str], Path],
        broken_go: str,
    ) -> None:
        """Test that unparseable files contribute nothing."""
        root = tmp_path / "handlers"
        write_go(root / "broken.go", broken_go)

        assert EndpointCorrelator(registry_with("User")).correlate_root(root) == 0

    def test_missing_root(self, tmp_path: Path) -> None:
        """Test that a missing root is fatal."""
        with pytest.raises(SourceScanError):
            EndpointCorrelator(TypeRegistry()).correlate_root(tmp_path / "missing")
