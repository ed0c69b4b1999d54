"""
Unit tests for the type registry.
"""

import logging
from pathlib import Path

import pytest

from go_ts_generator.analyzer.type_registry import TypeRegistry
from go_ts_generator.models.declaration import DeclarationKind, FieldEntry, TypeDeclaration
from go_ts_generator.models.endpoint import EndpointUsage, UsageDirection


def make_declaration(name: str, file_path: str = "models/a.go", field: str = "a") -> TypeDeclaration:
    return TypeDeclaration(
        name=name,
        kind=DeclarationKind.RECORD,
        fields=[FieldEntry(name=field, source_name=field, type_expression="string")],
        file_path=Path(file_path),
    )


class TestTypeRegistry:
    """Tests for TypeRegistry."""

    def test_insertion_order(self) -> None:
        """Test that iteration follows registration order."""
        registry = TypeRegistry()
        for name in ["Zeta", "Alpha", "Mid"]:
            registry.register(make_declaration(name))

        assert [d.name for d in registry] == ["Zeta", "Alpha", "Mid"]
        assert len(registry) == 3

    def test_first_registration_wins(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that duplicates are discarded, not merged."""
        registry = TypeRegistry()
        registry.register(make_declaration("User", "first/user.go", field="first"))

        with caplog.at_level(logging.INFO, logger="go_ts_generator"):
            added = registry.register(make_declaration("User", "second/user.go", field="second"))

        assert added is False
        assert registry.get("User").fields[0].name == "first"
        assert "Discarding duplicate type User" in caplog.text

    def test_register_many(self) -> None:
        """Test counting registered declarations."""
        registry = TypeRegistry()

        added = registry.register_many([
            make_declaration("A"),
            make_declaration("B"),
            make_declaration("A"),
        ])

        assert added == 2

    def test_lookup(self) -> None:
        """Test lookups by name."""
        registry = TypeRegistry()
        registry.register(make_declaration("A", "x/a.go"))

        assert "A" in registry
        assert "C" not in registry
        assert registry.get("A").name == "A"
        assert registry.get("C") is None

    def test_add_endpoint(self) -> None:
        """Test attaching endpoint usages by name."""
        registry = TypeRegistry()
        registry.register(make_declaration("User"))
        usage = EndpointUsage(method="get", path="/users", direction=UsageDirection.RESPONSE)

        assert registry.add_endpoint("User", usage) is True
        assert registry.add_endpoint("Missing", usage) is False
        assert registry.get("User").endpoints == [usage]
