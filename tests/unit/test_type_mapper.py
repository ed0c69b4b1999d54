"""
Unit tests for Go to TypeScript type mapping.
"""

from pathlib import Path

import pytest

from go_ts_generator.config import NullableToken
from go_ts_generator.parser.go_parser import GoParser
from go_ts_generator.parser.type_mapper import (
    TIMESTAMP_TYPE,
    MappedType,
    TypeMapper,
)


def map_go_type(expression: str, **kwargs) -> MappedType:
    """Map the type expression of `type T <expression>`."""
    source = f"package p\n\ntype T {expression}\n".encode("utf-8")
    parsed = GoParser().parse_bytes(source, Path("p.go"))
    declaration = next(n for n in parsed.root.named_children if n.type == "type_declaration")
    spec = next(n for n in declaration.named_children if n.type == "type_spec")
    return TypeMapper(**kwargs).map_type(spec.child_by_field_name("type"))


class TestTypeMapper:
    """Tests for TypeMapper."""

    @pytest.mark.parametrize(
        "go_type,expected",
        [
            ("string", "string"),
            ("bool", "boolean"),
            ("int", "number"),
            ("int64", "number"),
            ("uint8", "number"),
            ("float32", "number"),
            ("float64", "number"),
            ("byte", "number"),
            ("rune", "number"),
            ("User", "User"),
            ("any", "any"),
        ],
    )
    def test_identifiers(self, go_type: str, expected: str) -> None:
        """Test mapping of predeclared and named types."""
        mapped = map_go_type(go_type)

        assert mapped.text == expected
        assert mapped.is_pointer is False

    def test_pointer(self) -> None:
        """Test that pointers map to their pointee and set the flag."""
        mapped = map_go_type("*User")

        assert mapped == MappedType("User", True)

    def test_slice(self) -> None:
        """Test slices of values."""
        assert map_go_type("[]string") == MappedType("string[]")

    def test_nested_slice(self) -> None:
        """Test slices of slices."""
        assert map_go_type("[][]byte").text == "number[][]"

    def test_fixed_array(self) -> None:
        """Test fixed-size arrays."""
        assert map_go_type("[4]int").text == "number[]"

    def test_slice_of_pointers(self) -> None:
        """Test that pointer elements become a nullable union."""
        mapped = map_go_type("[]*User")

        assert mapped.text == "(User | null | undefined)[]"
        assert mapped.is_pointer is True

    @pytest.mark.parametrize(
        "token,expected",
        [
            (NullableToken.NULL, "(User | null)[]"),
            (NullableToken.UNDEFINED, "(User | undefined)[]"),
        ],
    )
    def test_nullable_token(self, token: NullableToken, expected: str) -> None:
        """Test the configurable nullable element token."""
        assert map_go_type("[]*User", nullable_token=token).text == expected

    def test_map(self) -> None:
        """Test maps become Record types."""
        assert map_go_type("map[string]int") == MappedType("Record<string, number>")

    def test_map_of_pointers_default(self) -> None:
        """Test that pointer map values are not nullable by default."""
        assert map_go_type("map[int]*Category").text == "Record<number, Category>"

    def test_map_of_pointers_nullable(self) -> None:
        """Test nullable pointer map values when enabled."""
        mapped = map_go_type("map[int]*Category", nullable_map_values=True)

        assert mapped.text == "Record<number, Category | null | undefined>"

    def test_map_of_pointer_slices(self) -> None:
        """Test map values that are slices of pointers."""
        assert map_go_type("map[string][]*User").text == "Record<string, (User | null | undefined)[]>"

    def test_time(self) -> None:
        """Test that time.Time becomes an annotated string."""
        assert map_go_type("time.Time").text == TIMESTAMP_TYPE

    def test_pointer_to_time(self) -> None:
        """Test pointers to time.Time."""
        assert map_go_type("*time.Time") == MappedType(TIMESTAMP_TYPE, True)

    def test_qualified_type(self) -> None:
        """Test that package-qualified types keep the unqualified name."""
        assert map_go_type("model.User").text == "User"

    @pytest.mark.parametrize(
        "go_type",
        ["interface{}", "func()", "chan int", "struct{ A int }"],
    )
    def test_unsupported_types_are_any(self, go_type: str) -> None:
        """Test that anything without a mapping becomes any."""
        assert map_go_type(go_type).text == "any"
