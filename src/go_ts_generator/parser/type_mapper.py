"""
Go type expression to TypeScript type mapping.
"""

from dataclasses import dataclass

from tree_sitter import Node

from go_ts_generator.config import NullableToken
from go_ts_generator.parser.go_parser import node_text

TIMESTAMP_TYPE = "string /* RFC3339 */"
ANY_TYPE = "any"

NUMBER_TYPES = frozenset({
    "int", "int8", "int16", "int32", "int64",
    "uint", "uint8", "uint16", "uint32", "uint64", "uintptr",
    "float32", "float64",
    "byte", "rune",
})

IDENTIFIER_TYPES = {
    "string": "string",
    "bool": "boolean",
    "any": ANY_TYPE,
}

ARRAY_NODE_TYPES = frozenset({"slice_type", "array_type", "implicit_length_array_type"})


@dataclass(frozen=True)
class MappedType:
    """A TypeScript type expression and whether the Go type was a pointer."""

    text: str
    is_pointer: bool = False


def unwrap_parens(node: Node) -> Node:
    """Strip any parenthesized_type wrappers."""
    while node.type == "parenthesized_type" and node.named_children:
        node = node.named_children[0]
    return node


def _pointee(node: Node) -> Node:
    return unwrap_parens(node.named_children[0])


class TypeMapper:
    """
    Convert Go type expressions into TypeScript type text.

    Pointers map to their pointee and set the pointer flag; slices and
    arrays of pointers become arrays of a nullable union; maps become
    Record<K, V>; time.Time becomes an annotated string; named types keep
    their (unqualified) name; everything unrecognised becomes any.
    """

    def __init__(
        self,
        nullable_token: NullableToken = NullableToken.NULL_OR_UNDEFINED,
        nullable_map_values: bool = False,
    ) -> None:
        """
        Initialize the mapper.

        Args:
            nullable_token: Union members used for nullable array elements.
            nullable_map_values: Apply the nullable union to pointer map values.
        """
        self.nullable_token = NullableToken(nullable_token)
        self.nullable_map_values = nullable_map_values

    def _nullable(self, text: str) -> str:
        return f"{text} | {self.nullable_token.value}"

    def map_identifier(self, name: str) -> str:
        """Map a bare Go type identifier."""
        if name in NUMBER_TYPES:
            return "number"
        return IDENTIFIER_TYPES.get(name, name)

    def map_type(self, node: Node) -> MappedType:
        """
        Map a Go type expression node.

        Args:
            node: A tree-sitter node in type position.

        Returns:
            The TypeScript text and the pointer flag.
        """
        node = unwrap_parens(node)
        kind = node.type

        if kind == "type_identifier":
            return MappedType(self.map_identifier(node_text(node)))

        if kind == "qualified_type":
            package = node.child_by_field_name("package")
            name = node.child_by_field_name("name")
            name_text = node_text(name) if name is not None else ""
            if package is not None and node_text(package) == "time" and name_text == "Time":
                return MappedType(TIMESTAMP_TYPE)
            return MappedType(name_text or ANY_TYPE)

        if kind == "pointer_type":
            return MappedType(self.map_type(_pointee(node)).text, True)

        if kind in ARRAY_NODE_TYPES:
            element = node.child_by_field_name("element")
            if element is None:
                return MappedType(ANY_TYPE)
            element = unwrap_parens(element)
            if element.type == "pointer_type":
                base = self.map_type(_pointee(element)).text
                return MappedType(f"({self._nullable(base)})[]", True)
            return MappedType(f"{self.map_type(element).text}[]")

        if kind == "map_type":
            key = node.child_by_field_name("key")
            value = node.child_by_field_name("value")
            if key is None or value is None:
                return MappedType(ANY_TYPE)
            key_text = self.map_type(key).text
            mapped_value = self.map_type(value)
            value_text = mapped_value.text
            if (
                self.nullable_map_values
                and mapped_value.is_pointer
                and unwrap_parens(value).type == "pointer_type"
            ):
                value_text = self._nullable(value_text)
            return MappedType(f"Record<{key_text}, {value_text}>")

        return MappedType(ANY_TYPE)
