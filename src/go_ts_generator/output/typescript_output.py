"""
TypeScript declaration emitter.

Renders a TypeRegistry as a self-contained TypeScript source file:
a fixed header, `any` placeholders for every referenced type that was
never declared, then one interface or type alias per declaration in
registry order.
"""

import json
import re
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from go_ts_generator.analyzer.type_registry import TypeRegistry
from go_ts_generator.classification import to_pascal_case
from go_ts_generator.config import Config
from go_ts_generator.models.declaration import FieldEntry, TypeDeclaration
from go_ts_generator.models.endpoint import EndpointUsage, UsageDirection
from go_ts_generator.output.formatters import BaseFormatter, register_formatter
from go_ts_generator.parser.type_mapper import TIMESTAMP_TYPE

HEADER_TEMPLATE = """\
// This file is auto-generated. Do not edit directly.
// Generated at: {timestamp}
// Note: This file includes both exported and unexported types and fields.

/* eslint-disable */

"""
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

PLACEHOLDER_HEADING = "// Placeholders for undefined types"

UNEXPORTED_TYPE_NOTE = [
    "Note: This is an unexported type. In Go code, it's defined with a lowercase identifier.",
    "It cannot be accessed directly from outside the package.",
]
UNEXPORTED_FIELD_NOTE = [
    "Note: This is an unexported field. In Go code, it's defined with a lowercase identifier.",
    "It cannot be accessed directly from outside the package.",
]

BASIC_TYPES = frozenset({"string", "number", "boolean", "any"})
ARRAY_SUFFIX = "[]"

_NULLABLE_ELEMENT = re.compile(r"^\((.*?)(?: \| (?:null|undefined))+\)$")
_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


class EmitterError(Exception):
    """Error while writing generated TypeScript."""
    pass


def base_type_name(type_expression: str) -> str:
    """
    Strip array and nullable-element wrapping from a type expression.

    ``(User | null | undefined)[]`` and ``User[][]`` both yield ``User``.
    """
    previous = None
    while type_expression != previous:
        previous = type_expression
        if type_expression.endswith(ARRAY_SUFFIX):
            type_expression = type_expression[: -len(ARRAY_SUFFIX)]
            continue
        match = _NULLABLE_ELEMENT.match(type_expression)
        if match:
            type_expression = match.group(1)
    return type_expression


def is_basic_type(type_name: str) -> bool:
    """Check whether a (base) type needs no declaration."""
    return (
        type_name in BASIC_TYPES
        or type_name.startswith("Record<")
        or TIMESTAMP_TYPE in type_name
    )


def collect_placeholders(declarations: list[TypeDeclaration]) -> list[str]:
    """
    Find referenced type names that no declaration provides.

    Names referenced directly come first, then names only reached through
    array expressions; each name appears once, in first-encounter order.

    Args:
        declarations: Declarations in registry order.

    Returns:
        Names that need an ``any`` placeholder.
    """
    declared = {d.name for d in declarations}
    direct: list[str] = []
    from_arrays: list[str] = []

    for declaration in declarations:
        for field in declaration.fields:
            expression = field.type_expression
            base = base_type_name(expression)
            if is_basic_type(base) or base in declared:
                continue
            bucket = from_arrays if expression.endswith(ARRAY_SUFFIX) else direct
            if base not in bucket:
                bucket.append(base)

    placeholders = list(direct)
    placeholders.extend(name for name in from_arrays if name not in direct)
    return placeholders


def group_endpoints(endpoints: list[EndpointUsage]) -> list[tuple[str, list[UsageDirection]]]:
    """
    Group usages by "method path".

    Groups and the directions inside each group keep the order in which they
    first appear; repeated directions collapse.
    """
    groups: dict[str, list[UsageDirection]] = {}
    for usage in endpoints:
        directions = groups.setdefault(usage.key, [])
        if usage.direction not in directions:
            directions.append(usage.direction)
    return list(groups.items())


def _doc_lines(text: str) -> list[str]:
    return [line.strip() for line in text.strip().split("\n")]


def _property_name(name: str) -> str:
    if _IDENTIFIER.match(name):
        return name
    return json.dumps(name)


@register_formatter("typescript")
class TypeScriptFormatter(BaseFormatter):
    """
    Format a registry as TypeScript declarations.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        """
        Initialize the TypeScript formatter.

        Args:
            config: Generator configuration. Defaults are used if omitted.
            clock: Source of the generation timestamp (default: datetime.now).
        """
        self.config = config or Config()
        self.clock = clock or datetime.now

    def _renames(
        self,
        declarations: list[TypeDeclaration],
        placeholders: list[str],
    ) -> dict[str, str]:
        if not self.config.naming.pascal_case_unexported_types:
            return {}
        # A rename must not land on a declared name or a placeholder name
        taken = {d.name for d in declarations}
        taken.update(placeholders)
        renames: dict[str, str] = {}
        for declaration in declarations:
            if declaration.is_exported:
                continue
            new_name = to_pascal_case(declaration.name)
            if new_name != declaration.name and new_name not in taken:
                renames[declaration.name] = new_name
                taken.add(new_name)
        return renames

    def _rename_references(self, expression: str, renames: dict[str, str]) -> str:
        if not renames:
            return expression
        pattern = re.compile(
            r"(?<![\w$])(" + "|".join(re.escape(n) for n in renames) + r")(?![\w$])"
        )
        return pattern.sub(lambda m: renames[m.group(1)], expression)

    def _render_header(self) -> list[str]:
        timestamp = self.clock().strftime(TIMESTAMP_FORMAT)
        return HEADER_TEMPLATE.format(timestamp=timestamp).split("\n")[:-1]

    def _render_placeholders(self, names: list[str]) -> list[str]:
        if not names:
            return []
        lines = [PLACEHOLDER_HEADING]
        lines.extend(f"type {name} = any;" for name in names)
        lines.append("")
        return lines

    def _render_doc_block(self, declaration: TypeDeclaration) -> list[str]:
        lines = ["/**"]
        if declaration.doc_comment:
            lines.extend(f" * {line}".rstrip() for line in _doc_lines(declaration.doc_comment))

        if declaration.endpoints and self.config.output.include_endpoints:
            if declaration.doc_comment:
                lines.append(" *")
            lines.append(" * @api Used in the following endpoints:")
            for key, directions in group_endpoints(declaration.endpoints):
                usage = ", ".join(d.value for d in directions)
                lines.append(f" * - {key} ({usage})")

        lines.append(" */")

        if not declaration.is_exported and self.config.output.include_unexported_notes:
            lines.append("/**")
            lines.extend(f" * {line}" for line in UNEXPORTED_TYPE_NOTE)
            lines.append(" */")
        return lines

    def _render_field(self, field: FieldEntry, renames: dict[str, str]) -> list[str]:
        lines: list[str] = []

        comment: list[str] = []
        if field.doc_comment:
            comment.extend(_doc_lines(field.doc_comment))
        if field.validation_rules:
            if comment:
                comment.append("")
            comment.append("@validation")
            comment.extend(f"  - {rule}" for rule in field.validation_rules)
        if comment:
            lines.append("  /**")
            lines.extend(f"   * {line}".rstrip() for line in comment)
            lines.append("   */")

        if not field.is_exported and self.config.output.include_unexported_notes:
            lines.append("  /**")
            lines.extend(f"   * {line}" for line in UNEXPORTED_FIELD_NOTE)
            lines.append("   */")

        optional_mark = "?" if field.optional else ""
        type_text = self._rename_references(field.type_expression, renames)
        if field.nullable and self.config.output.null_union_for_pointers:
            type_text = f"{type_text} | null"
        lines.append(f"  {_property_name(field.name)}{optional_mark}: {type_text};")
        return lines

    def _render_declaration(
        self,
        declaration: TypeDeclaration,
        renames: dict[str, str],
    ) -> list[str]:
        lines = self._render_doc_block(declaration)
        name = renames.get(declaration.name, declaration.name)

        if declaration.is_record:
            lines.append(f"export interface {name} {{")
            for field in declaration.fields:
                lines.extend(self._render_field(field, renames))
            lines.append("}")
        elif declaration.underlying is not None:
            underlying = self._rename_references(declaration.underlying, renames)
            lines.append(f"export type {name} = {underlying};")

        lines.append("")
        return lines

    def format(self, registry: TypeRegistry) -> str:
        """Render the registry as TypeScript source text."""
        declarations = registry.get_all()
        placeholders = collect_placeholders(declarations)
        renames = self._renames(declarations, placeholders)

        lines = self._render_header()
        lines.extend(self._render_placeholders(placeholders))
        for declaration in declarations:
            lines.extend(self._render_declaration(declaration, renames))

        return "\n".join(lines) + "\n"

    def write(self, registry: TypeRegistry, target_file: Path) -> Path:
        """
        Render the registry and write it to a file.

        Args:
            registry: The registry to render.
            target_file: Destination of the generated TypeScript.

        Returns:
            The path written.

        Raises:
            EmitterError: If the file cannot be written.
        """
        content = self.format(registry)
        try:
            target_file.parent.mkdir(parents=True, exist_ok=True)
            target_file.write_text(content, encoding="utf-8")
        except OSError as e:
            raise EmitterError(f"Failed to write {target_file}: {e}") from e
        return target_file
