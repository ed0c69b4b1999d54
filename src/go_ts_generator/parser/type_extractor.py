"""
Type declaration extraction from Go syntax trees.

This module walks the top-level type declarations of parsed Go files and
turns each of them into a TypeDeclaration: structs become records with
resolved fields, every other type becomes an alias.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from tree_sitter import Node, Tree

from go_ts_generator.classification import (
    is_api_type,
    is_exported_name,
    to_camel_case,
)
from go_ts_generator.config import Config
from go_ts_generator.models.declaration import (
    ALIAS_VALUE_FIELD,
    DeclarationKind,
    FieldEntry,
    TypeDeclaration,
)
from go_ts_generator.parser.go_parser import (
    GoParseError,
    GoParser,
    ParsedFile,
    collect_comment_groups,
    find_go_files,
    node_text,
)
from go_ts_generator.parser.tag_resolver import resolve_tag, strip_tag_literal
from go_ts_generator.parser.type_mapper import TypeMapper, unwrap_parens

logger = logging.getLogger(__name__)

TYPE_SPEC_NODES = ("type_spec", "type_alias")


def _join_comments(*parts: str) -> str:
    return "\n".join(part for part in parts if part)


class TypeExtractor:
    """
    Extract type declarations from Go source files.

    Files that cannot be read or parsed are logged and skipped so that one
    broken file never aborts a whole run.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        parser: Optional[GoParser] = None,
    ) -> None:
        """
        Initialize the extractor.

        Args:
            config: Generator configuration. Defaults are used if omitted.
            parser: Go parser to use. A new one is created if omitted.
        """
        self.config = config or Config()
        self.parser = parser or GoParser()
        self.mapper = TypeMapper(
            nullable_token=self.config.output.nullable_element_token,
            nullable_map_values=self.config.output.nullable_map_values,
        )

    def extract_directory(self, root: Path) -> list[TypeDeclaration]:
        """
        Extract declarations from every Go file under a source root.

        Args:
            root: Source directory.

        Returns:
            Declarations in file order, then source order.

        Raises:
            SourceScanError: If the directory cannot be scanned.
        """
        declarations: list[TypeDeclaration] = []
        for path in find_go_files(root, self.config.parser.exclude_patterns):
            declarations.extend(self.extract_file(path, root))
        logger.debug("Extracted %d declarations from %s", len(declarations), root)
        return declarations

    def extract_file(
        self,
        path: Path,
        root: Optional[Path] = None,
    ) -> list[TypeDeclaration]:
        """
        Extract declarations from one Go file.

        Args:
            path: Path to the Go file.
            root: Source root the file belongs to.

        Returns:
            Declarations found, or an empty list if the file was skipped.
        """
        try:
            parsed = self.parser.parse_file(path, root)
        except GoParseError as e:
            logger.warning("Skipping %s: %s", path, e)
            return []
        return self.extract_parsed(parsed)

    def extract_source(
        self,
        source: Union[str, bytes],
        path: Path = Path("source.go"),
    ) -> list[TypeDeclaration]:
        """
        Extract declarations from Go source held in memory.

        The path, as given, is what API classification looks at.

        Raises:
            GoParseError: If the source contains syntax errors.
        """
        if isinstance(source, str):
            source = source.encode("utf-8")
        return self.extract_parsed(
            self.parser.parse_bytes(source, path, relative_path=path.as_posix())
        )

    def extract_tree(
        self,
        tree: Tree,
        source: bytes,
        relative_path: str,
        path: Optional[Path] = None,
    ) -> list[TypeDeclaration]:
        """
        Extract declarations from a tree parsed elsewhere.

        Args:
            tree: Syntax tree of the file.
            source: Source bytes the tree was parsed from.
            relative_path: Root-prefixed path used for API classification.
            path: Path recorded on the declarations (default: relative_path).

        Returns:
            Declarations in source order.
        """
        parsed = ParsedFile(
            path=path or Path(relative_path),
            relative_path=relative_path,
            source=source,
            tree=tree,
            comment_groups=collect_comment_groups(source, tree.root_node),
        )
        return self.extract_parsed(parsed)

    def extract_parsed(self, parsed: ParsedFile) -> list[TypeDeclaration]:
        """Extract declarations from an already parsed file."""
        declarations: list[TypeDeclaration] = []

        for node in parsed.root.named_children:
            if node.type != "type_declaration":
                continue

            group_doc = parsed.doc_comment_for(node)
            grouped = any(child.type == "(" for child in node.children)

            for spec in node.named_children:
                if spec.type not in TYPE_SPEC_NODES:
                    continue
                doc = group_doc
                if grouped:
                    doc = parsed.doc_comment_for(spec) or group_doc
                declaration = self._extract_spec(spec, doc, parsed)
                if declaration is not None:
                    declarations.append(declaration)

        return declarations

    def _extract_spec(
        self,
        spec: Node,
        doc: str,
        parsed: ParsedFile,
    ) -> Optional[TypeDeclaration]:
        name_node = spec.child_by_field_name("name")
        type_node = spec.child_by_field_name("type")
        if name_node is None or type_node is None:
            return None

        name = node_text(name_node)
        if spec.child_by_field_name("type_parameters") is not None:
            logger.debug("Skipping generic type %s in %s", name, parsed.path)
            return None

        is_api = is_api_type(
            name,
            parsed.relative_path,
            path_tokens=self.config.parser.api_path_tokens,
            name_tokens=self.config.parser.api_name_tokens,
        )
        type_node = unwrap_parens(type_node)

        if type_node.type == "struct_type":
            kind = DeclarationKind.RECORD
            fields = self._extract_fields(type_node, is_api, parsed)
        else:
            kind = DeclarationKind.ALIAS
            fields = [
                FieldEntry(
                    name=ALIAS_VALUE_FIELD,
                    source_name=ALIAS_VALUE_FIELD,
                    type_expression=self.mapper.map_type(type_node).text,
                )
            ]

        return TypeDeclaration(
            name=name,
            kind=kind,
            fields=fields,
            is_exported=is_exported_name(name),
            is_api_type=is_api,
            doc_comment=doc,
            file_path=parsed.path,
            line_number=name_node.start_point[0] + 1,
        )

    def _extract_fields(
        self,
        struct_node: Node,
        is_api: bool,
        parsed: ParsedFile,
    ) -> list[FieldEntry]:
        field_list = next(
            (c for c in struct_node.named_children if c.type == "field_declaration_list"),
            None,
        )
        if field_list is None:
            return []

        fields: list[FieldEntry] = []
        for declaration in field_list.named_children:
            if declaration.type != "field_declaration":
                continue

            name_nodes = declaration.children_by_field_name("name")
            type_node = declaration.child_by_field_name("type")
            if not name_nodes or type_node is None:
                # embedded field
                continue

            tag_node = declaration.child_by_field_name("tag")
            raw_tag = strip_tag_literal(node_text(tag_node)) if tag_node is not None else None

            mapped = self.mapper.map_type(type_node)
            nullable = unwrap_parens(type_node).type == "pointer_type"
            doc = _join_comments(
                parsed.doc_comment_for(declaration),
                parsed.line_comment_for(declaration),
            )

            for name_node in name_nodes:
                source_name = node_text(name_node)
                resolution = resolve_tag(raw_tag, source_name, mapped.is_pointer)
                exported = is_exported_name(source_name)

                name = resolution.name
                if self.config.naming.camel_case_fields and not is_api and exported:
                    name = to_camel_case(name)

                fields.append(
                    FieldEntry(
                        name=name,
                        source_name=source_name,
                        type_expression=mapped.text,
                        optional=resolution.optional,
                        nullable=nullable,
                        doc_comment=doc,
                        validation_rules=resolution.validation_rules,
                        is_exported=exported,
                    )
                )

        return fields
