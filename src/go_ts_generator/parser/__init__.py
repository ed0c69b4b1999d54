"""
Parser package for the Go to TypeScript generator.

This package contains modules for:
- Parsing Go sources with tree-sitter
- Resolving struct tags
- Mapping Go type expressions to TypeScript
- Extracting type declarations
"""

from go_ts_generator.parser.go_parser import GoParseError, GoParser, SourceScanError
from go_ts_generator.parser.tag_resolver import resolve_tag
from go_ts_generator.parser.type_extractor import TypeExtractor
from go_ts_generator.parser.type_mapper import TypeMapper

__all__ = [
    "GoParseError",
    "GoParser",
    "SourceScanError",
    "TypeExtractor",
    "TypeMapper",
    "resolve_tag",
]
