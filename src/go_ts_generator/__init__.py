"""
Go to TypeScript type generator

Reads the type declarations of one or more Go source trees and writes a
single TypeScript file of equivalent interfaces and aliases. Struct tags
decide field names and optionality, and swag route annotations are used
to document which endpoints consume or return each type.
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("go-ts-generator")
except PackageNotFoundError:
    __version__ = "0.9.2"

from go_ts_generator.generator import collect_types, generate_types  # noqa: E402

__all__ = [
    "__version__",
    "collect_types",
    "generate_types",
]
