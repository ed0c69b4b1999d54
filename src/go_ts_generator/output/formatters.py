"""
Base formatter and formatter registry.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from go_ts_generator.analyzer.type_registry import TypeRegistry
    from go_ts_generator.models.declaration import TypeDeclaration


class BaseFormatter(ABC):
    """
    Abstract base class for output formatters.

    Subclasses must implement format().
    """

    @abstractmethod
    def format(self, registry: "TypeRegistry") -> str:
        """
        Format the declarations of a registry.

        Args:
            registry: The registry to format.

        Returns:
            Formatted string representation.
        """
        pass


def declaration_to_dict(declaration: "TypeDeclaration") -> dict[str, Any]:
    """Convert a declaration to a plain dictionary for structured formats."""
    return {
        "name": declaration.name,
        "kind": declaration.kind.value,
        "exported": declaration.is_exported,
        "api_type": declaration.is_api_type,
        "file": str(declaration.file_path) if declaration.file_path else None,
        "line": declaration.line_number,
        "doc": declaration.doc_comment,
        "fields": [
            {
                "name": f.name,
                "source_name": f.source_name,
                "type": f.type_expression,
                "optional": f.optional,
                "nullable": f.nullable,
                "validation": list(f.validation_rules),
            }
            for f in declaration.fields
        ],
        "endpoints": [
            {
                "method": e.method,
                "path": e.path,
                "direction": e.direction.value,
            }
            for e in declaration.endpoints
        ],
    }


# Formatter registry
_FORMATTERS: dict[str, type[BaseFormatter]] = {}


def register_formatter(name: str) -> Callable[[type[BaseFormatter]], type[BaseFormatter]]:
    """
    Decorator to register a formatter.

    Args:
        name: The name to register the formatter under.

    Returns:
        Decorator function.
    """
    def decorator(cls: type[BaseFormatter]) -> type[BaseFormatter]:
        _FORMATTERS[name] = cls
        return cls
    return decorator


def get_formatter(name: str, **kwargs: Any) -> BaseFormatter:
    """
    Get a formatter instance by name.

    Args:
        name: The formatter name (e.g., "typescript", "json", "yaml").
        **kwargs: Passed to the formatter's constructor.

    Returns:
        An instance of the requested formatter.

    Raises:
        ValueError: If the formatter name is not recognized.
    """
    # Import formatters to ensure they're registered
    from go_ts_generator.output import (  # noqa: F401
        json_output,
        text_output,
        typescript_output,
        yaml_output,
    )

    if name not in _FORMATTERS:
        available = ", ".join(_FORMATTERS.keys())
        raise ValueError(f"Unknown formatter: {name}. Available: {available}")

    return _FORMATTERS[name](**kwargs)

