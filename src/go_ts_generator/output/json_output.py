"""
JSON output formatter.
"""

import json

from go_ts_generator.analyzer.type_registry import TypeRegistry
from go_ts_generator.output.formatters import (
    BaseFormatter,
    declaration_to_dict,
    register_formatter,
)


@register_formatter("json")
class JsonFormatter(BaseFormatter):
    """
    Format collected declarations as JSON.
    """

    def __init__(self, indent: int = 2) -> None:
        """
        Initialize the JSON formatter.

        Args:
            indent: JSON indentation level.
        """
        self.indent = indent

    def format(self, registry: TypeRegistry) -> str:
        """Format a registry as JSON."""
        data = {
            "total": len(registry),
            "declarations": [declaration_to_dict(d) for d in registry],
        }

        return json.dumps(data, indent=self.indent, default=str)
