"""
YAML output formatter.
"""

import yaml

from go_ts_generator.analyzer.type_registry import TypeRegistry
from go_ts_generator.output.formatters import (
    BaseFormatter,
    declaration_to_dict,
    register_formatter,
)


@register_formatter("yaml")
class YamlFormatter(BaseFormatter):
    """
    Format collected declarations as YAML.
    """

    def format(self, registry: TypeRegistry) -> str:
        """Format a registry as YAML."""
        data = {
            "total": len(registry),
            "declarations": [declaration_to_dict(d) for d in registry],
        }

        return yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
