"""
Output package for the Go to TypeScript generator.

This package contains the TypeScript emitter and the formatters used to
inspect collected declarations (text, JSON, YAML).
"""

from go_ts_generator.output.formatters import (
    BaseFormatter,
    get_formatter,
)
from go_ts_generator.output.json_output import JsonFormatter
from go_ts_generator.output.text_output import TextFormatter
from go_ts_generator.output.typescript_output import EmitterError, TypeScriptFormatter
from go_ts_generator.output.yaml_output import YamlFormatter

__all__ = [
    "BaseFormatter",
    "EmitterError",
    "JsonFormatter",
    "TextFormatter",
    "TypeScriptFormatter",
    "YamlFormatter",
    "get_formatter",
]
