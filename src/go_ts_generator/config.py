"""
Configuration loading and validation for go-ts-generator.

This module handles configuration file parsing, validation, and provides
sensible defaults for all configuration options.
"""

from enum import Enum
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field


class NullableToken(str, Enum):
    """Union members appended to nullable array and map elements."""

    NULL_OR_UNDEFINED = "null | undefined"
    NULL = "null"
    UNDEFINED = "undefined"


class ParserConfig(BaseModel):
    """Configuration for Go source discovery and classification."""

    exclude_patterns: list[str] = Field(
        default_factory=list,
        description="fnmatch patterns (relative to the source root) for files to skip.",
    )
    api_path_tokens: list[str] = Field(
        default=["controller", "handler", "api", "form"],
        description="File path fragments that mark the types in a file as API types.",
    )
    api_name_tokens: list[str] = Field(
        default=["Request", "Response", "Params", "Param", "Form"],
        description="Type name fragments that mark a type as an API type.",
    )


class NamingConfig(BaseModel):
    """Configuration for emitted identifiers."""

    camel_case_fields: bool = Field(
        default=True,
        description="camelCase exported field names of non-API types.",
    )
    pascal_case_unexported_types: bool = Field(
        default=False,
        description="PascalCase unexported type names and every reference to them.",
    )


class OutputConfig(BaseModel):
    """Configuration for the generated TypeScript."""

    nullable_element_token: NullableToken = Field(
        default=NullableToken.NULL_OR_UNDEFINED,
        description="Union used for pointer elements of slices and arrays.",
    )
    nullable_map_values: bool = Field(
        default=False,
        description="Append the nullable union to pointer map values.",
    )
    null_union_for_pointers: bool = Field(
        default=True,
        description="Render pointer-typed fields as 'T | null'.",
    )
    include_endpoints: bool = Field(
        default=True,
        description="List endpoint usages in declaration doc blocks.",
    )
    include_unexported_notes: bool = Field(
        default=True,
        description="Emit advisory notes for unexported types and fields.",
    )


class Config(BaseModel):
    """Root configuration model for go-ts-generator."""

    parser: ParserConfig = Field(default_factory=ParserConfig)
    naming: NamingConfig = Field(default_factory=NamingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    class Config:
        """Pydantic model configuration."""

        extra = "forbid"


def load_config(config_path: Optional[Path] = None) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to the configuration file. If None, returns defaults.

    Returns:
        Config object with loaded or default values.

    Raises:
        FileNotFoundError: If the specified config file doesn't exist.
        ValueError: If the config file is invalid.
    """
    if config_path is None:
        return Config()

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return Config(**data)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in configuration file: {e}") from e
    except Exception as e:
        raise ValueError(f"Failed to load configuration: {e}") from e


def find_config_file(start_path: Path) -> Optional[Path]:
    """
    Search for a configuration file starting from the given path.

    Searches for `.go-ts-generator.yaml` or `.go-ts-generator.yml`
    in the start path and parent directories.

    Args:
        start_path: Directory to start searching from.

    Returns:
        Path to the config file if found, None otherwise.
    """
    config_names = [".go-ts-generator.yaml", ".go-ts-generator.yml"]

    current = start_path.resolve()
    while current != current.parent:
        for name in config_names:
            config_path = current / name
            if config_path.exists():
                return config_path
        current = current.parent

    return None
