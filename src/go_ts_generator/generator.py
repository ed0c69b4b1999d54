"""
Library entry points.

`generate_types` runs the whole pipeline: collect declarations from every
source root, correlate endpoint annotations, and write a single TypeScript
file. `collect_types` stops after collection for callers that want to
inspect the registry.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

from go_ts_generator.analyzer.aggregator import TypeAggregator
from go_ts_generator.analyzer.type_registry import TypeRegistry
from go_ts_generator.config import Config
from go_ts_generator.output.typescript_output import TypeScriptFormatter

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def parse_source_dirs(value: str) -> list[Path]:
    """
    Split a comma-separated list of source directories.

    Surrounding whitespace is trimmed and empty entries are dropped.

    Args:
        value: e.g. "./models, ./handlers".

    Returns:
        The directories, in the given order.
    """
    return [Path(part.strip()) for part in value.split(",") if part.strip()]


def _as_paths(source_dirs: Union[str, Sequence[PathLike]]) -> list[Path]:
    if isinstance(source_dirs, str):
        return parse_source_dirs(source_dirs)
    return [Path(d) for d in source_dirs]


def collect_types(
    source_dirs: Union[str, Sequence[PathLike]],
    config: Optional[Config] = None,
) -> TypeRegistry:
    """
    Collect declarations and endpoint usages from Go source roots.

    Args:
        source_dirs: Source roots in priority order, or a comma-separated string.
        config: Generator configuration. Defaults are used if omitted.

    Returns:
        The populated registry.

    Raises:
        SourceScanError: If a source root is missing or cannot be scanned.
    """
    return TypeAggregator(_as_paths(source_dirs), config).collect()


def generate_types(
    source_dirs: Union[str, Sequence[PathLike]],
    target_file: PathLike,
    config: Optional[Config] = None,
    now: Optional[Callable[[], datetime]] = None,
) -> Path:
    """
    Generate a TypeScript definitions file from Go source roots.

    Args:
        source_dirs: Source roots in priority order, or a comma-separated string.
        target_file: Where to write the TypeScript output.
        config: Generator configuration. Defaults are used if omitted.
        now: Clock used for the header timestamp (default: datetime.now).

    Returns:
        Path of the written file.

    Raises:
        SourceScanError: If a source root is missing or cannot be scanned.
        EmitterError: If the target file cannot be written.
    """
    config = config or Config()
    registry = collect_types(source_dirs, config)

    formatter = TypeScriptFormatter(config=config, clock=now)
    written = formatter.write(registry, Path(target_file))
    logger.info("Wrote %d declarations to %s", len(registry), written)
    return written
