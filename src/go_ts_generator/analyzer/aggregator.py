"""
Multi-root aggregation of type declarations.

Declarations from every source root are merged into one TypeRegistry.
Extraction over all roots finishes before correlation starts, so a
handler in one root can reference a type declared in another.
"""

from pathlib import Path
from typing import Optional

from go_ts_generator.analyzer.endpoint_correlator import EndpointCorrelator
from go_ts_generator.analyzer.type_registry import TypeRegistry
from go_ts_generator.config import Config
from go_ts_generator.logging_config import get_logger
from go_ts_generator.parser.go_parser import GoParser
from go_ts_generator.parser.type_extractor import TypeExtractor

logger = get_logger(__name__)


class TypeAggregator:
    """
    Collect declarations and endpoint usages across source roots.

    When two roots declare the same name, the root listed first wins.
    """

    def __init__(
        self,
        source_dirs: list[Path],
        config: Optional[Config] = None,
    ) -> None:
        """
        Initialize the aggregator.

        Args:
            source_dirs: Source roots, in priority order.
            config: Generator configuration. Defaults are used if omitted.
        """
        self.source_dirs = list(source_dirs)
        self.config = config or Config()
        self.parser = GoParser()

    def collect(self) -> TypeRegistry:
        """
        Build the registry for all source roots.

        Returns:
            The populated registry.

        Raises:
            SourceScanError: If any source root cannot be scanned.
        """
        registry = TypeRegistry()
        extractor = TypeExtractor(config=self.config, parser=self.parser)

        for root in self.source_dirs:
            declarations = extractor.extract_directory(root)
            added = registry.register_many(declarations)
            logger.debug(
                "root.extracted",
                source_dir=str(root),
                declarations=len(declarations),
                registered=added,
            )

        correlator = EndpointCorrelator(
            registry,
            parser=self.parser,
            exclude_patterns=self.config.parser.exclude_patterns,
        )
        for root in self.source_dirs:
            attached = correlator.correlate_root(root)
            logger.debug("root.correlated", source_dir=str(root), usages=attached)

        logger.debug("collect.complete", declarations=len(registry), roots=len(self.source_dirs))
        return registry
