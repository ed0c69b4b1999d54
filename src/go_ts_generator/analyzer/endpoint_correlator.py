"""
Endpoint correlation from swag-style doc comment annotations.

Handlers documented with swag annotations, e.g.

    // @Param user body UserRequest true "User data"
    // @Success 201 {object} UserResponse
    // @Router /users [post]

tell us which declared types travel as request bodies and responses of
which routes. This module reads those annotations and attaches the
usages to the declarations in a TypeRegistry.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from go_ts_generator.analyzer.type_registry import TypeRegistry
from go_ts_generator.models.endpoint import EndpointUsage, UsageDirection
from go_ts_generator.parser.go_parser import GoParseError, GoParser, find_go_files

logger = logging.getLogger(__name__)

ROUTER_PATTERN = re.compile(r"@Router\s+([^\s]+)\s+\[([^\]]+)\]")
SUCCESS_PATTERN = re.compile(r"@Success\s+\d+\s+\{([^}]+)\}\s+(\S+)")
PARAM_BODY_PATTERN = re.compile(r"@Param\s+\S+\s+body\s+(\S+)")

ARRAY_MARKER = "[]"


@dataclass(frozen=True)
class EndpointFact:
    """A type name used by a route, as stated in one comment block."""

    type_name: str
    method: str
    path: str
    direction: UsageDirection


def _strip_array_marker(type_name: str) -> str:
    while type_name.startswith(ARRAY_MARKER):
        type_name = type_name[len(ARRAY_MARKER):]
    return type_name


def extract_endpoint_facts(comment: str) -> list[EndpointFact]:
    """
    Extract endpoint facts from one comment block.

    A block without a @Router annotation yields nothing. Otherwise every
    @Success annotation contributes a response type and every body
    @Param annotation a request type, all bound to the block's route.

    Args:
        comment: Text of a single comment group.

    Returns:
        Facts in annotation order: responses first, then requests.
    """
    router = ROUTER_PATTERN.search(comment)
    if router is None:
        return []
    path, method = router.group(1), router.group(2)

    facts: list[EndpointFact] = []
    for match in SUCCESS_PATTERN.finditer(comment):
        facts.append(
            EndpointFact(
                type_name=_strip_array_marker(match.group(2)),
                method=method,
                path=path,
                direction=UsageDirection.RESPONSE,
            )
        )
    for match in PARAM_BODY_PATTERN.finditer(comment):
        facts.append(
            EndpointFact(
                type_name=_strip_array_marker(match.group(1)),
                method=method,
                path=path,
                direction=UsageDirection.REQUEST,
            )
        )
    return facts


class EndpointCorrelator:
    """
    Attach endpoint usages to registered declarations.

    Type names that are not in the registry are ignored; placeholders for
    unknown types are the emitter's job.
    """

    def __init__(
        self,
        registry: TypeRegistry,
        parser: Optional[GoParser] = None,
        exclude_patterns: Optional[list[str]] = None,
    ) -> None:
        """
        Initialize the correlator.

        Args:
            registry: Registry whose declarations receive the usages.
            parser: Go parser to use. A new one is created if omitted.
            exclude_patterns: fnmatch patterns of files to skip.
        """
        self.registry = registry
        self.parser = parser or GoParser()
        self.exclude_patterns = exclude_patterns

    def _resolve_name(self, type_name: str) -> Optional[str]:
        """Find the registered name for an annotation type (model.User -> User)."""
        if type_name in self.registry:
            return type_name
        unqualified = type_name.rsplit(".", 1)[-1]
        if unqualified in self.registry:
            return unqualified
        return None

    def correlate_comment(self, comment: str) -> int:
        """
        Correlate a single comment block.

        Returns:
            Number of usages attached.
        """
        attached = 0
        for fact in extract_endpoint_facts(comment):
            name = self._resolve_name(fact.type_name)
            if name is None:
                continue
            usage = EndpointUsage(method=fact.method, path=fact.path, direction=fact.direction)
            if self.registry.add_endpoint(name, usage):
                attached += 1
        return attached

    def correlate_file(self, path: Path, root: Optional[Path] = None) -> int:
        """
        Correlate every comment group of one Go file.

        Unparseable files are logged and skipped.
        """
        try:
            parsed = self.parser.parse_file(path, root)
        except GoParseError as e:
            logger.warning("Skipping %s: %s", path, e)
            return 0
        return sum(self.correlate_comment(group.text) for group in parsed.comment_groups)

    def correlate_root(self, root: Path) -> int:
        """
        Correlate every Go file under a source root.

        Returns:
            Number of usages attached.

        Raises:
            SourceScanError: If the directory cannot be scanned.
        """
        attached = 0
        for path in find_go_files(root, self.exclude_patterns):
            attached += self.correlate_file(path, root)
        return attached
