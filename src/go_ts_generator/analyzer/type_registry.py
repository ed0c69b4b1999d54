"""
Type registry for storing declarations in a deterministic order.
"""

import logging
from typing import Iterator, Optional

from go_ts_generator.models.declaration import TypeDeclaration
from go_ts_generator.models.endpoint import EndpointUsage

logger = logging.getLogger(__name__)


class TypeRegistry:
    """
    Name-keyed registry of type declarations.

    Iteration follows insertion order, which is what keeps generated output
    reproducible. The first declaration registered under a name wins; later
    ones are discarded, never merged.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._order: list[str] = []
        self._by_name: dict[str, TypeDeclaration] = {}

    def register(self, declaration: TypeDeclaration) -> bool:
        """
        Register a declaration unless its name is already taken.

        Args:
            declaration: The declaration to register.

        Returns:
            True if registered, False if an earlier declaration kept the name.
        """
        existing = self._by_name.get(declaration.name)
        if existing is not None:
            logger.info(
                "Discarding duplicate type %s from %s (first declared in %s)",
                declaration.name,
                declaration.file_path,
                existing.file_path,
            )
            return False

        self._order.append(declaration.name)
        self._by_name[declaration.name] = declaration
        return True

    def register_many(self, declarations: list[TypeDeclaration]) -> int:
        """
        Register multiple declarations.

        Returns:
            Number of declarations actually registered.
        """
        return sum(1 for d in declarations if self.register(d))

    def get(self, name: str) -> Optional[TypeDeclaration]:
        """Get a declaration by name."""
        return self._by_name.get(name)

    def get_all(self) -> list[TypeDeclaration]:
        """Get all declarations in insertion order."""
        return [self._by_name[name] for name in self._order]

    def add_endpoint(self, name: str, usage: EndpointUsage) -> bool:
        """
        Attach an endpoint usage to a registered declaration.

        Returns:
            False if no declaration has that name.
        """
        declaration = self._by_name.get(name)
        if declaration is None:
            return False
        declaration.add_endpoint(usage)
        return True

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[TypeDeclaration]:
        return iter(self.get_all())

    def __contains__(self, name: object) -> bool:
        return name in self._by_name
