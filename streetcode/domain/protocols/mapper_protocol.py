"""MapperProtocol - translate domain entities to transfer objects.

Handlers never build DTOs field by field; they ask the mapper, which keeps
one converter per (source type, target type) pair.
"""

from collections.abc import Iterable
from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class MapperProtocol(Protocol):
    """Object-to-object mapper port."""

    def map(self, source: Any, target: type[T]) -> T:
        """Translate a single object into ``target``.

        Args:
            source: Domain entity (or any registered source type).
            target: Class to produce.

        Returns:
            Instance of ``target``.
        """
        ...

    def map_many(self, sources: Iterable[Any], target: type[T]) -> list[T]:
        """Translate a collection, preserving order."""
        ...
