"""Generic repository protocol.

Filtered single/multi-record reads plus staged writes. Reads hit the
database immediately; ``create``/``update``/``delete`` only stage the change,
which is applied by ``RepositoryWrapper.save_changes()``.

Criteria are equality filters on entity attribute names:

    fact = await repo.get_first_or_default(id=10, streetcode_id=7)
    facts = await repo.get_all(streetcode_id=7)
"""

from typing import Any, Protocol, TypeVar

EntityT = TypeVar("EntityT")


class Repository(Protocol[EntityT]):
    """Repository over a single entity type."""

    async def get_first_or_default(self, **criteria: Any) -> EntityT | None:
        """Return the first entity matching all criteria, or None."""
        ...

    async def get_all(self, **criteria: Any) -> list[EntityT]:
        """Return every entity matching all criteria (empty list if none)."""
        ...

    async def count(self, **criteria: Any) -> int:
        """Return the number of entities matching all criteria."""
        ...

    def create(self, entity: EntityT) -> None:
        """Stage an insert. The generated id is set on save."""
        ...

    def update(self, entity: EntityT) -> None:
        """Stage an update of an existing entity."""
        ...

    def delete(self, entity: EntityT) -> None:
        """Stage a delete of an existing entity."""
        ...
