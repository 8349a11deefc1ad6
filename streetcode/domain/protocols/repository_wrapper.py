"""RepositoryWrapper protocol (unit of work).

Groups the request's repositories around one database session and owns the
batch commit. Handlers receive a single wrapper instead of each repository.

Example:
    >>> fact = await repositories.fact_repository.get_first_or_default(id=10)
    >>> fact.move_to(1)
    >>> repositories.fact_repository.update(fact)
    >>> affected = await repositories.save_changes()
"""

from typing import Protocol

from streetcode.domain.entities.art import StreetcodeArt
from streetcode.domain.entities.image import Image
from streetcode.domain.protocols.art_repository import ArtRepository
from streetcode.domain.protocols.fact_repository import FactRepository
from streetcode.domain.protocols.repository import Repository


class RepositoryWrapper(Protocol):
    """Unit of work exposing the content repositories."""

    @property
    def fact_repository(self) -> FactRepository: ...

    @property
    def art_repository(self) -> ArtRepository: ...

    @property
    def image_repository(self) -> Repository[Image]: ...

    @property
    def streetcode_art_repository(self) -> Repository[StreetcodeArt]: ...

    async def save_changes(self) -> int:
        """Apply every staged change in one transaction.

        Returns:
            Number of rows affected.

        Raises:
            Exception: Storage failures propagate after the transaction
                is rolled back and the staged changes are dropped.
        """
        ...

    def discard_changes(self) -> None:
        """Drop staged changes without touching the database."""
        ...
