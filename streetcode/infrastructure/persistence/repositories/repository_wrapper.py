"""RepositoryWrapper - unit of work over one AsyncSession.

All repositories share one ChangeSet. ``save_changes`` applies the staged
writes in staging order, commits once and reports the affected row count.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from streetcode.infrastructure.persistence.repositories.art_repository import (
    ArtRepository,
)
from streetcode.infrastructure.persistence.repositories.base_repository import (
    ChangeSet,
)
from streetcode.infrastructure.persistence.repositories.fact_repository import (
    FactRepository,
)
from streetcode.infrastructure.persistence.repositories.image_repository import (
    ImageRepository,
)
from streetcode.infrastructure.persistence.repositories.streetcode_art_repository import (
    StreetcodeArtRepository,
)


class RepositoryWrapper:
    """SQLAlchemy implementation of the RepositoryWrapper protocol.

    Example:
        >>> async with db.get_session() as session:
        ...     repositories = RepositoryWrapper(session)
        ...     fact = await repositories.fact_repository.get_first_or_default(id=10)
        ...     fact.move_to(2)
        ...     repositories.fact_repository.update(fact)
        ...     affected = await repositories.save_changes()
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize wrapper and its repositories on one session.

        Args:
            session: SQLAlchemy async session (request-scoped).
        """
        self.session = session
        self._changes = ChangeSet()
        self._fact_repository = FactRepository(session, self._changes)
        self._art_repository = ArtRepository(session, self._changes)
        self._image_repository = ImageRepository(session, self._changes)
        self._streetcode_art_repository = StreetcodeArtRepository(
            session, self._changes
        )

    @property
    def fact_repository(self) -> FactRepository:
        return self._fact_repository

    @property
    def art_repository(self) -> ArtRepository:
        return self._art_repository

    @property
    def image_repository(self) -> ImageRepository:
        return self._image_repository

    @property
    def streetcode_art_repository(self) -> StreetcodeArtRepository:
        return self._streetcode_art_repository

    @property
    def pending_changes(self) -> int:
        """Number of staged writes not yet saved."""
        return len(self._changes)

    async def save_changes(self) -> int:
        """Apply staged writes in one transaction.

        Returns:
            Total rows affected (0 when nothing was staged).

        Raises:
            Exception: Any storage error, after rolling back. Staged
                changes are dropped either way.
        """
        changes = self._changes.drain()
        if not changes:
            return 0

        affected = 0
        try:
            for change in changes:
                affected += await change.apply()
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        # Core UPDATE/DELETE bypass the identity map; reload on next access
        self.session.expire_all()
        return affected

    def discard_changes(self) -> None:
        """Drop staged writes without touching the database."""
        self._changes.clear()
