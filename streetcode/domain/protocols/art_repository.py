"""ArtRepository protocol for art persistence.

Arts are always returned with their image and streetcode join records loaded.
"""

from typing import Protocol

from streetcode.domain.entities.art import Art
from streetcode.domain.protocols.repository import Repository


class ArtRepository(Repository[Art], Protocol):
    """Art repository protocol (port)."""

    async def get_all_by_streetcode(self, streetcode_id: int) -> list[Art]:
        """Arts attached to a streetcode, ordered by gallery index.

        Args:
            streetcode_id: Streetcode identifier.

        Returns:
            List of arts (empty if none).
        """
        ...
