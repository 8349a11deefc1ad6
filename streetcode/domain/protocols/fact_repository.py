"""FactRepository protocol for fact persistence.

Port (interface) for hexagonal architecture.
"""

from typing import Protocol

from streetcode.domain.entities.fact import Fact
from streetcode.domain.protocols.repository import Repository


class FactRepository(Repository[Fact], Protocol):
    """Fact repository protocol (port).

    Adds ordinal helpers on top of the generic repository.
    """

    async def get_max_number(self, streetcode_id: int | None = None) -> int:
        """Highest fact number.

        Args:
            streetcode_id: Restrict to one streetcode. None means all facts.

        Returns:
            Highest number, or 0 when there are no facts.
        """
        ...
