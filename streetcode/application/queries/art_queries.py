"""Art queries (CQRS read operations).

Queries are immutable dataclasses with question-like names. They NEVER
change state.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetArtById:
    """Get a single art by ID.

    Attributes:
        art_id: Art to retrieve.
    """

    art_id: int


@dataclass(frozen=True, kw_only=True)
class ListArts:
    """List every art."""


@dataclass(frozen=True, kw_only=True)
class ListArtsByStreetcode:
    """List the arts of one streetcode in gallery order.

    Attributes:
        streetcode_id: Streetcode whose arts to list.
    """

    streetcode_id: int
