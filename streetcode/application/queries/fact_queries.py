"""Fact queries (CQRS read operations)."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetFactById:
    """Get a single fact by ID.

    Attributes:
        fact_id: Fact to retrieve.
    """

    fact_id: int


@dataclass(frozen=True, kw_only=True)
class ListFactsByStreetcode:
    """List the facts of one streetcode ordered by number.

    Attributes:
        streetcode_id: Streetcode whose facts to list.
    """

    streetcode_id: int
