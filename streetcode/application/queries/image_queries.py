"""Image queries (CQRS read operations)."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetImageById:
    """Get image metadata by ID.

    Attributes:
        image_id: Image to retrieve.
    """

    image_id: int
