"""Data Transfer Objects (DTOs) for application layer.

DTOs are response/result dataclasses returned by command and query handlers.

Usage:
    from streetcode.application.dtos import ArtDto, FactDto
"""

from streetcode.application.dtos.fact_dtos import FactDto, ReorderFactsResult
from streetcode.application.dtos.media_dtos import ArtDto, ImageDto, StreetcodeArtDto

__all__ = [
    # Media DTOs
    "ArtDto",
    "ImageDto",
    "StreetcodeArtDto",
    # Fact DTOs
    "FactDto",
    "ReorderFactsResult",
]
