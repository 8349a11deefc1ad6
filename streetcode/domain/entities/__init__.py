"""Domain entities for Streetcode content.

Pure business logic entities with no framework dependencies.
"""

from streetcode.domain.entities.art import Art, StreetcodeArt
from streetcode.domain.entities.fact import Fact
from streetcode.domain.entities.image import Image

__all__ = [
    "Art",
    "Fact",
    "Image",
    "StreetcodeArt",
]
