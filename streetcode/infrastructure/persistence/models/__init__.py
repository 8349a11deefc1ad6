"""Database models.

Importing this package registers every table on ``Base.metadata``.
"""

from streetcode.infrastructure.persistence.models.art import Art, StreetcodeArt
from streetcode.infrastructure.persistence.models.fact import Fact
from streetcode.infrastructure.persistence.models.image import Image
from streetcode.infrastructure.persistence.models.streetcode import StreetcodeContent

__all__ = [
    "Art",
    "Fact",
    "Image",
    "StreetcodeArt",
    "StreetcodeContent",
]
