"""Repository implementations (adapters for hexagonal architecture)."""

from streetcode.infrastructure.persistence.repositories.art_repository import (
    ArtRepository,
)
from streetcode.infrastructure.persistence.repositories.base_repository import (
    ChangeSet,
    SqlAlchemyRepository,
)
from streetcode.infrastructure.persistence.repositories.fact_repository import (
    FactRepository,
)
from streetcode.infrastructure.persistence.repositories.image_repository import (
    ImageRepository,
)
from streetcode.infrastructure.persistence.repositories.repository_wrapper import (
    RepositoryWrapper,
)
from streetcode.infrastructure.persistence.repositories.streetcode_art_repository import (
    StreetcodeArtRepository,
)

__all__ = [
    "ArtRepository",
    "ChangeSet",
    "FactRepository",
    "ImageRepository",
    "RepositoryWrapper",
    "SqlAlchemyRepository",
    "StreetcodeArtRepository",
]
