"""ImageRepository - SQLAlchemy implementation for Image metadata."""

from typing import Any

from streetcode.domain.entities.image import Image
from streetcode.infrastructure.persistence.models.image import Image as ImageModel
from streetcode.infrastructure.persistence.repositories.base_repository import (
    SqlAlchemyRepository,
)


def image_to_domain(model: ImageModel) -> Image:
    """Convert an image row to the domain entity (shared with ArtRepository)."""
    return Image(
        id=model.id,
        blob_name=model.blob_name,
        mime_type=model.mime_type,
        title=model.title,
        alt=model.alt,
    )


class ImageRepository(SqlAlchemyRepository[Image, ImageModel]):
    """SQLAlchemy implementation of Repository[Image]."""

    model = ImageModel
    order_by = (ImageModel.id,)

    def _to_domain(self, model: ImageModel) -> Image:
        return image_to_domain(model)

    def _to_values(self, entity: Image) -> dict[str, Any]:
        return {
            "blob_name": entity.blob_name,
            "mime_type": entity.mime_type,
            "title": entity.title,
            "alt": entity.alt,
        }
