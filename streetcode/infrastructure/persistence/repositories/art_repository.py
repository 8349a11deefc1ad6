"""ArtRepository - SQLAlchemy implementation of ArtRepository protocol.

Arts come back with their image and streetcode join records loaded
(``selectin`` relationships on the model).
"""

from typing import Any

from sqlalchemy import select

from streetcode.domain.entities.art import Art, StreetcodeArt
from streetcode.infrastructure.persistence.models.art import (
    Art as ArtModel,
    StreetcodeArt as StreetcodeArtModel,
)
from streetcode.infrastructure.persistence.repositories.base_repository import (
    SqlAlchemyRepository,
)
from streetcode.infrastructure.persistence.repositories.image_repository import (
    image_to_domain,
)


class ArtRepository(SqlAlchemyRepository[Art, ArtModel]):
    """SQLAlchemy implementation of ArtRepository protocol."""

    model = ArtModel
    order_by = (ArtModel.id,)

    async def get_all_by_streetcode(self, streetcode_id: int) -> list[Art]:
        """Arts attached to a streetcode, ordered by gallery index.

        Args:
            streetcode_id: Streetcode identifier.

        Returns:
            List of arts (empty if none).
        """
        stmt = (
            select(ArtModel)
            .join(StreetcodeArtModel, StreetcodeArtModel.art_id == ArtModel.id)
            .where(StreetcodeArtModel.streetcode_id == streetcode_id)
            .order_by(StreetcodeArtModel.index, ArtModel.id)
        )
        result = await self.session.execute(stmt)
        models = result.scalars().all()

        return [self._to_domain(model) for model in models]

    def _to_domain(self, model: ArtModel) -> Art:
        return Art(
            id=model.id,
            title=model.title,
            description=model.description,
            image_id=model.image_id,
            image=image_to_domain(model.image) if model.image is not None else None,
            streetcode_arts=[
                StreetcodeArt(
                    index=link.index,
                    art_id=link.art_id,
                    streetcode_id=link.streetcode_id,
                )
                for link in model.streetcode_arts
            ],
        )

    def _to_values(self, entity: Art) -> dict[str, Any]:
        return {
            "title": entity.title,
            "description": entity.description,
            "image_id": entity.image_id,
        }
