"""StreetcodeArtRepository - join records between streetcodes and arts."""

from typing import Any

from sqlalchemy import ColumnElement

from streetcode.domain.entities.art import StreetcodeArt
from streetcode.infrastructure.persistence.models.art import (
    StreetcodeArt as StreetcodeArtModel,
)
from streetcode.infrastructure.persistence.repositories.base_repository import (
    SqlAlchemyRepository,
)


class StreetcodeArtRepository(SqlAlchemyRepository[StreetcodeArt, StreetcodeArtModel]):
    """SQLAlchemy implementation of Repository[StreetcodeArt].

    Identity is the (art_id, streetcode_id) pair; only ``index`` is mutable.
    """

    model = StreetcodeArtModel
    order_by = (StreetcodeArtModel.streetcode_id, StreetcodeArtModel.index)

    def _identity(self, entity: StreetcodeArt) -> list[ColumnElement[bool]]:
        return [
            StreetcodeArtModel.art_id == entity.art_id,
            StreetcodeArtModel.streetcode_id == entity.streetcode_id,
        ]

    def _after_create(self, entity: StreetcodeArt, model: StreetcodeArtModel) -> None:
        pass  # Key is supplied by the caller

    def _to_domain(self, model: StreetcodeArtModel) -> StreetcodeArt:
        return StreetcodeArt(
            index=model.index,
            art_id=model.art_id,
            streetcode_id=model.streetcode_id,
        )

    def _to_values(self, entity: StreetcodeArt) -> dict[str, Any]:
        return {
            "index": entity.index,
            "art_id": entity.art_id,
            "streetcode_id": entity.streetcode_id,
        }
