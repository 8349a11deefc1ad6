"""FactRepository - SQLAlchemy implementation of FactRepository protocol.

Maps between domain Fact entities and the facts table.
"""

from typing import Any

from sqlalchemy import func, select

from streetcode.domain.entities.fact import Fact
from streetcode.infrastructure.persistence.models.fact import Fact as FactModel
from streetcode.infrastructure.persistence.repositories.base_repository import (
    SqlAlchemyRepository,
)


class FactRepository(SqlAlchemyRepository[Fact, FactModel]):
    """SQLAlchemy implementation of FactRepository protocol.

    ``get_all`` returns facts ordered by number, then id.

    Example:
        >>> async with db.get_session() as session:
        ...     repo = FactRepository(session)
        ...     facts = await repo.get_all(streetcode_id=7)
    """

    model = FactModel
    order_by = (FactModel.number, FactModel.id)

    async def get_max_number(self, streetcode_id: int | None = None) -> int:
        """Highest fact number, optionally within one streetcode.

        Args:
            streetcode_id: Streetcode to restrict to, or None for all facts.

        Returns:
            Highest number, 0 when no facts match.
        """
        stmt = select(func.max(FactModel.number))
        if streetcode_id is not None:
            stmt = stmt.where(FactModel.streetcode_id == streetcode_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() or 0

    def _to_domain(self, model: FactModel) -> Fact:
        return Fact(
            id=model.id,
            title=model.title,
            fact_content=model.fact_content,
            number=model.number,
            streetcode_id=model.streetcode_id,
            image_id=model.image_id,
        )

    def _to_values(self, entity: Fact) -> dict[str, Any]:
        return {
            "title": entity.title,
            "fact_content": entity.fact_content,
            "number": entity.number,
            "streetcode_id": entity.streetcode_id,
            "image_id": entity.image_id,
        }
