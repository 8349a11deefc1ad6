"""ListFactsByStreetcode query handler."""

from streetcode.application.dtos import FactDto
from streetcode.application.queries.fact_queries import ListFactsByStreetcode
from streetcode.core.errors import DomainError
from streetcode.core.result import Result, Success
from streetcode.domain.protocols import MapperProtocol, RepositoryWrapper


class ListFactsByStreetcodeHandler:
    """Handler for ListFactsByStreetcode query.

    Returns the facts ordered by number; an empty list is a valid answer.
    """

    def __init__(
        self,
        repositories: RepositoryWrapper,
        mapper: MapperProtocol,
    ) -> None:
        self._repositories = repositories
        self._mapper = mapper

    async def handle(
        self, query: ListFactsByStreetcode
    ) -> Result[list[FactDto], DomainError]:
        facts = await self._repositories.fact_repository.get_all(
            streetcode_id=query.streetcode_id
        )
        ordered = sorted(facts, key=lambda fact: fact.number)
        return Success(value=self._mapper.map_many(ordered, FactDto))
