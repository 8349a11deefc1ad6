"""GetFactById query handler."""

from streetcode.application.dtos import FactDto
from streetcode.application.queries.fact_queries import GetFactById
from streetcode.core.enums import ErrorCode
from streetcode.core.errors import DomainError, NotFoundError
from streetcode.core.result import Failure, Result, Success
from streetcode.domain.protocols import LoggerProtocol, MapperProtocol, RepositoryWrapper


class GetFactByIdError:
    """GetFactById-specific error messages."""

    FACT_NOT_FOUND = "Cannot find a fact with corresponding id: {fact_id}"


class GetFactByIdHandler:
    """Handler for GetFactById query."""

    def __init__(
        self,
        repositories: RepositoryWrapper,
        mapper: MapperProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._repositories = repositories
        self._mapper = mapper
        self._logger = logger

    async def handle(self, query: GetFactById) -> Result[FactDto, DomainError]:
        """Handle GetFactById query.

        Returns:
            Success(FactDto): Fact found.
            Failure(NotFoundError): No fact with that id.
        """
        fact = await self._repositories.fact_repository.get_first_or_default(
            id=query.fact_id
        )

        if fact is None:
            message = GetFactByIdError.FACT_NOT_FOUND.format(fact_id=query.fact_id)
            self._logger.error(message, request=type(query).__name__, fact_id=query.fact_id)
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.FACT_NOT_FOUND,
                    message=message,
                    resource_type="Fact",
                    resource_id=str(query.fact_id),
                )
            )

        return Success(value=self._mapper.map(fact, FactDto))
