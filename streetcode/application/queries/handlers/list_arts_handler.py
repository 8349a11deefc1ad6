"""ListArts and ListArtsByStreetcode query handlers.

ListArts treats an empty table as a failure; listing the arts of one
streetcode does not (a streetcode without a gallery is normal).
"""

from streetcode.application.dtos import ArtDto
from streetcode.application.queries.art_queries import ListArts, ListArtsByStreetcode
from streetcode.core.enums import ErrorCode
from streetcode.core.errors import DomainError, NotFoundError
from streetcode.core.result import Failure, Result, Success
from streetcode.domain.protocols import LoggerProtocol, MapperProtocol, RepositoryWrapper


class ListArtsError:
    """ListArts-specific error messages."""

    ARTS_NOT_FOUND = "Cannot find any arts"


class ListArtsHandler:
    """Handler for ListArts query."""

    def __init__(
        self,
        repositories: RepositoryWrapper,
        mapper: MapperProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._repositories = repositories
        self._mapper = mapper
        self._logger = logger

    async def handle(self, query: ListArts) -> Result[list[ArtDto], DomainError]:
        """Handle ListArts query.

        Returns:
            Success(list[ArtDto]): Every art, ordered by id.
            Failure(NotFoundError): There are no arts at all.
        """
        arts = await self._repositories.art_repository.get_all()

        if not arts:
            self._logger.error(ListArtsError.ARTS_NOT_FOUND, request=type(query).__name__)
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.ARTS_NOT_FOUND,
                    message=ListArtsError.ARTS_NOT_FOUND,
                    resource_type="Art",
                    resource_id="*",
                )
            )

        return Success(value=self._mapper.map_many(arts, ArtDto))


class ListArtsByStreetcodeHandler:
    """Handler for ListArtsByStreetcode query."""

    def __init__(
        self,
        repositories: RepositoryWrapper,
        mapper: MapperProtocol,
    ) -> None:
        self._repositories = repositories
        self._mapper = mapper

    async def handle(
        self, query: ListArtsByStreetcode
    ) -> Result[list[ArtDto], DomainError]:
        arts = await self._repositories.art_repository.get_all_by_streetcode(
            query.streetcode_id
        )
        return Success(value=self._mapper.map_many(arts, ArtDto))
