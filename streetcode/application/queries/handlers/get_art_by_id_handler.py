"""GetArtById query handler.

Returns DTO (not domain entity) to prevent leaking domain to callers.

Architecture:
- Application layer handler (orchestrates data retrieval)
- Returns Result[ArtDto, DomainError]
- Side-effect free apart from logging the miss
"""

from streetcode.application.dtos import ArtDto
from streetcode.application.queries.art_queries import GetArtById
from streetcode.core.enums import ErrorCode
from streetcode.core.errors import DomainError, NotFoundError
from streetcode.core.result import Failure, Result, Success
from streetcode.domain.protocols import LoggerProtocol, MapperProtocol, RepositoryWrapper


class GetArtByIdError:
    """GetArtById-specific error messages."""

    ART_NOT_FOUND = "Cannot find an art with corresponding id: {art_id}"


class GetArtByIdHandler:
    """Handler for GetArtById query.

    Dependencies (injected via constructor):
        - RepositoryWrapper: Art lookup
        - MapperProtocol: Art -> ArtDto
        - LoggerProtocol: Logs the miss
    """

    def __init__(
        self,
        repositories: RepositoryWrapper,
        mapper: MapperProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._repositories = repositories
        self._mapper = mapper
        self._logger = logger

    async def handle(self, query: GetArtById) -> Result[ArtDto, DomainError]:
        """Handle GetArtById query.

        Args:
            query: GetArtById query with art ID.

        Returns:
            Success(ArtDto): Art found.
            Failure(NotFoundError): No art with that id.
        """
        art = await self._repositories.art_repository.get_first_or_default(
            id=query.art_id
        )

        if art is None:
            message = GetArtByIdError.ART_NOT_FOUND.format(art_id=query.art_id)
            self._logger.error(message, request=type(query).__name__, art_id=query.art_id)
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.ART_NOT_FOUND,
                    message=message,
                    resource_type="Art",
                    resource_id=str(query.art_id),
                )
            )

        return Success(value=self._mapper.map(art, ArtDto))
