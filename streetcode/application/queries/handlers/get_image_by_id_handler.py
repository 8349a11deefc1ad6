"""GetImageById query handler."""

from streetcode.application.dtos import ImageDto
from streetcode.application.queries.image_queries import GetImageById
from streetcode.core.enums import ErrorCode
from streetcode.core.errors import DomainError, NotFoundError
from streetcode.core.result import Failure, Result, Success
from streetcode.domain.protocols import LoggerProtocol, MapperProtocol, RepositoryWrapper


class GetImageByIdError:
    """GetImageById-specific error messages."""

    IMAGE_NOT_FOUND = "Cannot find an image with corresponding id: {image_id}"


class GetImageByIdHandler:
    """Handler for GetImageById query."""

    def __init__(
        self,
        repositories: RepositoryWrapper,
        mapper: MapperProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._repositories = repositories
        self._mapper = mapper
        self._logger = logger

    async def handle(self, query: GetImageById) -> Result[ImageDto, DomainError]:
        image = await self._repositories.image_repository.get_first_or_default(
            id=query.image_id
        )

        if image is None:
            message = GetImageByIdError.IMAGE_NOT_FOUND.format(image_id=query.image_id)
            self._logger.error(
                message, request=type(query).__name__, image_id=query.image_id
            )
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.IMAGE_NOT_FOUND,
                    message=message,
                    resource_type="Image",
                    resource_id=str(query.image_id),
                )
            )

        return Success(value=self._mapper.map(image, ImageDto))
