"""CreateFact command handler.

Flow:
1. Validate title and content
2. Under the streetcode's lock, number the fact after the current last one
3. Stage and save
4. Return the new fact as DTO
"""

from streetcode.application.commands.fact_commands import CreateFact
from streetcode.application.dtos import FactDto
from streetcode.core.enums import ErrorCode
from streetcode.core.errors import DomainError, PersistenceError, ValidationError
from streetcode.core.locks import KeyedLock
from streetcode.core.result import Failure, Result, Success
from streetcode.domain.entities import Fact
from streetcode.domain.protocols import LoggerProtocol, MapperProtocol, RepositoryWrapper

FACT_TITLE_MAX_LENGTH = 68


class CreateFactError:
    """CreateFact-specific error messages."""

    TITLE_REQUIRED = "Fact title is required"
    TITLE_TOO_LONG = "Fact title must not exceed {max_length} characters"
    CONTENT_REQUIRED = "Fact content is required"
    NOT_SAVED = "Cannot create fact for streetcode with id: {streetcode_id}"


class CreateFactHandler:
    """Handler for CreateFact command.

    New facts go to the end of the streetcode, keeping numbers contiguous.
    """

    def __init__(
        self,
        repositories: RepositoryWrapper,
        mapper: MapperProtocol,
        logger: LoggerProtocol,
        fact_locks: KeyedLock,
    ) -> None:
        self._repositories = repositories
        self._mapper = mapper
        self._logger = logger
        self._fact_locks = fact_locks

    async def handle(self, cmd: CreateFact) -> Result[FactDto, DomainError]:
        """Handle CreateFact command.

        Returns:
            Success(FactDto) with the assigned id and number.
            Failure(ValidationError) for blank or oversized fields.
            Failure(PersistenceError) when the fact could not be saved.
        """
        invalid = self._validate(cmd)
        if invalid is not None:
            return self._fail(cmd, invalid)

        async with self._fact_locks.hold(cmd.streetcode_id):
            facts = self._repositories.fact_repository
            last_number = await facts.get_max_number(streetcode_id=cmd.streetcode_id)

            fact = Fact(
                title=cmd.title.strip(),
                fact_content=cmd.fact_content.strip(),
                number=last_number + 1,
                streetcode_id=cmd.streetcode_id,
                image_id=cmd.image_id,
            )
            facts.create(fact)

            error = PersistenceError(
                code=ErrorCode.FACT_CREATE_NOT_SAVED,
                message=CreateFactError.NOT_SAVED.format(
                    streetcode_id=cmd.streetcode_id
                ),
                resource_type="Fact",
            )
            try:
                affected = await self._repositories.save_changes()
            except Exception as e:
                return self._fail(cmd, error, exc=e)

            if affected <= 0:
                return self._fail(cmd, error)

        return Success(value=self._mapper.map(fact, FactDto))

    def _validate(self, cmd: CreateFact) -> ValidationError | None:
        if not cmd.title or not cmd.title.strip():
            return ValidationError(
                code=ErrorCode.FACT_FIELD_REQUIRED,
                message=CreateFactError.TITLE_REQUIRED,
                field="title",
            )
        if len(cmd.title.strip()) > FACT_TITLE_MAX_LENGTH:
            return ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=CreateFactError.TITLE_TOO_LONG.format(
                    max_length=FACT_TITLE_MAX_LENGTH
                ),
                field="title",
            )
        if not cmd.fact_content or not cmd.fact_content.strip():
            return ValidationError(
                code=ErrorCode.FACT_FIELD_REQUIRED,
                message=CreateFactError.CONTENT_REQUIRED,
                field="fact_content",
            )
        return None

    def _fail(
        self,
        cmd: CreateFact,
        error: DomainError,
        *,
        exc: Exception | None = None,
    ) -> Failure[DomainError]:
        self._logger.error(
            error.message,
            error=exc,
            request=type(cmd).__name__,
            streetcode_id=cmd.streetcode_id,
            error_code=error.code.value,
        )
        return Failure(error=error)
