"""DeleteFact command handler.

Flow:
1. Find the fact (missing -> not found)
2. Under its streetcode's lock, reload the siblings
3. Stage the delete and move every later sibling up by one
4. Save and return the deleted fact's id
"""

from streetcode.application.commands.fact_commands import DeleteFact
from streetcode.core.enums import ErrorCode
from streetcode.core.errors import DomainError, NotFoundError, PersistenceError
from streetcode.core.locks import KeyedLock
from streetcode.core.result import Failure, Result, Success
from streetcode.domain.protocols import LoggerProtocol, RepositoryWrapper


class DeleteFactError:
    """DeleteFact-specific error messages."""

    FACT_NOT_FOUND = "Cannot find a fact with corresponding id: {fact_id}"
    NOT_DELETED = "Cannot delete fact with id: {fact_id}"


class DeleteFactHandler:
    """Handler for DeleteFact command."""

    def __init__(
        self,
        repositories: RepositoryWrapper,
        logger: LoggerProtocol,
        fact_locks: KeyedLock,
    ) -> None:
        self._repositories = repositories
        self._logger = logger
        self._fact_locks = fact_locks

    async def handle(self, cmd: DeleteFact) -> Result[int, DomainError]:
        """Handle DeleteFact command.

        Returns:
            Success(fact_id) once the fact is gone and numbers are closed up.
            Failure(NotFoundError) if the fact does not exist.
            Failure(PersistenceError) when the delete could not be saved.
        """
        facts = self._repositories.fact_repository

        fact = await facts.get_first_or_default(id=cmd.fact_id)
        if fact is None:
            return self._not_found(cmd)

        async with self._fact_locks.hold(fact.streetcode_id):
            siblings = await facts.get_all(streetcode_id=fact.streetcode_id)
            target = next((f for f in siblings if f.id == cmd.fact_id), None)
            if target is None:
                # Deleted while waiting for the lock
                return self._not_found(cmd)

            facts.delete(target)
            for sibling in siblings:
                if sibling.number > target.number:
                    sibling.move_to(sibling.number - 1)
                    facts.update(sibling)

            error = PersistenceError(
                code=ErrorCode.FACT_DELETE_NOT_SAVED,
                message=DeleteFactError.NOT_DELETED.format(fact_id=cmd.fact_id),
                resource_type="Fact",
            )
            try:
                affected = await self._repositories.save_changes()
            except Exception as e:
                return self._fail(cmd, error, exc=e)

            if affected <= 0:
                return self._fail(cmd, error)

        return Success(value=cmd.fact_id)

    def _not_found(self, cmd: DeleteFact) -> Failure[DomainError]:
        return self._fail(
            cmd,
            NotFoundError(
                code=ErrorCode.FACT_NOT_FOUND,
                message=DeleteFactError.FACT_NOT_FOUND.format(fact_id=cmd.fact_id),
                resource_type="Fact",
                resource_id=str(cmd.fact_id),
            ),
        )

    def _fail(
        self,
        cmd: DeleteFact,
        error: DomainError,
        *,
        exc: Exception | None = None,
    ) -> Failure[DomainError]:
        self._logger.error(
            error.message,
            error=exc,
            request=type(cmd).__name__,
            fact_id=cmd.fact_id,
            error_code=error.code.value,
        )
        return Failure(error=error)
