"""ReorderFacts command handler.

Flow:
1. Reject a missing or empty id sequence
2. Reject repeated ids
3. Count the streetcode's facts (none -> not found)
4. Reject a sequence whose length differs from that count
5. For each position, load the fact scoped to the streetcode and stage
   ``number = position + 1`` (a foreign or unknown id discards everything)
6. Save the batch (nothing affected -> failure)
7. Return success

Steps 3-6 run under the streetcode's lock so concurrent reorders of the same
streetcode cannot interleave.

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- NO infrastructure imports (repositories are injected via protocols)
"""

from collections import Counter

from streetcode.application.commands.fact_commands import ReorderFacts
from streetcode.application.dtos import ReorderFactsResult
from streetcode.core.enums import ErrorCode
from streetcode.core.errors import (
    ConflictError,
    DomainError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from streetcode.core.locks import KeyedLock
from streetcode.core.result import Failure, Result, Success
from streetcode.domain.protocols import LoggerProtocol, RepositoryWrapper


class ReorderFactsError:
    """ReorderFacts-specific error messages."""

    FACT_IDS_EMPTY = "Incoming array of fact ids is null or empty"
    FACT_IDS_DUPLICATED = "Incoming array of fact ids contains repeated ids: {ids}"
    FACTS_NOT_FOUND = "Cannot find any fact by a streetcode id: {streetcode_id}"
    FACT_IDS_COUNT_MISMATCH = (
        "Incorrect number of ids in array: {ids_count} transferred, "
        "but streetcode with id {streetcode_id} has {facts_count} facts"
    )
    FACT_NOT_IN_STREETCODE = (
        "Incorrect fact id transferred in array: fact with id {fact_id} "
        "does not belong to streetcode with id {streetcode_id}"
    )
    NUMBER_NOT_UPDATED = "Cannot update number in fact"


class ReorderFactsHandler:
    """Handler for ReorderFacts command.

    Either every fact of the streetcode gets its new number or none does.
    """

    def __init__(
        self,
        repositories: RepositoryWrapper,
        logger: LoggerProtocol,
        fact_locks: KeyedLock,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            repositories: Unit of work holding the fact repository.
            logger: Logger for failures.
            fact_locks: Per-streetcode locks shared by fact writers.
        """
        self._repositories = repositories
        self._logger = logger
        self._fact_locks = fact_locks

    async def handle(self, cmd: ReorderFacts) -> Result[ReorderFactsResult, DomainError]:
        """Handle ReorderFacts command.

        Args:
            cmd: ReorderFacts command with streetcode id and ordered fact ids.

        Returns:
            Success(ReorderFactsResult) when every number was saved.
            Failure(ValidationError) for an empty or repeating sequence.
            Failure(NotFoundError) when the streetcode has no facts or an id
                does not belong to it.
            Failure(ConflictError) when the sequence length is wrong.
            Failure(PersistenceError) when the save affected nothing or failed.
        """
        ids = list(cmd.reordered_ids) if cmd.reordered_ids is not None else []

        if not ids:
            return self._fail(
                cmd,
                ValidationError(
                    code=ErrorCode.FACT_IDS_EMPTY,
                    message=ReorderFactsError.FACT_IDS_EMPTY,
                    field="reordered_ids",
                ),
            )

        repeated = sorted(fact_id for fact_id, seen in Counter(ids).items() if seen > 1)
        if repeated:
            return self._fail(
                cmd,
                ValidationError(
                    code=ErrorCode.FACT_IDS_DUPLICATED,
                    message=ReorderFactsError.FACT_IDS_DUPLICATED.format(
                        ids=", ".join(str(fact_id) for fact_id in repeated)
                    ),
                    field="reordered_ids",
                ),
            )

        async with self._fact_locks.hold(cmd.streetcode_id):
            return await self._reorder(cmd, ids)

    async def _reorder(
        self, cmd: ReorderFacts, ids: list[int]
    ) -> Result[ReorderFactsResult, DomainError]:
        facts = self._repositories.fact_repository

        facts_count = await facts.count(streetcode_id=cmd.streetcode_id)
        if facts_count == 0:
            return self._fail(
                cmd,
                NotFoundError(
                    code=ErrorCode.FACTS_NOT_FOUND,
                    message=ReorderFactsError.FACTS_NOT_FOUND.format(
                        streetcode_id=cmd.streetcode_id
                    ),
                    resource_type="Fact",
                    resource_id=str(cmd.streetcode_id),
                ),
            )

        if len(ids) != facts_count:
            return self._fail(
                cmd,
                ConflictError(
                    code=ErrorCode.FACT_IDS_COUNT_MISMATCH,
                    message=ReorderFactsError.FACT_IDS_COUNT_MISMATCH.format(
                        ids_count=len(ids),
                        facts_count=facts_count,
                        streetcode_id=cmd.streetcode_id,
                    ),
                    resource_type="Fact",
                    conflicting_field="reordered_ids",
                ),
            )

        for position, fact_id in enumerate(ids, start=1):
            fact = await facts.get_first_or_default(
                id=fact_id, streetcode_id=cmd.streetcode_id
            )
            if fact is None:
                self._repositories.discard_changes()
                return self._fail(
                    cmd,
                    NotFoundError(
                        code=ErrorCode.FACT_NOT_IN_STREETCODE,
                        message=ReorderFactsError.FACT_NOT_IN_STREETCODE.format(
                            fact_id=fact_id, streetcode_id=cmd.streetcode_id
                        ),
                        resource_type="Fact",
                        resource_id=str(fact_id),
                    ),
                )

            fact.move_to(position)
            facts.update(fact)

        try:
            affected = await self._repositories.save_changes()
        except Exception as e:
            return self._fail(
                cmd,
                PersistenceError(
                    code=ErrorCode.FACT_REORDER_NOT_SAVED,
                    message=ReorderFactsError.NUMBER_NOT_UPDATED,
                    resource_type="Fact",
                ),
                exc=e,
            )

        if affected <= 0:
            return self._fail(
                cmd,
                PersistenceError(
                    code=ErrorCode.FACT_REORDER_NOT_SAVED,
                    message=ReorderFactsError.NUMBER_NOT_UPDATED,
                    resource_type="Fact",
                    affected_rows=affected,
                ),
            )

        return Success(value=ReorderFactsResult(is_reordered=True))

    def _fail(
        self,
        cmd: ReorderFacts,
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
