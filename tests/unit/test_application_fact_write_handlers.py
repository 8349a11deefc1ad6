"""Unit tests for CreateFactHandler and DeleteFactHandler.

Both keep a streetcode's fact numbers contiguous (1..N).
"""

from unittest.mock import AsyncMock, Mock

import pytest

from streetcode.application.commands.fact_commands import CreateFact, DeleteFact
from streetcode.application.commands.handlers.create_fact_handler import (
    CreateFactError,
    CreateFactHandler,
)
from streetcode.application.commands.handlers.delete_fact_handler import (
    DeleteFactHandler,
)
from streetcode.application.dtos import FactDto
from streetcode.core.enums import ErrorCode
from streetcode.core.errors import NotFoundError, PersistenceError, ValidationError
from streetcode.core.locks import KeyedLock
from streetcode.core.result import Failure, Success
from streetcode.domain.entities import Fact


def create_repositories(fact_repo: Mock, saved_rows: int = 1) -> Mock:
    repositories = Mock()
    repositories.fact_repository = fact_repo
    repositories.save_changes = AsyncMock(return_value=saved_rows)
    repositories.discard_changes = Mock()
    return repositories


def create_test_facts(count: int, streetcode_id: int = 7) -> list[Fact]:
    return [
        Fact(
            id=100 + n,
            title=f"Fact {n}",
            fact_content=f"Content {n}",
            number=n,
            streetcode_id=streetcode_id,
        )
        for n in range(1, count + 1)
    ]


# =============================================================================
# CreateFact
# =============================================================================


@pytest.mark.asyncio
async def test_create_fact_appends_after_last_number(mock_mapper, mock_logger):
    """New fact gets max(number) + 1 within its streetcode."""
    # Arrange
    fact_repo = Mock()
    fact_repo.get_max_number = AsyncMock(return_value=3)
    fact_repo.create = Mock()
    repositories = create_repositories(fact_repo)
    handler = CreateFactHandler(
        repositories=repositories,
        mapper=mock_mapper,
        logger=mock_logger,
        fact_locks=KeyedLock(),
    )

    # Act
    result = await handler.handle(
        CreateFact(streetcode_id=7, title="  Bridge  ", fact_content="Built in 1901")
    )

    # Assert
    assert isinstance(result, Success)
    fact_repo.get_max_number.assert_awaited_once_with(streetcode_id=7)
    created = fact_repo.create.call_args.args[0]
    assert created.number == 4
    assert created.streetcode_id == 7
    assert created.title == "Bridge"
    repositories.save_changes.assert_awaited_once()
    mock_mapper.map.assert_called_once_with(created, FactDto)


@pytest.mark.asyncio
async def test_create_first_fact_gets_number_one(mock_mapper, mock_logger):
    """A streetcode without facts starts numbering at 1."""
    # Arrange
    fact_repo = Mock()
    fact_repo.get_max_number = AsyncMock(return_value=0)
    handler = CreateFactHandler(
        repositories=create_repositories(fact_repo),
        mapper=mock_mapper,
        logger=mock_logger,
        fact_locks=KeyedLock(),
    )

    # Act
    await handler.handle(CreateFact(streetcode_id=9, title="A", fact_content="B"))

    # Assert
    assert fact_repo.create.call_args.args[0].number == 1


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("title", "content", "field"),
    [
        ("", "content", "title"),
        ("   ", "content", "title"),
        ("x" * 69, "content", "title"),
        ("title", "", "fact_content"),
        ("title", " \n ", "fact_content"),
    ],
)
async def test_create_fact_invalid_fields(mock_mapper, mock_logger, title, content, field):
    """Blank or oversized fields fail before anything is staged."""
    # Arrange
    fact_repo = Mock()
    fact_repo.get_max_number = AsyncMock(return_value=0)
    repositories = create_repositories(fact_repo)
    handler = CreateFactHandler(
        repositories=repositories,
        mapper=mock_mapper,
        logger=mock_logger,
        fact_locks=KeyedLock(),
    )

    # Act
    result = await handler.handle(
        CreateFact(streetcode_id=7, title=title, fact_content=content)
    )

    # Assert
    assert isinstance(result, Failure)
    assert isinstance(result.error, ValidationError)
    assert result.error.field == field
    fact_repo.create.assert_not_called()
    repositories.save_changes.assert_not_awaited()
    mock_logger.error.assert_called_once()


@pytest.mark.asyncio
async def test_create_fact_nothing_saved(mock_mapper, mock_logger):
    """Save affecting no rows -> PersistenceError."""
    # Arrange
    fact_repo = Mock()
    fact_repo.get_max_number = AsyncMock(return_value=0)
    handler = CreateFactHandler(
        repositories=create_repositories(fact_repo, saved_rows=0),
        mapper=mock_mapper,
        logger=mock_logger,
        fact_locks=KeyedLock(),
    )

    # Act
    result = await handler.handle(CreateFact(streetcode_id=7, title="A", fact_content="B"))

    # Assert
    assert isinstance(result, Failure)
    assert isinstance(result.error, PersistenceError)
    assert result.error.code == ErrorCode.FACT_CREATE_NOT_SAVED
    assert result.error.message == CreateFactError.NOT_SAVED.format(streetcode_id=7)
    mock_mapper.map.assert_not_called()


# =============================================================================
# DeleteFact
# =============================================================================


def create_delete_handler(facts: list[Fact], logger: Mock, saved_rows: int = 1):
    fact_repo = Mock()
    fact_repo.get_first_or_default = AsyncMock(
        side_effect=lambda **criteria: next(
            (f for f in facts if f.id == criteria["id"]), None
        )
    )
    fact_repo.get_all = AsyncMock(return_value=facts)
    repositories = create_repositories(fact_repo, saved_rows=saved_rows)
    handler = DeleteFactHandler(
        repositories=repositories, logger=logger, fact_locks=KeyedLock()
    )
    return handler, repositories


@pytest.mark.asyncio
async def test_delete_fact_shifts_later_siblings(mock_logger):
    """Deleting number 2 of 4 moves 3->2 and 4->3."""
    # Arrange
    facts = create_test_facts(4)
    handler, repositories = create_delete_handler(facts, mock_logger)

    # Act
    result = await handler.handle(DeleteFact(fact_id=102))

    # Assert
    assert isinstance(result, Success)
    assert result.value == 102
    fact_repo = repositories.fact_repository
    assert fact_repo.delete.call_args.args[0].id == 102
    updated = {call.args[0].id: call.args[0].number for call in fact_repo.update.call_args_list}
    assert updated == {103: 2, 104: 3}
    repositories.save_changes.assert_awaited_once()


@pytest.mark.asyncio
async def test_delete_last_fact_updates_nothing(mock_logger):
    """Deleting the highest number stages no updates."""
    # Arrange
    facts = create_test_facts(3)
    handler, repositories = create_delete_handler(facts, mock_logger)

    # Act
    result = await handler.handle(DeleteFact(fact_id=103))

    # Assert
    assert isinstance(result, Success)
    repositories.fact_repository.update.assert_not_called()


@pytest.mark.asyncio
async def test_delete_missing_fact_fails(mock_logger):
    """Unknown id -> NotFoundError, nothing staged."""
    # Arrange
    handler, repositories = create_delete_handler(create_test_facts(2), mock_logger)

    # Act
    result = await handler.handle(DeleteFact(fact_id=555))

    # Assert
    assert isinstance(result, Failure)
    assert isinstance(result.error, NotFoundError)
    assert result.error.code == ErrorCode.FACT_NOT_FOUND
    assert "555" in result.error.message
    repositories.fact_repository.delete.assert_not_called()
    repositories.save_changes.assert_not_awaited()
    mock_logger.error.assert_called_once()


@pytest.mark.asyncio
async def test_delete_fact_save_exception(mock_logger):
    """Storage exception -> PersistenceError."""
    # Arrange
    handler, repositories = create_delete_handler(create_test_facts(2), mock_logger)
    repositories.save_changes = AsyncMock(side_effect=RuntimeError("boom"))

    # Act
    result = await handler.handle(DeleteFact(fact_id=101))

    # Assert
    assert isinstance(result, Failure)
    assert result.error.code == ErrorCode.FACT_DELETE_NOT_SAVED
    mock_logger.error.assert_called_once()
