"""Unit tests for handler auto-wiring and the mediator."""

from unittest.mock import AsyncMock, Mock

import pytest

from streetcode.application.queries.art_queries import GetArtById
from streetcode.application.queries.handlers.get_art_by_id_handler import (
    GetArtByIdHandler,
)
from streetcode.application.commands.handlers.reorder_facts_handler import (
    ReorderFactsHandler,
)
from streetcode.core.container import Mediator, create_handler, get_fact_locks
from streetcode.core.container.handler_factory import get_type_name
from streetcode.core.locks import KeyedLock
from streetcode.infrastructure.mapping import DtoMapper
from streetcode.infrastructure.persistence.repositories import RepositoryWrapper


@pytest.mark.asyncio
async def test_create_handler_wires_session_and_singletons(mock_logger):
    # Arrange
    session = Mock()

    # Act
    handler = await create_handler(GetArtByIdHandler, session, logger=mock_logger)

    # Assert
    assert isinstance(handler._repositories, RepositoryWrapper)
    assert handler._repositories.session is session
    assert isinstance(handler._mapper, DtoMapper)
    assert handler._logger is mock_logger


@pytest.mark.asyncio
async def test_create_handler_shares_fact_locks(mock_logger):
    first = await create_handler(ReorderFactsHandler, Mock(), logger=mock_logger)
    second = await create_handler(ReorderFactsHandler, Mock(), logger=mock_logger)

    assert isinstance(first._fact_locks, KeyedLock)
    assert first._fact_locks is second._fact_locks is get_fact_locks()
    assert first._repositories is not second._repositories


@pytest.mark.asyncio
async def test_create_handler_unknown_dependency_raises():
    class NeedsClock:
        def __init__(self, clock: "Mock") -> None:
            self.clock = clock

    with pytest.raises(ValueError, match="Cannot resolve dependency 'clock'"):
        await create_handler(NeedsClock, Mock())


@pytest.mark.asyncio
async def test_create_handler_optional_dependency_defaults_to_none():
    class OptionalClock:
        def __init__(self, clock: Mock | None = None) -> None:
            self.clock = clock

    handler = await create_handler(OptionalClock, Mock())

    assert handler.clock is None


def test_get_type_name_handles_optional_and_strings():
    assert get_type_name(KeyedLock) == "KeyedLock"
    assert get_type_name(KeyedLock | None) == "KeyedLock"
    assert get_type_name("streetcode.domain.protocols.LoggerProtocol") == "LoggerProtocol"


# =============================================================================
# Mediator
# =============================================================================


def create_database_mock(session: Mock) -> Mock:
    context = Mock()
    context.__aenter__ = AsyncMock(return_value=session)
    context.__aexit__ = AsyncMock(return_value=None)
    database = Mock()
    database.get_session = Mock(return_value=context)
    return database


@pytest.mark.asyncio
async def test_mediator_unknown_request_raises():
    mediator = Mediator(database=create_database_mock(Mock()))

    with pytest.raises(ValueError, match="No handler registered for str"):
        await mediator.send("not a request")


@pytest.mark.asyncio
async def test_mediator_dispatches_with_overrides(mock_logger):
    # Arrange
    repositories = Mock()
    repositories.art_repository.get_first_or_default = AsyncMock(return_value=None)
    database = create_database_mock(Mock())
    mediator = Mediator(database=database, repositories=repositories, logger=mock_logger)

    # Act
    result = await mediator.send(GetArtById(art_id=3))

    # Assert
    assert result.error.resource_id == "3"
    database.get_session.assert_called_once()
    mock_logger.error.assert_called_once()
