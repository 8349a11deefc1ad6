"""Pytest configuration for async testing.

This configuration ensures:
1. Settings resolve to the testing environment with in-memory SQLite
2. Async tests are marked automatically
3. Each integration test gets a fresh database
"""

import inspect
import os

# Must run before anything imports streetcode.core.config
os.environ.setdefault("STREETCODE_ENVIRONMENT", "testing")
os.environ.setdefault("STREETCODE_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

# Configure pytest-asyncio
pytest_plugins = ("pytest_asyncio",)


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )
    config.addinivalue_line("markers", "asyncio: Async test that requires event loop")


# Test execution configuration
def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)


@pytest_asyncio.fixture
async def test_database():
    """Provide a fresh in-memory database with all tables created.

    Each test gets its own Database (and so its own SQLite memory store),
    so no data leaks between tests.

    Usage:
        async def test_something(test_database):
            async with test_database.get_session() as session:
                ...
    """
    from streetcode.infrastructure.persistence.database import Database

    db = Database(database_url="sqlite+aiosqlite:///:memory:")
    await db.create_all()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def test_session(test_database):
    """Provide one session on the fresh test database."""
    async with test_database.get_session() as session:
        yield session


# =============================================================================
# Reusable Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_logger():
    """Provide a mock logger for testing.

    Usage:
        def test_something(mock_logger):
            handler = MyHandler(logger=mock_logger)
            ...
            mock_logger.error.assert_called_once()
    """
    from unittest.mock import Mock

    logger = Mock()
    logger.info = Mock()
    logger.debug = Mock()
    logger.error = Mock()
    logger.warning = Mock()
    return logger


@pytest.fixture
def mock_mapper():
    """Provide a mock mapper that echoes a sentinel DTO per call."""
    from unittest.mock import Mock

    mapper = Mock()
    mapper.map = Mock(side_effect=lambda source, target: ("dto", target, source))
    mapper.map_many = Mock(
        side_effect=lambda sources, target: [("dto", target, s) for s in sources]
    )
    return mapper


@pytest.fixture
def fact_locks():
    """Provide a fresh per-streetcode lock registry."""
    from streetcode.core.locks import KeyedLock

    return KeyedLock()
