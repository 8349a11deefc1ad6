"""Unit tests for Database engine configuration."""

import pytest
from sqlalchemy.pool import StaticPool

from streetcode.infrastructure.persistence.database import Database, is_memory_database


@pytest.mark.parametrize(
    "database_url, expected",
    [
        ("sqlite+aiosqlite:///:memory:", True),
        ("sqlite+aiosqlite://", True),
        ("sqlite+aiosqlite:///./streetcode.db", False),
        ("sqlite+aiosqlite:////var/lib/streetcode.db", False),
        ("postgresql+asyncpg://user:pass@db/streetcode", False),
    ],
)
def test_is_memory_database(database_url, expected):
    assert is_memory_database(database_url) is expected


@pytest.mark.asyncio
async def test_memory_database_shares_one_connection():
    db = Database(database_url="sqlite+aiosqlite:///:memory:")

    try:
        assert isinstance(db.engine.sync_engine.pool, StaticPool)
    finally:
        await db.close()


@pytest.mark.asyncio
async def test_file_database_uses_connection_per_session(tmp_path):
    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'local.db'}")

    try:
        assert not isinstance(db.engine.sync_engine.pool, StaticPool)
    finally:
        await db.close()
