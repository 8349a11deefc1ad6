"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (PostgreSQL/SQLite)
- Logging (console)
- Mapper (entity -> DTO)
- Fact locks (per-streetcode serialisation)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from streetcode.core.config import settings
from streetcode.core.locks import KeyedLock
from streetcode.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from streetcode.domain.protocols.logger_protocol import LoggerProtocol
    from streetcode.domain.protocols.mapper_protocol import MapperProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns Database instance with connection pool. Sessions are opened
    per request by the mediator.

    Returns:
        Database manager instance.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
        pool_size=settings.db_pool_size,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from streetcode.infrastructure.logging.console_adapter import ConsoleAdapter

    level = "DEBUG" if settings.debug else settings.log_level
    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=level,
        app_name=settings.app_name,
    )


@lru_cache()
def get_mapper() -> "MapperProtocol":
    """Get entity-to-DTO mapper singleton (app-scoped)."""
    from streetcode.infrastructure.mapping.dto_mapper import DtoMapper

    return DtoMapper()


@lru_cache()
def get_fact_locks() -> KeyedLock:
    """Get the per-streetcode lock registry shared by all fact writers."""
    return KeyedLock()
