"""Mediator - dispatch commands and queries to their handlers.

Each ``send`` opens its own database session, builds the registered handler
with ``create_handler`` and awaits ``handle``. Handlers report expected
failures as ``Failure``; the mediator passes the Result through untouched.

Usage:
    mediator = get_mediator()
    result = await mediator.send(ReorderFacts(streetcode_id=7, reordered_ids=[12, 10, 11]))
"""

from functools import lru_cache
from typing import Any

from streetcode.application.cqrs import get_handler_class
from streetcode.core.container.handler_factory import create_handler
from streetcode.core.container.infrastructure import get_database
from streetcode.infrastructure.persistence.database import Database


class Mediator:
    """Request dispatcher backed by the CQRS registry.

    Args:
        database: Database providing sessions. Defaults to the container's.
        **overrides: Dependency overrides forwarded to every handler
            (by constructor parameter name).
    """

    def __init__(self, database: Database | None = None, **overrides: Any) -> None:
        self._database = database if database is not None else get_database()
        self._overrides = overrides

    async def send(self, request: Any) -> Any:
        """Dispatch ``request`` to its handler.

        Args:
            request: Registered command or query instance.

        Returns:
            The handler's Result.

        Raises:
            ValueError: If no handler is registered for the request type.
        """
        handler_class = get_handler_class(type(request))
        if handler_class is None:
            raise ValueError(f"No handler registered for {type(request).__name__}")

        async with self._database.get_session() as session:
            handler = await create_handler(handler_class, session, **self._overrides)
            return await handler.handle(request)


@lru_cache()
def get_mediator() -> Mediator:
    """Get mediator singleton bound to the container's database."""
    return Mediator()
