"""Container module - Centralized dependency injection.

Re-exports the factory functions:

    from streetcode.core.container import get_logger, get_mediator

- infrastructure: Core services (db, logging, mapping, locks)
- handler_factory: Handler auto-wiring
- mediator: Request dispatch
"""

from streetcode.core.container.handler_factory import create_handler
from streetcode.core.container.infrastructure import (
    get_database,
    get_fact_locks,
    get_logger,
    get_mapper,
)
from streetcode.core.container.mediator import Mediator, get_mediator

__all__ = [
    "Mediator",
    "create_handler",
    "get_database",
    "get_fact_locks",
    "get_logger",
    "get_mapper",
    "get_mediator",
]
