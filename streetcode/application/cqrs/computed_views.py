"""Views derived from the CQRS registry.

The mediator resolves handlers here; compliance tests use the consistency
check and statistics.
"""

from collections import Counter
from functools import lru_cache
from typing import TYPE_CHECKING

from streetcode.application.cqrs.metadata import get_handler_dependencies

if TYPE_CHECKING:
    from streetcode.application.cqrs.metadata import (
        CommandMetadata,
        CQRSCategory,
        QueryMetadata,
    )


@lru_cache(maxsize=1)
def _metadata_by_request() -> dict[type, "CommandMetadata | QueryMetadata"]:
    # Later duplicates would shadow earlier ones; validate_registry_consistency
    # reports them.
    from streetcode.application.cqrs.registry import COMMAND_REGISTRY, QUERY_REGISTRY

    index: dict[type, CommandMetadata | QueryMetadata] = {}
    for command_meta in COMMAND_REGISTRY:
        index[command_meta.command_class] = command_meta
    for query_meta in QUERY_REGISTRY:
        index[query_meta.query_class] = query_meta
    return index


def get_all_commands() -> list[type]:
    """Registered command classes in registry order."""
    from streetcode.application.cqrs.registry import COMMAND_REGISTRY

    return [meta.command_class for meta in COMMAND_REGISTRY]


def get_all_queries() -> list[type]:
    """Registered query classes in registry order."""
    from streetcode.application.cqrs.registry import QUERY_REGISTRY

    return [meta.query_class for meta in QUERY_REGISTRY]


def get_commands_by_category(category: "CQRSCategory") -> list["CommandMetadata"]:
    from streetcode.application.cqrs.registry import COMMAND_REGISTRY

    return [meta for meta in COMMAND_REGISTRY if meta.category == category]


def get_queries_by_category(category: "CQRSCategory") -> list["QueryMetadata"]:
    from streetcode.application.cqrs.registry import QUERY_REGISTRY

    return [meta for meta in QUERY_REGISTRY if meta.category == category]


def get_metadata(request_class: type) -> "CommandMetadata | QueryMetadata | None":
    """Registry entry for a command or query class, if any."""
    return _metadata_by_request().get(request_class)


def get_handler_class(request_class: type) -> type | None:
    """Handler class registered for a command or query.

    Args:
        request_class: Command or query class.

    Returns:
        Handler class, or None for unregistered types.

    Example:
        >>> get_handler_class(GetArtById).__name__
        'GetArtByIdHandler'
    """
    meta = get_metadata(request_class)
    return meta.handler_class if meta is not None else None


def get_all_handler_classes() -> list[type]:
    """Every registered handler class, once each, in registry order."""
    return list(dict.fromkeys(meta.handler_class for meta in _metadata_by_request().values()))


def get_statistics() -> dict[str, int | dict[str, int]]:
    """Registry counts, grouped the way the docs list operations."""
    from streetcode.application.cqrs.registry import COMMAND_REGISTRY, QUERY_REGISTRY

    return {
        "total_commands": len(COMMAND_REGISTRY),
        "total_queries": len(QUERY_REGISTRY),
        "total_operations": len(COMMAND_REGISTRY) + len(QUERY_REGISTRY),
        "by_category": dict(
            Counter(
                meta.category.value for meta in (*COMMAND_REGISTRY, *QUERY_REGISTRY)
            )
        ),
        "serialized_commands": sum(
            1 for meta in COMMAND_REGISTRY if meta.serialized_per_streetcode
        ),
        "list_queries": sum(1 for meta in QUERY_REGISTRY if meta.returns_list),
    }


def validate_registry_consistency() -> list[str]:
    """Check the registry for drift.

    Reports duplicate or ambiguous request classes, handlers without
    ``handle`` and serialized commands whose handler never receives the
    fact lock registry.

    Returns:
        Problems found (empty when consistent).
    """
    from streetcode.application.cqrs.registry import COMMAND_REGISTRY, QUERY_REGISTRY

    problems: list[str] = []

    request_counts = Counter(
        [meta.command_class for meta in COMMAND_REGISTRY]
        + [meta.query_class for meta in QUERY_REGISTRY]
    )
    for request_class, seen in request_counts.items():
        if seen > 1:
            problems.append(f"{request_class.__name__} is registered {seen} times")

    for meta in (*COMMAND_REGISTRY, *QUERY_REGISTRY):
        if not callable(getattr(meta.handler_class, "handle", None)):
            problems.append(f"{meta.handler_class.__name__} has no handle() method")

    for command_meta in COMMAND_REGISTRY:
        takes_locks = "fact_locks" in get_handler_dependencies(command_meta.handler_class)
        if command_meta.serialized_per_streetcode and not takes_locks:
            problems.append(
                f"{command_meta.handler_class.__name__} is serialized per streetcode "
                "but does not accept fact_locks"
            )

    return problems
