"""Handler Factory - Auto-wire handler dependencies.

Introspects handler constructors and resolves dependencies from the
container based on their type hints:

- ``RepositoryWrapper``: created per request on the given session
- ``*Protocol`` and other known services: app-scoped singletons
- anything passed in ``overrides`` (by parameter name) wins

Usage:
    from streetcode.core.container.handler_factory import create_handler

    async with db.get_session() as session:
        handler = await create_handler(ReorderFactsHandler, session)
        result = await handler.handle(command)
"""

import inspect
from collections.abc import Callable
from typing import Any, TypeVar, get_type_hints

from sqlalchemy.ext.asyncio import AsyncSession

# Type variable for handler classes
T = TypeVar("T")


# =============================================================================
# Dependency Type Mappings
# =============================================================================

# Types built per request on the session
SESSION_TYPES: set[str] = {
    "RepositoryWrapper",
}

# Service/protocol types that are app-scoped singletons
SINGLETON_TYPES: dict[str, str] = {
    "LoggerProtocol": "get_logger",
    "MapperProtocol": "get_mapper",
    "DtoMapper": "get_mapper",
    "KeyedLock": "get_fact_locks",
}


def get_type_name(annotation: Any) -> str:
    """Extract type name from annotation.

    Handles class types, ``X | None`` unions and string forward references.

    Args:
        annotation: Type annotation (class or string).

    Returns:
        Type name as string.
    """
    if annotation is None:
        return "None"

    if isinstance(annotation, type):
        return annotation.__name__

    # Union types (X | None): first non-None member
    args = getattr(annotation, "__args__", None)
    if args:
        for arg in args:
            if arg is not type(None):
                return get_type_name(arg)
        return "None"

    if isinstance(annotation, str):
        return annotation.split(".")[-1]

    # Fallback
    return str(annotation).split(".")[-1].rstrip("'>")


def analyze_handler_dependencies(handler_class: type) -> dict[str, dict[str, Any]]:
    """Analyze handler __init__ to discover dependencies.

    Args:
        handler_class: Handler class to analyze.

    Returns:
        Dict mapping parameter names to dependency info dicts with keys
        type_name (str), annotation, is_optional (bool).
    """
    init_method = getattr(handler_class, "__init__", None)
    if init_method is None:
        return {}

    try:
        # Resolves forward references
        hints = get_type_hints(init_method)
    except NameError:
        sig = inspect.signature(init_method)
        hints = {
            name: param.annotation
            for name, param in sig.parameters.items()
            if name != "self" and param.annotation is not inspect.Parameter.empty
        }

    hints.pop("return", None)

    dependencies: dict[str, dict[str, Any]] = {}
    for param_name, annotation in hints.items():
        if param_name == "self":
            continue

        args = getattr(annotation, "__args__", ()) or ()
        dependencies[param_name] = {
            "type_name": get_type_name(annotation),
            "annotation": annotation,
            "is_optional": type(None) in args,
        }

    return dependencies


def _get_session_instance(type_name: str, session: AsyncSession) -> Any:
    """Create a session-scoped dependency.

    Raises:
        ValueError: If type not known.
    """
    if type_name == "RepositoryWrapper":
        # Import lazily to avoid circular imports
        from streetcode.infrastructure.persistence.repositories import (
            RepositoryWrapper,
        )

        return RepositoryWrapper(session)

    raise ValueError(f"Unknown session-scoped type: {type_name}")


def _get_singleton_instance(type_name: str) -> Any:
    """Get singleton service instance from container.

    Raises:
        ValueError: If singleton type not found.
    """
    from streetcode.core.container import infrastructure

    factory_name = SINGLETON_TYPES.get(type_name)
    if factory_name is None:
        raise ValueError(f"Unknown singleton type: {type_name}")

    factory: Callable[[], Any] = getattr(infrastructure, factory_name)
    return factory()


async def create_handler(
    handler_class: type[T],
    session: AsyncSession,
    **overrides: Any,
) -> T:
    """Create handler instance with auto-wired dependencies.

    Args:
        handler_class: Handler class to instantiate.
        session: Database session for the repository wrapper.
        **overrides: Explicit dependency overrides (by parameter name).
            Overrides that the handler does not accept are ignored.

    Returns:
        Handler instance with injected dependencies.

    Raises:
        ValueError: If a required dependency cannot be resolved.

    Example:
        >>> handler = await create_handler(GetArtByIdHandler, session)
        >>> result = await handler.handle(GetArtById(art_id=1))
    """
    dependencies = analyze_handler_dependencies(handler_class)
    resolved: dict[str, Any] = {}

    for param_name, dep_info in dependencies.items():
        type_name = dep_info["type_name"]

        if param_name in overrides:
            resolved[param_name] = overrides[param_name]
        elif type_name in SESSION_TYPES:
            resolved[param_name] = _get_session_instance(type_name, session)
        elif type_name in SINGLETON_TYPES:
            resolved[param_name] = _get_singleton_instance(type_name)
        elif dep_info["is_optional"]:
            resolved[param_name] = None
        else:
            raise ValueError(
                f"Cannot resolve dependency '{param_name}' "
                f"of type '{type_name}' for {handler_class.__name__}"
            )

    return handler_class(**resolved)


def get_supported_dependencies() -> dict[str, list[str]]:
    """Get list of supported dependency types."""
    return {
        "session": sorted(SESSION_TYPES),
        "singletons": sorted(SINGLETON_TYPES),
    }
