"""CQRS Metadata Types.

Dataclasses and enums for CQRS registry metadata.

Design Principles:
- Immutable (frozen=True) - registry entries never change at runtime
- Type-safe (kw_only=True) - explicit field assignment
"""

from dataclasses import dataclass
from enum import Enum


class CQRSCategory(str, Enum):
    """Functional area of a command or query."""

    MEDIA = "media"  # Arts and images
    FACT = "fact"  # Streetcode facts


@dataclass(frozen=True, kw_only=True)
class CommandMetadata:
    """Metadata for a command in the CQRS registry.

    Attributes:
        command_class: The command dataclass (e.g., ReorderFacts).
        handler_class: The handler class (e.g., ReorderFactsHandler).
        category: Functional category for organization.
        has_result_dto: Whether handler returns a result DTO (vs a plain id).
        result_dto_class: The DTO class if has_result_dto is True.
        serialized_per_streetcode: Whether the handler holds the streetcode's
            fact lock while it works.
        description: Human-readable description for documentation.

    Example:
        >>> CommandMetadata(
        ...     command_class=ReorderFacts,
        ...     handler_class=ReorderFactsHandler,
        ...     category=CQRSCategory.FACT,
        ...     has_result_dto=True,
        ...     result_dto_class=ReorderFactsResult,
        ...     description="Renumber all facts of a streetcode",
        ... )
    """

    command_class: type
    handler_class: type
    category: CQRSCategory
    has_result_dto: bool = False
    result_dto_class: type | None = None
    serialized_per_streetcode: bool = True
    description: str = ""

    def __post_init__(self) -> None:
        """Validate metadata consistency."""
        if self.has_result_dto and self.result_dto_class is None:
            raise ValueError(
                f"Command {self.command_class.__name__} has has_result_dto=True "
                f"but no result_dto_class specified"
            )
        if not self.has_result_dto and self.result_dto_class is not None:
            raise ValueError(
                f"Command {self.command_class.__name__} has result_dto_class "
                f"but has_result_dto=False"
            )


@dataclass(frozen=True, kw_only=True)
class QueryMetadata:
    """Metadata for a query in the CQRS registry.

    Attributes:
        query_class: The query dataclass (e.g., GetArtById).
        handler_class: The handler class (e.g., GetArtByIdHandler).
        category: Functional category for organization.
        result_dto_class: DTO returned (alone or in a list).
        returns_list: Whether the handler returns a list of DTOs.
        description: Human-readable description for documentation.
    """

    query_class: type
    handler_class: type
    category: CQRSCategory
    result_dto_class: type
    returns_list: bool = False
    description: str = ""


def get_handler_dependencies(handler_class: type) -> list[str]:
    """Extract dependency names from handler __init__ signature.

    Args:
        handler_class: The handler class to inspect.

    Returns:
        List of dependency parameter names from __init__.

    Example:
        >>> get_handler_dependencies(GetArtByIdHandler)
        ['repositories', 'mapper', 'logger']
    """
    import inspect

    try:
        init_method = getattr(handler_class, "__init__", None)
        if init_method is None:
            return []
        sig = inspect.signature(init_method)
        # Skip 'self' parameter
        return list(sig.parameters.keys())[1:]
    except (ValueError, TypeError):
        return []
