"""CQRS Registry - Single Source of Truth for Commands and Queries.

Catalogs every command and query with its handler. The mediator dispatches
through it and tests verify it stays consistent.
"""

# Metadata types
from streetcode.application.cqrs.metadata import (
    CommandMetadata,
    CQRSCategory,
    QueryMetadata,
)

# Registry constants
from streetcode.application.cqrs.registry import (
    COMMAND_REGISTRY,
    QUERY_REGISTRY,
)

# Computed views and helper functions
from streetcode.application.cqrs.computed_views import (
    get_all_commands,
    get_all_handler_classes,
    get_all_queries,
    get_commands_by_category,
    get_handler_class,
    get_metadata,
    get_queries_by_category,
    get_statistics,
    validate_registry_consistency,
)

__all__ = [
    # Metadata types
    "CommandMetadata",
    "CQRSCategory",
    "QueryMetadata",
    # Registry constants
    "COMMAND_REGISTRY",
    "QUERY_REGISTRY",
    # Helper functions
    "get_all_commands",
    "get_all_handler_classes",
    "get_all_queries",
    "get_commands_by_category",
    "get_handler_class",
    "get_metadata",
    "get_queries_by_category",
    "get_statistics",
    "validate_registry_consistency",
]
