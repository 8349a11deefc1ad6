"""Common error classes used by every handler.

Error Types:
- ValidationError: Malformed or absent input
- NotFoundError: Referenced entity absent
- ConflictError: Input inconsistent with stored state (e.g. id count mismatch)
- PersistenceError: Batch commit affected nothing or failed

Usage:
    from streetcode.core.errors import NotFoundError
    from streetcode.core.enums import ErrorCode
    from streetcode.core.result import Failure

    return Failure(error=NotFoundError(
        code=ErrorCode.ART_NOT_FOUND,
        message="Cannot find an art with corresponding id: 5",
        resource_type="Art",
        resource_id="5",
    ))
"""

from dataclasses import dataclass

from streetcode.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (Art, Fact, Image).
        resource_id: ID of the resource that was not found.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Request conflicts with the stored state.

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class PersistenceError(DomainError):
    """Changes could not be persisted.

    Attributes:
        resource_type: Type of resource being saved.
        affected_rows: Rows reported by the commit (0 when it failed outright).
    """

    resource_type: str
    affected_rows: int = 0
