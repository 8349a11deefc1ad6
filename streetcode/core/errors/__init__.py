"""Core errors package.

Usage:
    from streetcode.core.errors import DomainError, ValidationError, NotFoundError
"""

from streetcode.core.errors.common_errors import (
    ConflictError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from streetcode.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "PersistenceError",
]
