"""Database persistence infrastructure.

This module provides:
- Declarative bases for all database models
- Database connection and session management
- Repository implementations and the repository wrapper (unit of work)
"""

from streetcode.infrastructure.persistence.base import Base, BaseModel
from streetcode.infrastructure.persistence.database import Database

__all__ = [
    "Base",
    "BaseModel",
    "Database",
]
