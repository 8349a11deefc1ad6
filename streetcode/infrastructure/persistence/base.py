"""Declarative bases and mixins for all database models.

This module provides:
- Base: Declarative registry shared by every table (join tables included)
- BaseModel: Base for entity tables (integer id, created_at)
- TimestampMixin: Internal mixin that adds updated_at
- BaseMutableModel: Recommended base for mutable entity tables

Architecture:
    Base (metadata only)
        ├── StreetcodeArtModel (composite key join table)
        └── BaseModel (id, created_at)
                └── BaseMutableModel (+ updated_at)
                        ├── StreetcodeContentModel
                        ├── FactModel
                        ├── ImageModel
                        └── ArtModel

Domain entities should NOT inherit from these; repositories map between them.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, Integer, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative registry for all tables."""


class BaseModel(Base):
    """Base class for entity tables.

    Provides:
    - id: Integer primary key (database generated)
    - created_at: Timestamp when record was created
    """

    __abstract__ = True

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),  # Database sets this on INSERT
    )

    def __repr__(self) -> str:
        """String representation for debugging.

        Returns:
            str: String showing class name and ID.
        """
        return f"<{self.__class__.__name__}(id={self.id})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary (for debugging/logging)."""
        return {
            "id": self.id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class TimestampMixin:
    """Mixin for mutable models that track updates.

    Note:
        Use BaseMutableModel instead of mixing TimestampMixin + BaseModel manually.
    """

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),  # Also applied to Core UPDATE statements
    )

    def to_dict(self) -> dict[str, Any]:
        """Extend BaseModel.to_dict() to include updated_at."""
        data: dict[str, Any] = super().to_dict()  # type: ignore[misc]
        data["updated_at"] = self.updated_at.isoformat() if self.updated_at else None
        return data


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base class for mutable entity tables (id, created_at, updated_at)."""

    __abstract__ = True
