"""Image database model (metadata; the file lives in blob storage)."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from streetcode.infrastructure.persistence.base import BaseMutableModel


class Image(BaseMutableModel):
    """Image model.

    Fields:
        blob_name: Name of the file in blob storage
        mime_type: Content type
        title: Optional caption title
        alt: Optional alternative text
    """

    __tablename__ = "images"

    blob_name: Mapped[str] = mapped_column(String(255), nullable=False)
    mime_type: Mapped[str] = mapped_column(String(50), nullable=False)
    title: Mapped[str | None] = mapped_column(String(300), nullable=True)
    alt: Mapped[str | None] = mapped_column(String(300), nullable=True)
