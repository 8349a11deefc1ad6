"""Streetcode database model.

The parent entity that groups facts and arts. Only the columns the content
handlers need are mapped here.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from streetcode.infrastructure.persistence.base import BaseMutableModel


class StreetcodeContent(BaseMutableModel):
    """Streetcode (parent) model.

    Fields:
        id: Integer primary key (from BaseMutableModel)
        index: Public, human-facing number of the streetcode (unique)
        title: Display title
    """

    __tablename__ = "streetcodes"

    index: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        unique=True,
        comment="Public streetcode number",
    )

    title: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Display title",
    )
