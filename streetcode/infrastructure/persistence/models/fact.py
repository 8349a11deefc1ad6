"""Fact database model.

Architecture:
    - Facts belong to streetcodes (FK, CASCADE delete)
    - ``number`` orders facts within their streetcode (1..N)

Indexes:
    - ix_facts_streetcode_id: parent lookup (count, list, reorder)
"""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from streetcode.infrastructure.persistence.base import BaseMutableModel


class Fact(BaseMutableModel):
    """Fact model.

    Fields:
        title: Short headline
        fact_content: Body text
        number: 1-based position within the streetcode
        streetcode_id: FK to streetcodes
        image_id: Optional FK to images
    """

    __tablename__ = "facts"

    title: Mapped[str] = mapped_column(String(68), nullable=False)

    fact_content: Mapped[str] = mapped_column(Text, nullable=False)

    number: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="1-based position among the facts of the streetcode",
    )

    streetcode_id: Mapped[int] = mapped_column(
        ForeignKey("streetcodes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    image_id: Mapped[int | None] = mapped_column(
        ForeignKey("images.id", ondelete="SET NULL"),
        nullable=True,
    )
