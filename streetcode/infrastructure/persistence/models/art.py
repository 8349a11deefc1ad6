"""Art and StreetcodeArt database models.

Relationships are loaded with ``selectin`` so async sessions never lazy-load.
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from streetcode.infrastructure.persistence.base import Base, BaseMutableModel
from streetcode.infrastructure.persistence.models.image import Image


class Art(BaseMutableModel):
    """Art model.

    Fields:
        title: Optional title
        description: Optional description
        image_id: FK to images (CASCADE delete)
        image: Loaded image
        streetcode_arts: Join rows to streetcodes
    """

    __tablename__ = "arts"

    title: Mapped[str | None] = mapped_column(String(150), nullable=True)
    description: Mapped[str | None] = mapped_column(String(400), nullable=True)

    image_id: Mapped[int] = mapped_column(
        ForeignKey("images.id", ondelete="CASCADE"),
        nullable=False,
    )

    image: Mapped[Image | None] = relationship(lazy="selectin")

    streetcode_arts: Mapped[list["StreetcodeArt"]] = relationship(
        back_populates="art",
        lazy="selectin",
        order_by="StreetcodeArt.index",
    )


class StreetcodeArt(Base):
    """Join table between streetcodes and arts (composite primary key)."""

    __tablename__ = "streetcode_arts"

    art_id: Mapped[int] = mapped_column(
        ForeignKey("arts.id", ondelete="CASCADE"),
        primary_key=True,
    )
    streetcode_id: Mapped[int] = mapped_column(
        ForeignKey("streetcodes.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
    index: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Position of the art in the streetcode gallery",
    )

    art: Mapped[Art] = relationship(back_populates="streetcode_arts", lazy="raise")
