"""Art domain entities.

An Art is an artwork record built around one Image. It is attached to
streetcodes through StreetcodeArt join records, each carrying the position
(``index``) of the art within that streetcode's gallery.
"""

from dataclasses import dataclass, field

from streetcode.domain.entities.image import Image


@dataclass(kw_only=True)
class StreetcodeArt:
    """Join record between a streetcode and an art.

    Attributes:
        index: Position of the art within the streetcode gallery.
        art_id: Art identifier.
        streetcode_id: Streetcode identifier.
    """

    index: int
    art_id: int
    streetcode_id: int


@dataclass(kw_only=True)
class Art:
    """Artwork referencing an image.

    Attributes:
        id: Database identifier.
        title: Optional title.
        description: Optional description.
        image_id: Referenced image.
        image: Loaded image, when the repository included it.
        streetcode_arts: Join records to streetcodes.
    """

    id: int | None = None
    title: str | None = None
    description: str | None = None
    image_id: int
    image: Image | None = None
    streetcode_arts: list[StreetcodeArt] = field(default_factory=list)

    def streetcode_ids(self) -> list[int]:
        """Ids of the streetcodes this art is attached to."""
        return [link.streetcode_id for link in self.streetcode_arts]
