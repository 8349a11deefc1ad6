"""Media DTOs (Data Transfer Objects).

Response dataclasses for Art and Image handlers. They carry data from
handlers back to the caller without exposing domain entities.

DTOs:
    - ImageDto: Image metadata
    - StreetcodeArtDto: Placement of an art in a streetcode gallery
    - ArtDto: Art with its image and gallery placements
"""

from dataclasses import dataclass, field


@dataclass(frozen=True, kw_only=True)
class ImageDto:
    """Image metadata.

    Attributes:
        id: Image identifier.
        blob_name: Name of the stored blob.
        mime_type: Content type (e.g. "image/png").
        title: Optional display title.
        alt: Optional alternative text.
    """

    id: int
    blob_name: str
    mime_type: str
    title: str | None = None
    alt: str | None = None


@dataclass(frozen=True, kw_only=True)
class StreetcodeArtDto:
    """Art placement inside a streetcode.

    Attributes:
        index: Position in the streetcode gallery.
        art_id: Art identifier.
        streetcode_id: Streetcode identifier.
    """

    index: int
    art_id: int
    streetcode_id: int


@dataclass(frozen=True, kw_only=True)
class ArtDto:
    """Art with its image.

    Attributes:
        id: Art identifier.
        title: Optional title.
        description: Optional description.
        image_id: Image identifier.
        image: Image metadata when loaded.
        streetcode_arts: Gallery placements of this art.
    """

    id: int
    title: str | None
    description: str | None
    image_id: int
    image: ImageDto | None = None
    streetcode_arts: list[StreetcodeArtDto] = field(default_factory=list)
