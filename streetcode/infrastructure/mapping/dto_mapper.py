"""Entity to DTO mapper.

Converts domain entities to the DTOs returned by handlers. One converter
function per (entity type, DTO type) pair; ``DtoMapper`` dispatches on that
pair and fails loudly for unregistered pairs (programmer error).
"""

from collections.abc import Callable, Iterable
from typing import Any, TypeVar, cast

from streetcode.application.dtos import ArtDto, FactDto, ImageDto, StreetcodeArtDto
from streetcode.domain.entities import Art, Fact, Image, StreetcodeArt

T = TypeVar("T")

Converter = Callable[["DtoMapper", Any], Any]


# =============================================================================
# Converters
# =============================================================================


def image_to_dto(mapper: "DtoMapper", image: Image) -> ImageDto:
    return ImageDto(
        id=_require_id(image.id, "Image"),
        blob_name=image.blob_name,
        mime_type=image.mime_type,
        title=image.title,
        alt=image.alt,
    )


def streetcode_art_to_dto(mapper: "DtoMapper", link: StreetcodeArt) -> StreetcodeArtDto:
    return StreetcodeArtDto(
        index=link.index,
        art_id=link.art_id,
        streetcode_id=link.streetcode_id,
    )


def art_to_dto(mapper: "DtoMapper", art: Art) -> ArtDto:
    return ArtDto(
        id=_require_id(art.id, "Art"),
        title=art.title,
        description=art.description,
        image_id=art.image_id,
        image=mapper.map(art.image, ImageDto) if art.image is not None else None,
        streetcode_arts=mapper.map_many(art.streetcode_arts, StreetcodeArtDto),
    )


def fact_to_dto(mapper: "DtoMapper", fact: Fact) -> FactDto:
    return FactDto(
        id=_require_id(fact.id, "Fact"),
        title=fact.title,
        fact_content=fact.fact_content,
        number=fact.number,
        streetcode_id=fact.streetcode_id,
        image_id=fact.image_id,
    )


def _require_id(value: int | None, entity_name: str) -> int:
    if value is None:
        raise ValueError(f"Cannot map unsaved {entity_name} (id is None)")
    return value


DEFAULT_CONVERTERS: dict[tuple[type, type], Converter] = {
    (Art, ArtDto): art_to_dto,
    (Fact, FactDto): fact_to_dto,
    (Image, ImageDto): image_to_dto,
    (StreetcodeArt, StreetcodeArtDto): streetcode_art_to_dto,
}


# =============================================================================
# Mapper
# =============================================================================


class DtoMapper:
    """Registry-based implementation of MapperProtocol.

    Example:
        >>> mapper = DtoMapper()
        >>> dto = mapper.map(fact, FactDto)
        >>> dtos = mapper.map_many(arts, ArtDto)
    """

    def __init__(
        self, converters: dict[tuple[type, type], Converter] | None = None
    ) -> None:
        self._converters: dict[tuple[type, type], Converter] = dict(
            DEFAULT_CONVERTERS if converters is None else converters
        )

    def register(self, source: type, target: type, converter: Converter) -> None:
        """Add or replace the converter for ``(source, target)``."""
        self._converters[(source, target)] = converter

    def supports(self, source: type, target: type) -> bool:
        return (source, target) in self._converters

    def map(self, source: Any, target: type[T]) -> T:
        """Translate ``source`` into an instance of ``target``.

        Raises:
            ValueError: If no converter is registered for the pair.
        """
        converter = self._converters.get((type(source), target))
        if converter is None:
            raise ValueError(
                f"No mapping registered from {type(source).__name__} "
                f"to {target.__name__}"
            )
        return cast(T, converter(self, source))

    def map_many(self, sources: Iterable[Any], target: type[T]) -> list[T]:
        """Translate every item, preserving order."""
        return [self.map(source, target) for source in sources]
