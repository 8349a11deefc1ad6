"""Result types for railway-oriented programming.

Handlers never raise for expected failures (missing facts, bad input,
nothing saved). They return a Result so the caller has to look at it.

Usage:
    async def handle(self, query: GetArtById) -> Result[ArtDto, DomainError]:
        art = await self._repositories.art_repository.get_first_or_default(
            id=query.art_id
        )
        if art is None:
            return Failure(error=NotFoundError(...))
        return Success(value=self._mapper.map(art, ArtDto))

    match await handler.handle(query):
        case Success(value=dto):
            print(dto.title)
        case Failure(error=error):
            print(error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
Result: TypeAlias = Success[T] | Failure[E]
