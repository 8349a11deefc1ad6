"""Fact DTOs (Data Transfer Objects).

DTOs:
    - FactDto: A fact of a streetcode
    - ReorderFactsResult: Result from ReorderFacts command
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class FactDto:
    """A fact of a streetcode.

    Attributes:
        id: Fact identifier.
        title: Short heading.
        fact_content: Body text.
        number: 1-based position among the streetcode's facts.
        streetcode_id: Owning streetcode.
        image_id: Optional illustration.
    """

    id: int
    title: str
    fact_content: str
    number: int
    streetcode_id: int
    image_id: int | None = None


@dataclass(frozen=True, kw_only=True)
class ReorderFactsResult:
    """Response from successful fact reordering.

    Attributes:
        is_reordered: Always True on success.
    """

    is_reordered: bool = True
