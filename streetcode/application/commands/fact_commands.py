"""Fact commands (CQRS write operations).

Commands represent user intent to change the facts of a streetcode. They are
immutable dataclasses with imperative names.

Pattern:
- Commands are data containers (no logic)
- Handlers validate and execute
- Commands never return values (handlers return Result)
"""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class ReorderFacts:
    """Reorder all facts of a streetcode.

    The fact at position ``i`` of ``reordered_ids`` gets number ``i + 1``.
    The sequence must name every fact of the streetcode exactly once.

    Attributes:
        streetcode_id: Streetcode whose facts are reordered.
        reordered_ids: Fact ids in their new order (None is rejected).

    Example:
        >>> command = ReorderFacts(streetcode_id=7, reordered_ids=[12, 10, 11])
        >>> result = await handler.handle(command)
    """

    streetcode_id: int
    reordered_ids: Sequence[int] | None


@dataclass(frozen=True, kw_only=True)
class CreateFact:
    """Append a new fact to a streetcode.

    Attributes:
        streetcode_id: Owning streetcode.
        title: Short heading (non-blank).
        fact_content: Body text (non-blank).
        image_id: Optional illustration.
    """

    streetcode_id: int
    title: str
    fact_content: str
    image_id: int | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteFact:
    """Delete a fact, closing the gap in its streetcode's numbering.

    Attributes:
        fact_id: Fact to delete.
    """

    fact_id: int
