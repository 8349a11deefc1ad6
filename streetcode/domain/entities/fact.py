"""Fact domain entity.

A short piece of text (optionally illustrated) attached to a streetcode.
Facts of one streetcode are shown in the order of their ``number``.

Invariant:
    Within one streetcode, ``number`` values form a contiguous permutation
    of 1..N where N is the number of facts of that streetcode.
"""

from dataclasses import dataclass


@dataclass(kw_only=True)
class Fact:
    """Fact belonging to exactly one streetcode.

    Attributes:
        id: Database identifier (None until persisted).
        title: Short headline.
        fact_content: Body text.
        number: 1-based position among the facts of the same streetcode.
        streetcode_id: Owning streetcode.
        image_id: Optional illustration.

    Example:
        >>> fact = Fact(
        ...     title="Founded",
        ...     fact_content="The square was laid out in 1870.",
        ...     number=1,
        ...     streetcode_id=7,
        ... )
        >>> fact.move_to(3)
        >>> fact.number
        3
    """

    id: int | None = None
    title: str
    fact_content: str
    number: int
    streetcode_id: int
    image_id: int | None = None

    def move_to(self, position: int) -> None:
        """Set the 1-based ordinal of this fact.

        Args:
            position: New position, must be >= 1.

        Raises:
            ValueError: If position is not positive.
        """
        if position < 1:
            raise ValueError(f"Fact number must be positive, got {position}")
        self.number = position
