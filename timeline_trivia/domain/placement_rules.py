"""Placement scoring rules.

The true timeline is the played cards sorted by year. A drawn card with the
same year as a played card sorts after it.
"""

from typing import List, Sequence, TypeVar

from timeline_trivia.models.schema_models import Item, PlacementResult

T = TypeVar("T", bound=Item)


def correct_index(played: Sequence[Item], drawn: Item) -> int:
    """Return the 0-based slot of `drawn` in the year-sorted timeline."""
    combined = list(played) + [drawn]
    # sorted() is stable, so the drawn card (last) stays after equal years
    order = sorted(range(len(combined)), key=lambda i: combined[i].year)
    return order.index(len(combined) - 1)


def check_placement(
    played: Sequence[Item], drawn: Item, guessed_index: int
) -> PlacementResult:
    """Score a placement.

    Args:
        played (Sequence[Item]): Cards on the timeline
        drawn (Item): Card the player placed
        guessed_index (int): Slot the player chose, 0..len(played)

    Raises:
        ValueError: guessed_index is outside 0..len(played)

    Returns:
        PlacementResult: correct flag and signed delta (correct slot - guessed slot)
    """
    if guessed_index < 0 or guessed_index > len(played):
        raise ValueError(
            f"guessed_index must be between 0 and {len(played)}, got {guessed_index}"
        )

    expected = correct_index(played, drawn)
    if guessed_index != expected:
        return PlacementResult(correct=False, delta=expected - guessed_index)
    return PlacementResult(correct=True, delta=0)


def insert_sorted(played: Sequence[T], item: T) -> List[T]:
    """Return a new timeline with `item` in its chronological slot."""
    timeline = sorted(played, key=lambda p: p.year)
    index = correct_index(timeline, item)
    timeline.insert(index, item)
    return timeline
