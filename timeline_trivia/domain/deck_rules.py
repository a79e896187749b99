"""Deck construction rules.

Mixes the general (trivia) pool and the family pool into one ordered deck.
No randomness here: shuffle the pools before calling if a random order is wanted.
"""

from typing import List, Sequence

from timeline_trivia.models.schema_models import Item

DEFAULT_FAMILY_GAP = 4


def build_deck(
    general: Sequence[Item], family: Sequence[Item], gap: int = DEFAULT_FAMILY_GAP
) -> List[Item]:
    """Insert one family card after every `gap` general cards.

    When family runs out the rest of the general cards follow in order.
    When general runs out the remaining family cards follow one by one.

    Args:
        general (Sequence[Item]): General cards in the order they should be dealt
        family (Sequence[Item]): Family cards in the order they should be dealt
        gap (int, optional): General cards between two family cards. Defaults to 4.

    Raises:
        ValueError: gap is smaller than 1

    Returns:
        List[Item]: Every input item exactly once
    """
    if gap < 1:
        raise ValueError("gap must be at least 1")

    deck: List[Item] = []
    general_index = 0
    family_index = 0

    while general_index < len(general) or family_index < len(family):
        group = general[general_index : general_index + gap]
        deck.extend(group)
        general_index += len(group)

        if family_index < len(family):
            deck.append(family[family_index])
            family_index += 1
    return deck
