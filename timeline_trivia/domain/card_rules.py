"""Rules for picking the next card to deal.

Rule of thumb:
- OK: weighting, filtering, distance math.
- Not OK: module level random state. Pass a generator in.
"""

from typing import List, Optional, Sequence, Tuple

import numpy as np

from timeline_trivia.models.schema_models import Item

FAMILY_CATEGORY = "family"
FAMILY_PROBABILITY = 0.25
AVOID_PEOPLE_PROBABILITY = 0.5
HUMAN_TAG = "human"

# (from_year, to_year, to_inclusive)
ERA_WINDOWS: List[Tuple[int, int, bool]] = [
    (-100000, 1000, False),
    (1000, 1800, False),
    (1800, 2020, True),
]

# Difficulty curve. Breakpoints are gameplay constants.
OPENING_DISTANCE = 110
OPENING_DISTANCE_STEP = 10
OPENING_ROUNDS = 11
MIDGAME_DISTANCE = 5
ENDGAME_ROUNDS = 40
ENDGAME_DISTANCE = 1


def minimum_distance(played_count: int) -> int:
    """Return how many years a new card must be away from every played card."""
    if played_count < OPENING_ROUNDS:
        return OPENING_DISTANCE - OPENING_DISTANCE_STEP * played_count
    if played_count < ENDGAME_ROUNDS:
        return MIDGAME_DISTANCE
    return ENDGAME_DISTANCE


def too_close(item: Item, played: Sequence[Item]) -> bool:
    """True if any played card is fewer than `minimum_distance` years away."""
    distance = minimum_distance(len(played))
    return any(abs(item.year - p.year) < distance for p in played)


def in_era(item: Item, era: Tuple[int, int, bool]) -> bool:
    from_year, to_year, to_inclusive = era
    if item.year < from_year:
        return False
    if to_inclusive:
        return item.year <= to_year
    return item.year < to_year


def is_family(item: Item) -> bool:
    return item.category == FAMILY_CATEGORY


def select_next(
    deck: Sequence[Item],
    played: Sequence[Item],
    rng: Optional[np.random.Generator] = None,
) -> Item:
    """Pick the next card to deal from the remaining deck.

    The source pool is family cards one time in four, otherwise general cards,
    falling back to the other pool when the preferred one is empty. Candidates
    are then limited to a random era window, sometimes stripped of people, and
    kept away from years already on the timeline. If nothing survives the
    filters the card is drawn from the whole deck so the game never stalls.

    Args:
        deck (Sequence[Item]): Remaining cards, must not be empty
        played (Sequence[Item]): Cards already on the timeline
        rng (np.random.Generator, optional): Random source. Defaults to a fresh default_rng().

    Raises:
        ValueError: deck is empty

    Returns:
        Item: A card from the deck
    """
    if len(deck) == 0:
        raise ValueError("cannot select a card from an empty deck")
    if rng is None:
        rng = np.random.default_rng()

    use_family = rng.random() < FAMILY_PROBABILITY
    era = ERA_WINDOWS[int(rng.integers(len(ERA_WINDOWS)))]
    avoid_people = rng.random() < AVOID_PEOPLE_PROBABILITY

    family_cards = [card for card in deck if is_family(card)]
    general_cards = [card for card in deck if not is_family(card)]
    preferred, other = (
        (family_cards, general_cards) if use_family else (general_cards, family_cards)
    )
    source = preferred if preferred else other

    candidates = [
        card
        for card in source
        if in_era(card, era)
        and not (avoid_people and HUMAN_TAG in card.instance_of)
        and not too_close(card, played)
    ]

    if candidates:
        return candidates[int(rng.integers(len(candidates)))]
    return deck[int(rng.integers(len(deck)))]
