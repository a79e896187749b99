"""Catalog cleanup before a deck is built.

Drops cards that give their own answer away and cards reported as having bad data.
"""

import re
from typing import Iterable, List, Tuple

from timeline_trivia.domain.card_rules import is_family
from timeline_trivia.models.schema_models import Item

CENTURY_PATTERN = re.compile(r"(?:th|st|nd)[ -]century", re.IGNORECASE)


def reveals_answer(item: Item) -> bool:
    """True if the label or description gives the year away."""
    year_text = str(item.year)
    if year_text in item.label or year_text in item.description:
        return True
    return CENTURY_PATTERN.search(item.description) is not None


def filter_items(items: Iterable[Item], bad_ids: Iterable[str] = ()) -> List[Item]:
    """Keep playable items, preserving order.

    Args:
        items (Iterable[Item]): Raw catalog
        bad_ids (Iterable[str], optional): Ids of cards known to carry wrong data. Defaults to ().

    Returns:
        List[Item]: Items that neither reveal their year nor are known to be bad
    """
    bad = set(bad_ids)
    return [item for item in items if not reveals_answer(item) and item.id not in bad]


def split_by_category(items: Iterable[Item]) -> Tuple[List[Item], List[Item]]:
    """Return (general, family) pools in input order."""
    general: List[Item] = []
    family: List[Item] = []
    for item in items:
        if is_family(item):
            family.append(item)
        else:
            general.append(item)
    return general, family
