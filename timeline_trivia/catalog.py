import json
import logging
import pathlib
from typing import Iterable, List, Optional, Set

import numpy as np
from pydantic import ValidationError

from timeline_trivia.domain.deck_rules import DEFAULT_FAMILY_GAP, build_deck
from timeline_trivia.domain.item_filter import filter_items, split_by_category
from timeline_trivia.errors import CatalogError
from timeline_trivia.models.schema_models import Item


def load_items(path: str | pathlib.Path) -> List[Item]:
    """Read the item catalog, one JSON object per line

    Args:
        path (str | pathlib.Path): Path to the JSON lines file

    Raises:
        CatalogError: The file is missing or a line is not a valid item

    Returns:
        List[Item]: Items in file order
    """
    file_path = pathlib.Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogError(f"Failed to read item catalog {file_path}: {e}") from e

    items: List[Item] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            items.append(Item.model_validate_json(line))
        except ValidationError as e:
            raise CatalogError(f"Invalid item on line {line_number} of {file_path}: {e}") from e
    logging.info(f"Loaded {len(items)} items from {file_path}")
    return items


def load_bad_ids(path: Optional[str | pathlib.Path]) -> Set[str]:
    """Read the ids of cards reported as having bad data

    The file holds either a JSON object keyed by id or a JSON list of ids.
    No path means no known bad cards.
    """
    if path is None:
        return set()
    file_path = pathlib.Path(path)
    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(f"Failed to read bad card list {file_path}: {e}") from e

    if isinstance(data, dict):
        return set(data.keys())
    if isinstance(data, list):
        return {str(card_id) for card_id in data}
    raise CatalogError(f"Bad card list {file_path} must be a JSON object or list")


def _shuffled(pool: List[Item], rng: np.random.Generator) -> List[Item]:
    return [pool[int(i)] for i in rng.permutation(len(pool))]


def build_game_deck(
    items: Iterable[Item],
    bad_ids: Iterable[str] = (),
    gap: int = DEFAULT_FAMILY_GAP,
    rng: Optional[np.random.Generator] = None,
) -> List[Item]:
    """Filter the catalog and mix family cards into the trivia cards

    Args:
        items (Iterable[Item]): Raw catalog
        bad_ids (Iterable[str], optional): Known bad card ids. Defaults to ().
        gap (int, optional): Trivia cards between two family cards. Defaults to 4.
        rng (np.random.Generator, optional): When given, each pool is shuffled first. Defaults to None.

    Returns:
        List[Item]: The deck
    """
    items = list(items)
    playable = filter_items(items, bad_ids)
    if len(playable) < len(items):
        logging.info(f"Filtered out {len(items) - len(playable)} unplayable items")

    general, family = split_by_category(playable)
    if rng is not None:
        general = _shuffled(general, rng)
        family = _shuffled(family, rng)
    deck = build_deck(general, family, gap)
    logging.info(f"Built deck: {len(general)} trivia cards, {len(family)} family cards")
    return deck
