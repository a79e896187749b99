import logging
from typing import Dict, List, Optional, Sequence, Tuple
from uuid import UUID

import numpy as np
from uuid6 import uuid7

from timeline_trivia.domain.card_rules import select_next
from timeline_trivia.domain.placement_rules import check_placement, insert_sorted
from timeline_trivia.errors import GameNotFoundError, GameOverError
from timeline_trivia.models.schema_models import (
    BadlyPlacedSchema,
    GameStateSchema,
    Item,
    PlacementResult,
    PlayedItem,
)

DEFAULT_LIVES = 3


def draw_card(
    deck: Sequence[Item], played: Sequence[Item], rng: np.random.Generator
) -> Tuple[Item, List[Item]]:
    """Select a card and return it with the deck that remains without it."""
    card = select_next(deck, played, rng)
    remaining = [c for c in deck if c.id != card.id]
    return card, remaining


def create_state(
    deck: Sequence[Item],
    lives: int = DEFAULT_LIVES,
    rng: Optional[np.random.Generator] = None,
) -> GameStateSchema:
    """Deal the opening card and the two pending cards of a new game

    Args:
        deck (Sequence[Item]): Full deck, must not be empty
        lives (int, optional): Wrong placements allowed. Defaults to 3.
        rng (np.random.Generator, optional): Random source. Defaults to a fresh default_rng().

    Returns:
        GameStateSchema: State with one card already on the timeline
    """
    if rng is None:
        rng = np.random.default_rng()

    first, remaining = draw_card(deck, [], rng)
    played = [PlayedItem.from_item(first, correct=True)]

    next_card = None
    next_but_one = None
    if remaining:
        next_card, remaining = draw_card(remaining, played, rng)
    if remaining:
        next_but_one, remaining = draw_card(remaining, [*played, next_card], rng)

    return GameStateSchema(
        game_id=uuid7(),
        deck=remaining,
        played=played,
        next=next_card,
        next_but_one=next_but_one,
        lives=lives,
    )


def place_card(
    state: GameStateSchema, index: int, rng: Optional[np.random.Generator] = None
) -> PlacementResult:
    """Place the pending card at `index` and advance the game

    The card joins the timeline at its true position whether or not the guess was right.
    A wrong guess costs a life.

    Raises:
        GameOverError: The game has already finished
        ValueError: index is outside the timeline
    """
    if state.game_over:
        raise GameOverError(f"Game {state.game_id} is over")
    if rng is None:
        rng = np.random.default_rng()

    drawn = state.next
    result = check_placement(state.played, drawn, index)

    state.played = insert_sorted(state.played, PlayedItem.from_item(drawn, result.correct))
    if result.correct:
        state.badly_placed = None
    else:
        state.lives -= 1
        state.badly_placed = BadlyPlacedSchema(index=index, delta=result.delta)

    state.next = state.next_but_one
    state.next_but_one = None
    if state.next is not None and state.deck:
        state.next_but_one, state.deck = draw_card(
            state.deck, [*state.played, state.next], rng
        )
    return result


class GameManager:
    def __init__(
        self,
        deck: Sequence[Item],
        lives: int = DEFAULT_LIVES,
        rng: Optional[np.random.Generator] = None,
    ):
        self.deck: List[Item] = list(deck)
        self.lives = lives
        self.rng = rng if rng is not None else np.random.default_rng()
        self.active_games: Dict[UUID, GameStateSchema] = {}

    def start_game(self) -> GameStateSchema:
        """Create a new game from the shared deck and keep it in memory"""
        state = create_state(self.deck, self.lives, self.rng)
        self.active_games[state.game_id] = state
        logging.info(f"Started game {state.game_id} with {len(self.deck)} cards")
        return state

    def get_game(self, game_id: UUID) -> GameStateSchema:
        if game_id not in self.active_games:
            raise GameNotFoundError(f"Game {game_id} not found")
        return self.active_games[game_id]

    def place_card(self, game_id: UUID, index: int) -> Tuple[PlacementResult, GameStateSchema]:
        """Place the pending card of a game

        Args:
            game_id (UUID): To identify the game
            index (int): Slot on the timeline chosen by the player

        Returns:
            Tuple[PlacementResult, GameStateSchema]: Placement verdict and the updated game
        """
        state = self.get_game(game_id)
        result = place_card(state, index, self.rng)
        logging.info(
            f"Game {game_id}: placed at {index}, correct={result.correct}, "
            f"delta={result.delta}, lives={state.lives}"
        )
        if state.game_over:
            logging.info(f"Game {game_id} over with score {state.score}")
        return result, state

    def end_game(self, game_id: UUID):
        """Forget a game"""
        self.get_game(game_id)
        del self.active_games[game_id]
        logging.info(f"Ended game {game_id}")
