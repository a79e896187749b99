import logging
from contextlib import asynccontextmanager

import numpy as np
from fastapi import FastAPI

from timeline_trivia import load_settings
from timeline_trivia.catalog import build_game_deck, load_bad_ids, load_items
from timeline_trivia.routers import game
from timeline_trivia.services.game_manager import GameManager

logging.basicConfig(level=load_settings.log_level)


@asynccontextmanager
async def lifespan(app):
    """Load the item catalog and build the shared deck.
    This function is called to start the server.
    """
    rng = np.random.default_rng(load_settings.random_seed)
    items = load_items(load_settings.items_path)
    bad_ids = load_bad_ids(load_settings.bad_cards_path)
    deck = build_game_deck(items, bad_ids, load_settings.deck_gap, rng)
    if not deck:
        logging.warning("Deck is empty, games cannot be started")
    app.state.game_manager = GameManager(deck, load_settings.starting_lives, rng)
    try:
        yield
    finally:
        logging.info("Stop Server")


app = FastAPI(lifespan=lifespan)
app.include_router(game.game_router)
