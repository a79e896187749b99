import os
from dotenv import load_dotenv

load_dotenv()

items_path = os.getenv("ITEMS_PATH", "items.json")
bad_cards_path = os.getenv("BAD_CARDS_PATH") or None
deck_gap = int(os.getenv("DECK_GAP", "4"))
starting_lives = int(os.getenv("STARTING_LIVES", "3"))
random_seed = int(os.environ["RANDOM_SEED"]) if os.getenv("RANDOM_SEED") else None
log_level = os.getenv("LOG_LEVEL", "INFO").upper()
host = os.getenv("HOST", "0.0.0.0")
port = int(os.getenv("PORT", "8080"))

if __name__ == "__main__":
    print(items_path, bad_cards_path, deck_gap, starting_lives, random_seed, log_level, host, port)
