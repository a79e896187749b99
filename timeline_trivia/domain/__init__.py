"""Domain layer (pure logic).

- Keep deck building, card selection and placement scoring here.
- Avoid I/O: no files, no HTTP/FastAPI, no logging of game data.
- Randomness is passed in as a generator so games can be replayed from a seed.
"""
