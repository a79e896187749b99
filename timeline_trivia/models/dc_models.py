from pydantic import BaseModel
from uuid import UUID
from typing import List, Optional


class PlaceCardModel(BaseModel):
    index: int  # slot on the timeline, 0 is before the earliest card


class CardModel(BaseModel):
    id: str
    label: str
    description: str
    category: str
    image_url: Optional[str] = None
    wikipedia_title: Optional[str] = None
    year: Optional[int] = None  # hidden until the card is placed


class PlayedCardModel(CardModel):
    correct: bool


class BadlyPlacedModel(BaseModel):
    index: int
    delta: int


class StateModel(BaseModel):
    game_id: UUID
    played: List[PlayedCardModel]
    next: Optional[CardModel] = None
    next_but_one: Optional[CardModel] = None
    lives: int
    score: int
    remaining_cards: int
    game_over: bool
    badly_placed: Optional[BadlyPlacedModel] = None

    class Config:
        from_attributes = True


class PlacementResponseModel(BaseModel):
    correct: bool
    delta: int
    state: StateModel
