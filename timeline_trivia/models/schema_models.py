from pydantic import BaseModel, Field
from typing import List, Optional
from uuid import UUID


class Item(BaseModel):
    id: str
    label: str
    description: str = ""
    year: int
    category: str = "trivia"  # "family" cards are mixed in separately
    instance_of: List[str] = Field(default_factory=list)
    image: Optional[str] = None
    wikipedia_title: Optional[str] = None
    date_prop_id: Optional[str] = None
    occupations: Optional[List[str]] = None

    class Config:
        frozen = True


class PlayedItem(Item):
    correct: bool = True

    @classmethod
    def from_item(cls, item: Item, correct: bool) -> "PlayedItem":
        data = item.model_dump()
        data["correct"] = correct
        return cls(**data)


class PlacementResult(BaseModel):
    correct: bool
    delta: int

    class Config:
        frozen = True


class BadlyPlacedSchema(BaseModel):
    index: int  # slot the player chose
    delta: int


class GameStateSchema(BaseModel):
    game_id: UUID
    deck: List[Item]
    played: List[PlayedItem]
    next: Optional[Item] = None
    next_but_one: Optional[Item] = None
    lives: int
    badly_placed: Optional[BadlyPlacedSchema] = None

    @property
    def score(self) -> int:
        # the opening card is dealt as correct and does not count
        return max(0, sum(p.correct for p in self.played) - 1)

    @property
    def game_over(self) -> bool:
        return self.lives <= 0 or self.next is None
