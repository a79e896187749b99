from typing import Optional

from timeline_trivia.image_utils import ImageUtils
from timeline_trivia.models.dc_models import (
    BadlyPlacedModel,
    CardModel,
    PlayedCardModel,
    StateModel,
)
from timeline_trivia.models.schema_models import GameStateSchema, Item, PlayedItem

image_utils = ImageUtils()


class DataConverter:
    """This class is used to convert game data into the format sent to clients."""

    def _image_url(self, item: Item) -> Optional[str]:
        if item.image is None:
            return None
        return image_utils.create_wikimedia_image(item.image)

    def convert_item_to_cardmodel(self, item: Optional[Item]) -> Optional[CardModel]:
        """Convert a pending card. The year stays hidden until it is placed."""
        if item is None:
            return None
        return CardModel(
            id=item.id,
            label=item.label,
            description=item.description,
            category=item.category,
            image_url=self._image_url(item),
            wikipedia_title=item.wikipedia_title,
        )

    def convert_playeditem_to_playedcardmodel(self, item: PlayedItem) -> PlayedCardModel:
        return PlayedCardModel(
            id=item.id,
            label=item.label,
            description=item.description,
            category=item.category,
            image_url=self._image_url(item),
            wikipedia_title=item.wikipedia_title,
            year=item.year,
            correct=item.correct,
        )

    def convert_gamestateschema_to_statemodel(self, state: GameStateSchema) -> StateModel:
        """Convert the GameStateSchema to the StateModel to send client

        Args:
            state (GameStateSchema): The current state of the game

        Returns:
            StateModel: The state of the game in a type for transmission to the client
        """
        badly_placed = None
        if state.badly_placed is not None:
            badly_placed = BadlyPlacedModel(
                index=state.badly_placed.index, delta=state.badly_placed.delta
            )

        return StateModel(
            game_id=state.game_id,
            played=[self.convert_playeditem_to_playedcardmodel(p) for p in state.played],
            next=self.convert_item_to_cardmodel(state.next),
            next_but_one=self.convert_item_to_cardmodel(state.next_but_one),
            lives=state.lives,
            score=state.score,
            remaining_cards=len(state.deck),
            game_over=state.game_over,
            badly_placed=badly_placed,
        )
