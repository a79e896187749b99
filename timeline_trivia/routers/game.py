import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, status

from timeline_trivia.converter import DataConverter
from timeline_trivia.errors import GameNotFoundError, GameOverError
from timeline_trivia.models.dc_models import (
    PlaceCardModel,
    PlacementResponseModel,
    StateModel,
)
from timeline_trivia.services.game_manager import GameManager

game_router = APIRouter()
data_converter = DataConverter()


def get_game_manager(request: Request) -> GameManager:
    return request.app.state.game_manager


def find_game(game_manager: GameManager, game_id: UUID):
    try:
        return game_manager.get_game(game_id)
    except GameNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


class GameAPI:
    @staticmethod
    @game_router.post("/start_game", response_model=StateModel)
    async def start_game(game_manager: GameManager = Depends(get_game_manager)):
        try:
            state = game_manager.start_game()
        except ValueError as e:
            logging.error(f"Failed to start game: {e}")
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="No cards available",
            )
        return data_converter.convert_gamestateschema_to_statemodel(state)

    @staticmethod
    @game_router.get("/get_state/{game_id}", response_model=StateModel)
    async def get_state(game_id: UUID, game_manager: GameManager = Depends(get_game_manager)):
        state = find_game(game_manager, game_id)
        return data_converter.convert_gamestateschema_to_statemodel(state)

    @staticmethod
    @game_router.delete("/end_game/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def end_game(game_id: UUID, game_manager: GameManager = Depends(get_game_manager)):
        try:
            game_manager.end_game(game_id)
        except GameNotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


class PlacementAPI:
    @staticmethod
    @game_router.post("/place_card/{game_id}", response_model=PlacementResponseModel)
    async def place_card(
        game_id: UUID,
        placement: PlaceCardModel,
        game_manager: GameManager = Depends(get_game_manager),
    ):
        find_game(game_manager, game_id)
        try:
            result, state = game_manager.place_card(game_id, placement.index)
        except GameOverError as e:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
        except ValueError as e:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)
            )
        return PlacementResponseModel(
            correct=result.correct,
            delta=result.delta,
            state=data_converter.convert_gamestateschema_to_statemodel(state),
        )
