"""Requests and Response models

Field names are snake_case in Python and camelCase on the wire (ex. preferred_colour <-> "preferredColour").
"""

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import ErrorKind

PlayerName = str
GameId = int


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- REQUEST MODELS ---
class PlayerSchema(CamelModel):
    name: PlayerName
    preferred_colour: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value.strip():
            raise InvalidRequestError("Player name must not be blank.")
        return value


class CreateGameRequest(CamelModel):
    players: list[PlayerSchema]
    starting_player: PlayerName


class GetGameRequest(BaseModel):
    game_id: GameId


class DeleteGameRequest(BaseModel):
    game_id: GameId


class ActionsRequest(BaseModel):
    game_id: GameId
    player_name: PlayerName


class ClaimFieldRequest(BaseModel):
    game_id: GameId
    player_name: PlayerName
    action_index: int


# --- RESPONSE MODELS ---
class RankingResponse(CamelModel):
    game_over: bool
    scores: dict[PlayerName, int]


class BoardResponse(CamelModel):
    # cells[y][x]: name of the player who claimed the cell, None if free
    cells: list[list[PlayerName | None]]
    is_empty: bool
    is_full: bool
    is_three_in_a_line: bool


class ActionResponse(CamelModel):
    x: int
    y: int
    index: int
    player: PlayerName


class ErrorResponse(BaseModel):
    error: ErrorKind
    detail: str
