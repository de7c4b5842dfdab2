"""Requests and Response models"""

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import LetterMark


class CamelModel(BaseModel):
    """JSON uses camelCase keys (gameId, currentRow, ...). Python code uses snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- REQUEST MODELS ---
class GuessRequest(CamelModel):
    game_id: str
    guess: str

    @field_validator("game_id")
    @classmethod
    def validate_game_id(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise InvalidRequestError("gameId must not be empty.")
        return value


class HintRequest(CamelModel):
    game_id: str

    @field_validator("game_id")
    @classmethod
    def validate_game_id(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise InvalidRequestError("gameId must not be empty.")
        return value


# --- RESPONSE MODELS ---
class MessageResponse(CamelModel):
    message: str


class GameResponse(MessageResponse):
    game_id: str
    grid: list[list[str]]
    current_row: int
    solved: bool


class GuessResponse(GameResponse):
    correct_letters: list[str]
    letter_marks: list[LetterMark]


class HintResponse(MessageResponse):
    game_id: str
    hint: str
