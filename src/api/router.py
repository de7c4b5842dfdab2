"""HTTP routes. All logic lives in the WordleService, the routes only translate HTTP <-> request/response models."""

from typing import Annotated, Generator

from fastapi import APIRouter, Body, Depends, Query, Request

from src.api.models import (
    GameResponse,
    GuessRequest,
    GuessResponse,
    HintRequest,
    HintResponse,
)
from src.db.kv_repository import KVGameRepository
from src.db.repository import KeyValueStore
from src.services.wordle_service import WordleService

router = APIRouter(prefix="/api", tags=["Wordle"])


def get_store(request: Request) -> Generator[KeyValueStore, None, None]:
    """Delegates to the store provider the app was wired with (in-memory or SQL)."""
    yield from request.app.state.store_provider()


def get_service(
    request: Request, store: Annotated[KeyValueStore, Depends(get_store)]
) -> WordleService:
    state = request.app.state
    return WordleService(
        repository=KVGameRepository(store),
        dictionary=state.dictionary,
        hint_generator=state.hint_generator,
        rng=state.rng,
        max_write_attempts=state.settings.max_write_attempts,
    )


ServiceDep = Annotated[WordleService, Depends(get_service)]


@router.post("/start", response_model=GameResponse, summary="Start a new game")
def start_game(service: ServiceDep) -> GameResponse:
    return service.start_game()


@router.get("/guess", response_model=GuessResponse, summary="Submit a guess")
def guess_from_query(
    service: ServiceDep,
    game_id: Annotated[str, Query(alias="gameId")],
    guess: Annotated[str, Query()],
) -> GuessResponse:
    return service.submit_guess(GuessRequest(game_id=game_id, guess=guess))


@router.post("/guess", response_model=GuessResponse, summary="Submit a guess")
def guess_from_body(
    service: ServiceDep, request: Annotated[GuessRequest, Body()]
) -> GuessResponse:
    return service.submit_guess(request)


@router.get("/hint", response_model=HintResponse, summary="Get a hint for the solution")
def hint(
    service: ServiceDep, game_id: Annotated[str, Query(alias="gameId")]
) -> HintResponse:
    return service.get_hint(HintRequest(game_id=game_id))
