"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from random import Random

from src.api.models import (
    GameResponse,
    GuessRequest,
    GuessResponse,
    HintRequest,
    HintResponse,
)
from src.core.config import DEFAULT_MAX_WRITE_ATTEMPTS
from src.core.exceptions import GameNotFoundError, StoreError, VersionConflictError
from src.core.models import GameModel
from src.db.repository import GameRepository
from src.services.hint_service import HintGenerator
from src.wordle.dictionary import WordList
from src.wordle.game import MESSAGE_NEW_GAME, Game, GuessOutcome

logger = logging.getLogger(__name__)


class WordleService:
    """Orchestration of layers for the word game."""

    def __init__(
        self,
        repository: GameRepository,
        dictionary: WordList,
        hint_generator: HintGenerator,
        rng: Random | None = None,
        max_write_attempts: int = DEFAULT_MAX_WRITE_ATTEMPTS,
    ) -> None:
        self.repo = repository
        self.dictionary = dictionary
        self.hints = hint_generator
        self.rng = rng or Random()
        self.max_write_attempts = max_write_attempts

    # -- API routes logic ---
    def start_game(self) -> GameResponse:
        """Player requested a new game."""

        # Pick a solution and convert the new Game into a GameModel
        new_game = Game.new_game(self.dictionary, self.rng)
        logger.info("Starting new game: %s", new_game.id)

        # Store the GameModel in the repository
        stored = self.repo.create_game(new_game.to_model())
        logger.info("Game status: %s", self._describe(stored))

        return GameResponse(
            message=MESSAGE_NEW_GAME,
            game_id=stored.id,
            grid=stored.grid,
            current_row=stored.current_row,
            solved=stored.solved,
        )

    def submit_guess(self, request: GuessRequest) -> GuessResponse:
        """
        Evaluate a guess and persist the result.
        ----
        The write only succeeds if nobody else wrote the game since it was loaded.
        On a conflict, the game is reloaded and the guess evaluated again against the fresh state.
        """
        for attempt in range(1, self.max_write_attempts + 1):
            # Retrieve persisted GameModel from repository
            game = Game.from_model(self._fetch_game(request.game_id))
            logger.info("Continuing game: %s", game.id)

            # Attempt the guess (raises before mutating anything if the guess is rejected)
            outcome = game.evaluate(request.guess, self.dictionary)

            try:
                stored = self.repo.update_game(game.to_model())
            except VersionConflictError:
                logger.warning(
                    "Concurrent write on game %s (attempt %d/%d)",
                    game.id,
                    attempt,
                    self.max_write_attempts,
                )
                continue

            logger.info("Game status: %s", self._describe(stored))
            return self._create_guess_response(stored, outcome)

        raise StoreError(
            f"Could not save game {request.game_id!r}: too many concurrent updates."
        )

    def get_hint(self, request: HintRequest) -> HintResponse:
        """Ask the language model for a hint about the solution of an unfinished game."""
        game = Game.from_model(self._fetch_game(request.game_id))
        game.assert_in_progress()

        hint = self.hints.generate_hint(game.solution)
        logger.info("Generated hint for game %s", game.id)
        return HintResponse(message="Here is a hint", game_id=game.id, hint=hint)

    # -- Internal helpers --
    def _create_guess_response(
        self, model: GameModel, outcome: GuessOutcome
    ) -> GuessResponse:
        """Convert info in GameModel + the evaluation outcome to a GuessResponse."""
        return GuessResponse(
            message=outcome.message,
            game_id=model.id,
            grid=model.grid,
            current_row=model.current_row,
            solved=model.solved,
            correct_letters=outcome.correct_letters,
            letter_marks=outcome.letter_marks,
        )

    def _fetch_game(self, game_id: str) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise GameNotFoundError(f"Game with id {game_id!r} not found.")
        return game_model

    @staticmethod
    def _describe(model: GameModel) -> str:
        """Log-friendly summary. Leaves out the solution."""
        return (
            f"id={model.id} row={model.current_row} status={model.status} "
            f"version={model.version}"
        )
