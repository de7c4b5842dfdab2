"""
The Game class is the entrypoint into the domain layer for the service layer.
It holds the rules for a single round of the word game: validating a guess, recording it in the grid,
computing the letter feedback and deciding whether the game continues.
"""

from copy import deepcopy
from dataclasses import dataclass, field
from random import Random
from typing import Self
from uuid import uuid4

from src.core.exceptions import (
    GameOverError,
    GuessFormatError,
    StoreError,
    UnknownWordError,
)
from src.core.models import GameModel
from src.core.shared_types import GameStatus, LetterMark
from src.wordle.dictionary import WORD_LENGTH, WordList, is_well_formed
from src.wordle.feedback import PLACEHOLDER, correct_letters, letter_marks

MAX_ROWS = 6
LAST_ROW = MAX_ROWS - 1
EMPTY_CELL = ""

MESSAGE_NEW_GAME = "New game started"
MESSAGE_SOLVED = "Congratulations!"
MESSAGE_KEEP_TRYING = "Keep trying!"


def blank_grid() -> list[list[str]]:
    return [[EMPTY_CELL] * WORD_LENGTH for _ in range(MAX_ROWS)]


@dataclass
class GuessOutcome:
    """What the player learns from a single accepted guess."""

    message: str
    correct_letters: list[str]
    letter_marks: list[LetterMark]


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    id: str
    solution: str
    grid: list[list[str]]
    current_row: int
    status: GameStatus
    version: int = field(default=0)

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""
        return cls(
            id=model.id,
            solution=model.solution,
            grid=deepcopy(model.grid),
            current_row=model.current_row,
            status=cls._status_from_model(model),
            version=model.version,
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            id=self.id,
            solution=self.solution,
            grid=deepcopy(self.grid),
            current_row=self.current_row,
            solved=self.solved,
            status=self.status.value,
            version=self.version,
        )

    @classmethod
    def new_game(cls, dictionary: WordList, rng: Random | None = None) -> Self:
        """Pick a random solution and start with an empty grid."""
        rng = rng or Random()
        return cls(
            id=str(uuid4()),
            solution=dictionary.random_word(rng),
            grid=blank_grid(),
            current_row=0,
            status=GameStatus.IN_PROGRESS,
        )

    @property
    def solved(self) -> bool:
        return self.status == GameStatus.SOLVED

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    def assert_in_progress(self) -> None:
        if self.is_over:
            raise GameOverError(f"Game is already over. status: {self.status}")

    def evaluate(self, raw_guess: str, dictionary: WordList) -> GuessOutcome:
        """
        Attempt a guess
        -----

        1. game must still be in progress
        2. guess must be exactly 5 letters
        3. guess must be in the word list
        4. write the guess into the current row
        5. compute per-letter feedback
        6. decide the outcome: solved > out of rows > next row

        Steps 1-3 raise without touching the game state.
        """
        self.assert_in_progress()
        guess = self._validate_guess(raw_guess, dictionary)

        self.grid[self.current_row] = list(guess)
        matched = correct_letters(guess, self.solution)
        marks = letter_marks(guess, self.solution)

        if guess == self.solution:
            self.status = GameStatus.SOLVED
            message = MESSAGE_SOLVED
        elif self.current_row == LAST_ROW:
            self.status = GameStatus.EXHAUSTED
            message = f"Game over. The word was {self.solution}."
        else:
            self.current_row += 1
            message = self._keep_trying_message(matched)

        return GuessOutcome(message=message, correct_letters=matched, letter_marks=marks)

    # -- PRIVATE HELPERS ---
    @staticmethod
    def _validate_guess(raw_guess: str, dictionary: WordList) -> str:
        if not is_well_formed(raw_guess):
            raise GuessFormatError(f"Guess must be a {WORD_LENGTH}-letter word.")
        guess = raw_guess.lower()
        if guess not in dictionary:
            raise UnknownWordError("Not a valid word.")
        return guess

    @staticmethod
    def _keep_trying_message(matched: list[str]) -> str:
        if all(letter == PLACEHOLDER for letter in matched):
            return MESSAGE_KEEP_TRYING
        return f"{MESSAGE_KEEP_TRYING} Correct letters: {' '.join(matched)}"

    @staticmethod
    def _status_from_model(model: GameModel) -> GameStatus:
        """Older records carry no status. Derive it from (solved, current_row, grid)."""
        if model.status:
            if model.status not in [s.value for s in GameStatus]:
                raise StoreError(
                    f"Invalid status in record {model.id!r}: {model.status!r}. \nPick one from {','.join(GameStatus)}"
                )
            return GameStatus(model.status)
        if model.solved:
            return GameStatus.SOLVED
        if model.current_row == LAST_ROW and all(model.grid[LAST_ROW]):
            return GameStatus.EXHAUSTED
        return GameStatus.IN_PROGRESS
